"""Domain Types — identity types and business constants shared across the codebase.

Invariants:
    - CustomerId and ImageId wrap UUIDs; the nil UUID is the "empty" identifier
    - MAX_IMAGES_PER_CUSTOMER and MAX_IMAGE_SIZE_BYTES are the single source of truth
      for the cardinality and size ceilings
    - AllowedContentType values are lowercase; comparisons lowercase the input first

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for MIME types: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", UUID)
ImageId = NewType("ImageId", UUID)

EMPTY_ID: UUID = UUID(int=0)


def is_empty_id(value: UUID | None) -> bool:
    return value is None or value == EMPTY_ID


# ─── Business Constants ──────────────────────────────────────────

MAX_IMAGES_PER_CUSTOMER: int = 10
MAX_IMAGE_SIZE_BYTES: int = 5 * 1024 * 1024   # 5 MiB

CUSTOMERS_STORAGE_KEY: str = "customers"


# ─── Enums ───────────────────────────────────────────────────────

class AllowedContentType(str, Enum):
    """Image MIME types accepted on upload."""
    JPEG = "image/jpeg"
    JPG = "image/jpg"
    PNG = "image/png"
    GIF = "image/gif"
    BMP = "image/bmp"
    WEBP = "image/webp"


ALLOWED_CONTENT_TYPES: tuple[str, ...] = tuple(t.value for t in AllowedContentType)
