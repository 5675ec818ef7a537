"""Domain Entities — Customer aggregate root, its images, and the dataset container.

Invariants:
    - Customer owns its images; images list order is upload order
    - CustomerDataset.customers order is insertion order
    - Entities are plain dataclasses: no IO, no serialization concerns
    - Timestamps are timezone-aware UTC

Design Decisions:
    - Dataclasses over ORM/pydantic models: the core stays independent of storage format
      (schemas/storage.py maps to and from the JSON document)
    - New entities default to EMPTY_ID; the repository assigns real identifiers
"""

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from customer_images.core.domain_types import EMPTY_ID


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CustomerImage:
    """Image attachment owned by a single customer."""

    customer_id: UUID
    base64_data: str
    file_name: str
    content_type: str
    size_in_bytes: int
    id: UUID = EMPTY_ID
    uploaded_at: datetime = field(default_factory=utc_now)


@dataclass
class Customer:
    """Customer profile — aggregate root for CustomerImage."""

    name: str
    email: str
    phone_number: str | None = None
    address: str | None = None
    id: UUID = EMPTY_ID
    images: list[CustomerImage] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def find_image(self, image_id: UUID) -> CustomerImage | None:
        return next((img for img in self.images if img.id == image_id), None)


@dataclass
class CustomerDataset:
    """Root container persisted as one JSON document."""

    customers: list[Customer] = field(default_factory=list)

    def find(self, customer_id: UUID) -> Customer | None:
        return next((c for c in self.customers if c.id == customer_id), None)

    def index_of(self, customer_id: UUID) -> int | None:
        for index, customer in enumerate(self.customers):
            if customer.id == customer_id:
                return index
        return None

    def snapshot(self) -> "CustomerDataset":
        """Deep copy — mutations on the copy never reach the original."""
        return copy.deepcopy(self)


@dataclass(frozen=True)
class ImageUpload:
    """One image in an upload request, before it becomes a CustomerImage."""

    base64_data: str
    file_name: str
    content_type: str
    size_in_bytes: int
