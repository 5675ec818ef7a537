"""Image Business Rules — cardinality ceiling, MIME allow-list, size ceiling, base64 format.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Return ValidationResult, never raise; all applicable reasons are accumulated
    - Content type comparison is case-insensitive
    - A leading "data:<mime>;base64," prefix is stripped up to the first comma before decoding;
      a "data:" prefix without a comma is malformed

Design Decisions:
    - Result values instead of exceptions: use cases decide whether a rule breach
      aborts the request or is reported back to the caller
"""

import base64
import binascii

from customer_images.core.domain_types import (
    ALLOWED_CONTENT_TYPES,
    MAX_IMAGE_SIZE_BYTES,
    MAX_IMAGES_PER_CUSTOMER,
)
from customer_images.core.entities import Customer
from customer_images.core.validation_result import ValidationResult


DATA_URI_SCHEME = "data:"


def can_add_images(customer: Customer, count_to_add: int) -> ValidationResult:
    """Ceiling check: existing images + new images must not exceed the maximum."""
    current = len(customer.images)
    if current + count_to_add > MAX_IMAGES_PER_CUSTOMER:
        return ValidationResult.failure(
            f"Cannot exceed {MAX_IMAGES_PER_CUSTOMER} images per customer. "
            f"Current: {current}, Attempting to add: {count_to_add}"
        )
    return ValidationResult.success()


def strip_data_uri(value: str) -> str | None:
    """Payload after a data-URI prefix, the value itself without one, None if malformed."""
    if not value.startswith(DATA_URI_SCHEME):
        return value
    comma = value.find(",")
    if comma == -1:
        return None
    return value[comma + 1:]


def is_valid_base64(value: str | None) -> bool:
    if value is None or not value.strip():
        return False
    payload = strip_data_uri(value)
    if payload is None:
        return False
    # embedded whitespace (line-wrapped payloads) is ignored
    payload = "".join(payload.split())
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def validate_image(
    base64_data: str,
    file_name: str,
    content_type: str,
    size_in_bytes: int,
) -> ValidationResult:
    """Validate one image upload. Accumulates every failing rule."""
    errors: list[str] = []

    if size_in_bytes > MAX_IMAGE_SIZE_BYTES:
        errors.append(
            "Image size exceeds maximum allowed size of "
            f"{MAX_IMAGE_SIZE_BYTES // (1024 * 1024)}MB"
        )
    elif size_in_bytes <= 0:
        errors.append("Image size must be greater than zero")

    if (content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
        errors.append(
            f"Content type '{content_type}' is not allowed. "
            f"Allowed types: {', '.join(ALLOWED_CONTENT_TYPES)}"
        )

    if not file_name or not file_name.strip():
        errors.append("File name cannot be empty")

    if not is_valid_base64(base64_data):
        errors.append("Invalid Base64 format")

    return ValidationResult.from_errors(errors)
