"""Dataset Consistency Enforcement — structural invariants checked on every load and save.

Invariants:
    - validate_dataset is PURE: no IO, no mutation, returns every violation found
    - Message order: duplicate customer ids, then per customer (dataset order):
      empty id, name, email, image count, duplicate image ids, then per image:
      empty id, owner mismatch, payload, file name, content type, size
    - ensure_consistent raises one ValidationError carrying the full list
    - apply_atomically leaves the dataset untouched when the mutation or the check fails

Design Decisions:
    - Accumulate instead of fail-fast: a corrupted file is reported in a single pass
    - Same check on load and save: corruption on disk is detected before any mutation
"""

from collections import Counter
from typing import Callable, TypeVar
from uuid import UUID

from customer_images.core.domain_types import MAX_IMAGES_PER_CUSTOMER, is_empty_id
from customer_images.core.entities import Customer, CustomerDataset, CustomerImage
from customer_images.core.errors import ValidationError

T = TypeVar("T")


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def _duplicates(ids: list[UUID]) -> list[UUID]:
    """Ids seen more than once, in first-seen order."""
    counts = Counter(ids)
    return [i for i in counts if counts[i] > 1]


def _join_ids(ids: list[UUID]) -> str:
    return ", ".join(str(i) for i in ids)


def check_image(image: CustomerImage, customer_id: UUID) -> list[str]:
    errors: list[str] = []
    prefix = f"Customer {customer_id}"
    if is_empty_id(image.id):
        errors.append(f"{prefix}: Image ID cannot be empty")
    if image.customer_id != customer_id:
        errors.append(
            f"{prefix}: Image {image.id} has mismatched customer ID ({image.customer_id})"
        )
    if _is_blank(image.base64_data):
        errors.append(f"{prefix}: Image {image.id} has empty Base64 data")
    if _is_blank(image.file_name):
        errors.append(f"{prefix}: Image {image.id} has empty file name")
    if _is_blank(image.content_type):
        errors.append(f"{prefix}: Image {image.id} has empty content type")
    if image.size_in_bytes <= 0:
        errors.append(f"{prefix}: Image {image.id} has invalid size ({image.size_in_bytes})")
    return errors


def check_customer(customer: Customer) -> list[str]:
    errors: list[str] = []
    prefix = f"Customer {customer.id}"
    if is_empty_id(customer.id):
        errors.append("Customer ID cannot be empty")
    if _is_blank(customer.name):
        errors.append(f"{prefix}: Name cannot be empty")
    if _is_blank(customer.email):
        errors.append(f"{prefix}: Email cannot be empty")

    image_count = len(customer.images)
    if image_count > MAX_IMAGES_PER_CUSTOMER:
        errors.append(
            f"{prefix}: Cannot have more than {MAX_IMAGES_PER_CUSTOMER} images "
            f"(current: {image_count})"
        )

    duplicate_images = _duplicates([img.id for img in customer.images])
    if duplicate_images:
        errors.append(f"{prefix}: Duplicate image IDs found: {_join_ids(duplicate_images)}")

    for image in customer.images:
        errors.extend(check_image(image, customer.id))
    return errors


def validate_dataset(dataset: CustomerDataset) -> list[str]:
    """Collect every structural violation in the dataset. Empty list means consistent."""
    errors: list[str] = []
    duplicate_customers = _duplicates([c.id for c in dataset.customers])
    if duplicate_customers:
        errors.append(f"Duplicate customer IDs found: {_join_ids(duplicate_customers)}")
    for customer in dataset.customers:
        errors.extend(check_customer(customer))
    return errors


def ensure_consistent(dataset: CustomerDataset | None) -> None:
    """Raise ValidationError listing every violation, or return None."""
    if dataset is None:
        raise ValidationError("Data container cannot be null")
    errors = validate_dataset(dataset)
    if errors:
        raise ValidationError(errors)


def apply_atomically(dataset: CustomerDataset, mutation: Callable[[], T]) -> T:
    """Run mutation against dataset, then validate; restore the prior state on any failure."""
    backup = dataset.snapshot()
    try:
        result = mutation()
        ensure_consistent(dataset)
    except Exception:
        dataset.customers[:] = backup.customers
        raise
    return result
