"""Storage Schemas — pydantic models for the on-disk customers JSON document.

Invariants:
    - Field names on disk are lowerCamelCase; timestamps are ISO-8601 UTC
    - Models are lenient on content (empty strings, zero sizes load fine):
      structural checks belong to core/enforce_consistency.py, not to parsing
    - Type errors (non-UUID ids, non-integer sizes, malformed JSON) fail parsing

Design Decisions:
    - Separate from core entities: the document shape can evolve without touching domain code
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import Field, field_serializer, field_validator

from customer_images.core.domain_types import EMPTY_ID
from customer_images.core.entities import Customer, CustomerDataset, CustomerImage
from customer_images.schemas.base import CamelCaseModel


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CustomerImageDocument(CamelCaseModel):
    id: UUID = EMPTY_ID
    customer_id: UUID = EMPTY_ID
    base64_data: str = ""
    file_name: str = ""
    content_type: str = ""
    size_in_bytes: int = 0
    uploaded_at: datetime

    @field_validator("uploaded_at")
    @classmethod
    def normalize_uploaded_at(cls, v: datetime) -> datetime:
        return _as_utc(v)

    @field_serializer("uploaded_at")
    def serialize_uploaded_at(self, v: datetime) -> str:
        return _as_utc(v).isoformat().replace("+00:00", "Z")

    @classmethod
    def from_domain(cls, image: CustomerImage) -> "CustomerImageDocument":
        return cls(
            id=image.id,
            customer_id=image.customer_id,
            base64_data=image.base64_data,
            file_name=image.file_name,
            content_type=image.content_type,
            size_in_bytes=image.size_in_bytes,
            uploaded_at=image.uploaded_at,
        )

    def to_domain(self) -> CustomerImage:
        return CustomerImage(
            id=self.id,
            customer_id=self.customer_id,
            base64_data=self.base64_data,
            file_name=self.file_name,
            content_type=self.content_type,
            size_in_bytes=self.size_in_bytes,
            uploaded_at=self.uploaded_at,
        )


class CustomerDocument(CamelCaseModel):
    id: UUID = EMPTY_ID
    name: str = ""
    email: str = ""
    phone_number: str | None = None
    address: str | None = None
    images: list[CustomerImageDocument] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        return _as_utc(v)

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, v: datetime) -> str:
        return _as_utc(v).isoformat().replace("+00:00", "Z")

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerDocument":
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            phone_number=customer.phone_number,
            address=customer.address,
            images=[CustomerImageDocument.from_domain(img) for img in customer.images],
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )

    def to_domain(self) -> Customer:
        return Customer(
            id=self.id,
            name=self.name,
            email=self.email,
            phone_number=self.phone_number,
            address=self.address,
            images=[img.to_domain() for img in self.images],
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class CustomerDataDocument(CamelCaseModel):
    """Root document stored under the "customers" key."""
    customers: list[CustomerDocument] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, dataset: CustomerDataset) -> "CustomerDataDocument":
        return cls(customers=[CustomerDocument.from_domain(c) for c in dataset.customers])

    def to_domain(self) -> CustomerDataset:
        return CustomerDataset(customers=[c.to_domain() for c in self.customers])
