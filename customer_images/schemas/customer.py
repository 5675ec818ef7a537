"""Customer API Schemas — request/response models with field-level validation.

Invariants:
    - CustomerCreate.name: 1-255 chars after strip; email: valid address, <= 255 chars
    - ImageUploadItem mirrors the upload DTO limits: contentType allow-list pattern,
      sizeInBytes in 1..5 MiB
    - Responses never expose the owning customer id on nested images

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
    - Domain rules (ceiling, base64 decoding) are NOT duplicated here: core/enforce_images.py
      owns them
"""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from customer_images.core.domain_types import MAX_IMAGE_SIZE_BYTES
from customer_images.core.entities import Customer, CustomerImage, ImageUpload
from customer_images.schemas.base import CamelCaseModel


PHONE_PATTERN = r"^\+?[0-9 ()\-.]{3,50}$"
CONTENT_TYPE_PATTERN = r"^image/(jpeg|jpg|png|gif|bmp|webp)$"


class CustomerCreate(CamelCaseModel):
    """Customer creation payload."""
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone_number: str | None = Field(None, max_length=50, pattern=PHONE_PATTERN)
    address: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty")
        return v

    @field_validator("email")
    @classmethod
    def email_length(cls, v: str) -> str:
        if len(v) > 255:
            raise ValueError("Email cannot exceed 255 characters")
        return v


class ImageUploadItem(CamelCaseModel):
    base64_data: str = Field(min_length=1)
    file_name: str = Field(min_length=1, max_length=255)
    content_type: str = Field(pattern=CONTENT_TYPE_PATTERN)
    size_in_bytes: int = Field(ge=1, le=MAX_IMAGE_SIZE_BYTES)

    def to_upload(self) -> ImageUpload:
        return ImageUpload(
            base64_data=self.base64_data,
            file_name=self.file_name,
            content_type=self.content_type,
            size_in_bytes=self.size_in_bytes,
        )


class UploadImagesRequest(CamelCaseModel):
    """Batch of images for one customer; an empty list is rejected by the use case."""
    images: list[ImageUploadItem]


class CustomerImageResponse(CamelCaseModel):
    id: UUID
    base64_data: str
    file_name: str
    content_type: str
    size_in_bytes: int
    uploaded_at: datetime

    @classmethod
    def from_domain(cls, image: CustomerImage) -> "CustomerImageResponse":
        return cls(
            id=image.id,
            base64_data=image.base64_data,
            file_name=image.file_name,
            content_type=image.content_type,
            size_in_bytes=image.size_in_bytes,
            uploaded_at=image.uploaded_at,
        )


class CustomerResponse(CamelCaseModel):
    id: UUID
    name: str
    email: str
    phone_number: str | None = None
    address: str | None = None
    images: list[CustomerImageResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            phone_number=customer.phone_number,
            address=customer.address,
            images=[CustomerImageResponse.from_domain(img) for img in customer.images],
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )


class MessageResponse(CamelCaseModel):
    message: str
