"""Customer API Schemas — field limits, camelCase aliases, domain mapping."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from customer_images.core.entities import Customer
from customer_images.schemas.customer import (
    CustomerCreate,
    CustomerResponse,
    ImageUploadItem,
)
from tests.factories import make_image, upload_payload


def test_customer_create_accepts_camel_case():
    body = CustomerCreate.model_validate({
        "name": " Jane Doe ", "email": "jane@example.com", "phoneNumber": "555-0100",
    })
    assert body.name == "Jane Doe"
    assert body.phone_number == "555-0100"


@pytest.mark.parametrize("payload", [
    {"name": "", "email": "jane@example.com"},
    {"name": "x" * 256, "email": "jane@example.com"},
    {"name": "Jane", "email": "jane"},
    {"name": "Jane", "email": "jane@example.com", "phoneNumber": "call me"},
    {"name": "Jane", "email": "jane@example.com", "address": "a" * 501},
])
def test_customer_create_rejects(payload):
    with pytest.raises(ValidationError):
        CustomerCreate.model_validate(payload)


def test_upload_item_limits():
    assert ImageUploadItem.model_validate(upload_payload()).size_in_bytes > 0
    with pytest.raises(ValidationError):
        ImageUploadItem.model_validate(upload_payload(sizeInBytes=5 * 1024 * 1024 + 1))
    with pytest.raises(ValidationError):
        ImageUploadItem.model_validate(upload_payload(contentType="image/tiff"))
    with pytest.raises(ValidationError):
        ImageUploadItem.model_validate(upload_payload(fileName=""))


def test_upload_item_to_domain():
    upload = ImageUploadItem.model_validate(upload_payload(fileName="a.png")).to_upload()
    assert upload.file_name == "a.png"
    assert upload.content_type == "image/png"


def test_customer_response_dumps_camel_case_without_image_owner():
    customer = Customer(name="Jane Doe", email="jane@example.com", id=uuid4())
    customer.images.append(make_image(customer.id, id=uuid4()))
    dumped = CustomerResponse.from_domain(customer).model_dump(by_alias=True)
    assert {"phoneNumber", "createdAt", "updatedAt"} <= set(dumped)
    assert "customerId" not in dumped["images"][0]
    assert dumped["images"][0]["fileName"] == "photo.png"
