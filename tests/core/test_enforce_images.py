"""Image Business Rules — ceiling, MIME allow-list, size ceiling, base64 format.

Tests:
    - can_add_images: boundary at exactly 10, exact failure message
    - validate_image: each rule alone, accumulation of several reasons
    - is_valid_base64: data-URI prefix, whitespace, garbage, empty
"""

from uuid import uuid4

import pytest

from customer_images.core.enforce_images import (
    can_add_images,
    is_valid_base64,
    strip_data_uri,
    validate_image,
)
from customer_images.core.entities import Customer
from tests.factories import PNG_BASE64, make_image


def _customer_with(n: int) -> Customer:
    customer = Customer(name="Jane Doe", email="jane@example.com", id=uuid4())
    customer.images = [make_image(customer.id, id=uuid4()) for _ in range(n)]
    return customer


# ─── can_add_images ─────────────────────────────────────────────

@pytest.mark.parametrize("existing,adding", [(0, 10), (9, 1), (5, 5), (10, 0)])
def test_can_add_images_up_to_the_ceiling(existing, adding):
    assert can_add_images(_customer_with(existing), adding).is_success


def test_can_add_images_rejects_past_the_ceiling():
    result = can_add_images(_customer_with(8), 3)
    assert result.is_failure
    assert result.errors == [
        "Cannot exceed 10 images per customer. Current: 8, Attempting to add: 3"
    ]


# ─── validate_image ─────────────────────────────────────────────

def test_valid_image_passes():
    assert validate_image(PNG_BASE64, "photo.png", "image/png", 68).is_success


def test_size_exactly_5mib_is_allowed():
    assert validate_image(PNG_BASE64, "a.png", "image/png", 5_242_880).is_success


def test_size_over_5mib_rejected():
    result = validate_image(PNG_BASE64, "a.png", "image/png", 5_242_881)
    assert result.errors == ["Image size exceeds maximum allowed size of 5MB"]


def test_zero_size_rejected():
    result = validate_image(PNG_BASE64, "a.png", "image/png", 0)
    assert result.errors == ["Image size must be greater than zero"]


def test_content_type_is_case_insensitive():
    assert validate_image(PNG_BASE64, "a.png", "IMAGE/PNG", 10).is_success


def test_disallowed_content_type_message_lists_allowed_types():
    result = validate_image(PNG_BASE64, "a.pdf", "application/pdf", 10)
    assert result.errors == [
        "Content type 'application/pdf' is not allowed. Allowed types: "
        "image/jpeg, image/jpg, image/png, image/gif, image/bmp, image/webp"
    ]


def test_blank_file_name_rejected():
    result = validate_image(PNG_BASE64, "   ", "image/png", 10)
    assert result.errors == ["File name cannot be empty"]


def test_all_failing_rules_are_accumulated_in_order():
    result = validate_image("not base64!!", "", "text/plain", 6_000_000)
    assert result.errors == [
        "Image size exceeds maximum allowed size of 5MB",
        "Content type 'text/plain' is not allowed. Allowed types: "
        "image/jpeg, image/jpg, image/png, image/gif, image/bmp, image/webp",
        "File name cannot be empty",
        "Invalid Base64 format",
    ]


# ─── base64 ─────────────────────────────────────────────────────

def test_data_uri_prefix_is_accepted():
    assert is_valid_base64(f"data:image/png;base64,{PNG_BASE64}")


def test_data_uri_without_comma_is_malformed():
    assert strip_data_uri("data:image/png;base64") is None
    assert not is_valid_base64("data:image/png;base64")


def test_line_wrapped_payload_is_accepted():
    wrapped = "\n".join(PNG_BASE64[i:i + 16] for i in range(0, len(PNG_BASE64), 16))
    assert is_valid_base64(wrapped)


@pytest.mark.parametrize("value", [None, "", "   ", "@@@@", "abc"])
def test_invalid_base64(value):
    assert not is_valid_base64(value)
