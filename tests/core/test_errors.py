"""Error Hierarchy — codes, statuses, messages and the REST envelope."""

from uuid import uuid4

from customer_images.core.domain_types import MAX_IMAGES_PER_CUSTOMER
from customer_images.core.errors import (
    ConflictError,
    CustomerImagesError,
    ErrorCategory,
    ImageLimitExceededError,
    InvalidArgumentError,
    NotFoundError,
    OperationFailedError,
    StorageError,
    ValidationError,
)


def test_all_errors_share_the_base():
    for err in (
        ValidationError("x"), NotFoundError("x"), ConflictError("Customer", "1"),
        StorageError("customers", "read"), OperationFailedError("x"),
        InvalidArgumentError("x", "name"), ImageLimitExceededError(10, 1),
    ):
        assert isinstance(err, CustomerImagesError)


def test_http_statuses():
    assert ValidationError("x").http_status == 400
    assert InvalidArgumentError("x", "name").http_status == 400
    assert NotFoundError("x").http_status == 404
    assert ConflictError("Customer", "1").http_status == 409
    assert StorageError("customers", "read").http_status == 500
    assert OperationFailedError("x").http_status == 500


def test_validation_error_keeps_every_message():
    err = ValidationError(["a", "b"])
    assert err.errors == ["a", "b"]
    assert err.message == "a, b"
    assert err.to_response()["error"]["details"] == ["a", "b"]


def test_image_limit_message():
    err = ImageLimitExceededError(10, 1)
    assert isinstance(err, ValidationError)
    assert err.code == "IMAGE_LIMIT_EXCEEDED"
    assert err.category == ErrorCategory.BUSINESS_RULE
    assert err.message == (
        "Cannot add 1 images. Customer already has 10 images. Maximum allowed is 10."
    )


def test_image_limit_defaults_to_the_shared_ceiling():
    err = ImageLimitExceededError(MAX_IMAGES_PER_CUSTOMER, 2)
    assert err.message.endswith(f"Maximum allowed is {MAX_IMAGES_PER_CUSTOMER}.")


def test_not_found_for_customer_carries_context():
    cid = uuid4()
    err = NotFoundError.for_customer(cid)
    assert err.message == f"Customer with ID '{cid}' was not found"
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["context"]["customer_id"] == str(cid)


def test_storage_error_includes_cause():
    err = StorageError("customers", "write", OSError("disk full"))
    assert err.message == "Failed to write storage key 'customers': disk full"
    assert err.context.storage_key == "customers"
