"""Create / Get Customer — argument checks, persistence and failure wrapping."""

from uuid import uuid4

import pytest

from customer_images.core.domain_types import EMPTY_ID
from customer_images.core.errors import InvalidArgumentError, OperationFailedError
from customer_images.services.create_customer import CreateCustomerUseCase
from customer_images.services.get_customer import GetCustomerUseCase


class _BrokenRepository:
    async def create(self, customer):
        raise OSError("disk full")

    async def get_by_id(self, customer_id):
        raise OSError("disk full")


async def test_create_customer_persists(repository):
    customer = await CreateCustomerUseCase(repository).execute(
        "Jane Doe", "jane@example.com", "+1 555 0100", "1 Main St",
    )
    assert customer.id != EMPTY_ID
    assert customer.images == []
    stored = await repository.get_by_id(customer.id)
    assert stored.phone_number == "+1 555 0100"


@pytest.mark.parametrize("name,email,argument", [
    ("", "jane@example.com", "name"),
    ("   ", "jane@example.com", "name"),
    ("Jane Doe", "", "email"),
])
async def test_create_customer_rejects_blank_arguments(repository, data_dir, name, email, argument):
    with pytest.raises(InvalidArgumentError) as exc:
        await CreateCustomerUseCase(repository).execute(name, email)
    assert exc.value.argument == argument
    assert not (data_dir / "customers.json").exists()


async def test_create_customer_wraps_repository_failure():
    with pytest.raises(OperationFailedError) as exc:
        await CreateCustomerUseCase(_BrokenRepository()).execute("Jane", "jane@example.com")
    assert exc.value.message == "Failed to create customer: disk full"
    assert isinstance(exc.value.__cause__, OSError)


async def test_get_customer(repository, customer):
    fetched = await GetCustomerUseCase(repository).execute(customer.id)
    assert fetched.email == "jane@example.com"


async def test_get_missing_customer_returns_none(repository):
    assert await GetCustomerUseCase(repository).execute(uuid4()) is None


async def test_get_customer_wraps_failure():
    with pytest.raises(OperationFailedError):
        await GetCustomerUseCase(_BrokenRepository()).execute(uuid4())
