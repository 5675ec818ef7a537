"""Root conftest — shared fixtures for storage and repository.

Invariants:
    - Every test gets its own data directory under tmp_path
    - The storage singleton is restored after each test that replaces it
"""

import pytest

import customer_images.infrastructure.json_storage as storage_module
from customer_images.core.entities import Customer
from customer_images.infrastructure.customer_repository import JsonCustomerRepository
from customer_images.infrastructure.json_storage import JsonStorageService


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def storage(data_dir):
    return JsonStorageService(data_dir)


@pytest.fixture
def repository(storage):
    return JsonCustomerRepository(storage)


@pytest.fixture
async def customer(repository):
    """A persisted customer with no images."""
    return await repository.create(
        Customer(name="Jane Doe", email="jane@example.com"),
    )


@pytest.fixture
def storage_singleton(storage):
    """Install storage as the process-wide singleton for the duration of a test."""
    previous = storage_module.storage_service
    storage_module.storage_service = storage
    yield storage
    storage_module.storage_service = previous
