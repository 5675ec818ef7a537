"""Dependency Wiring — FastAPI providers for storage, repository, and use cases.

Invariants:
    - One JsonStorageService per process (infrastructure/json_storage.storage_service)
    - Repository and use cases are stateless; built per request from the shared storage
    - Tests override get_storage only; everything above it follows

Design Decisions:
    - Depends() chain over a DI container: explicit, overridable via app.dependency_overrides
"""

from fastapi import Depends

import customer_images.infrastructure.json_storage as storage_module
from customer_images.config import Settings, get_settings
from customer_images.core.repository_protocols import CustomerRepository
from customer_images.infrastructure.customer_repository import JsonCustomerRepository
from customer_images.infrastructure.json_storage import JsonStorageService
from customer_images.services.create_customer import CreateCustomerUseCase
from customer_images.services.delete_image import DeleteImageUseCase
from customer_images.services.get_customer import GetCustomerUseCase
from customer_images.services.get_customer_images import GetCustomerImagesUseCase
from customer_images.services.upload_images import UploadImagesUseCase


def get_storage() -> JsonStorageService:
    if storage_module.storage_service is None:
        raise RuntimeError("Storage not initialized")
    return storage_module.storage_service


def get_repository(
    storage: JsonStorageService = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> CustomerRepository:
    return JsonCustomerRepository(storage, settings.customers_key)


def get_create_customer(
    repository: CustomerRepository = Depends(get_repository),
) -> CreateCustomerUseCase:
    return CreateCustomerUseCase(repository)


def get_get_customer(
    repository: CustomerRepository = Depends(get_repository),
) -> GetCustomerUseCase:
    return GetCustomerUseCase(repository)


def get_upload_images(
    repository: CustomerRepository = Depends(get_repository),
) -> UploadImagesUseCase:
    return UploadImagesUseCase(repository)


def get_get_customer_images(
    repository: CustomerRepository = Depends(get_repository),
) -> GetCustomerImagesUseCase:
    return GetCustomerImagesUseCase(repository)


def get_delete_image(
    repository: CustomerRepository = Depends(get_repository),
) -> DeleteImageUseCase:
    return DeleteImageUseCase(repository)
