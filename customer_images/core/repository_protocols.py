"""Boundary Protocols — contracts between core/services and infrastructure.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by infrastructure via dependency injection (api/dependencies.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass fakes without inheritance
    - Async in Protocol: implementations do file IO off the event loop
"""

from typing import Protocol, TypeVar
from uuid import UUID

from pydantic import BaseModel

from customer_images.core.entities import Customer, CustomerImage

M = TypeVar("M", bound=BaseModel)


class DocumentStorage(Protocol):
    """Contract for keyed JSON document persistence."""
    async def read(self, key: str, model: type[M]) -> M | None: ...
    async def write(self, key: str, value: BaseModel) -> None: ...
    async def exists(self, key: str) -> bool: ...
    async def delete(self, key: str) -> None: ...


class CustomerRepository(Protocol):
    """Contract for the customer aggregate persistence gateway."""
    async def get_by_id(self, customer_id: UUID) -> Customer | None: ...
    async def get_all(self) -> list[Customer]: ...
    async def create(self, customer: Customer) -> Customer: ...
    async def update(self, customer: Customer) -> Customer: ...
    async def delete(self, customer_id: UUID) -> bool: ...
    async def get_customer_images(self, customer_id: UUID) -> list[CustomerImage]: ...
    async def get_customer_image(
        self, customer_id: UUID, image_id: UUID,
    ) -> CustomerImage | None: ...
    async def add_image(self, customer_id: UUID, image: CustomerImage) -> CustomerImage: ...
    async def remove_image(self, customer_id: UUID, image_id: UUID) -> bool: ...
