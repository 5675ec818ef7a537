"""Customer Repository — aggregate-root persistence over a single JSON document.

Invariants:
    - Every mutation: load → validate → apply exactly one change in memory → validate → write
    - A failed validation never reaches storage; the on-disk document keeps its prior state
    - Every load is validated, so corruption already on disk surfaces as ValidationError
    - Entities handed out and taken in are copies: callers never alias the stored dataset
    - Image and customer timestamps are server-assigned (UTC)
    - add_image refuses to attach past the ceiling (ImageLimitExceededError)

Design Decisions:
    - Whole-document read-modify-write: one key ("customers") holds the full dataset
    - No lock across load/write: concurrent mutations of one customer may lose an update
"""

import copy
import logging
import uuid
from typing import Callable, TypeVar
from uuid import UUID

from customer_images.core.domain_types import (
    CUSTOMERS_STORAGE_KEY,
    MAX_IMAGES_PER_CUSTOMER,
    is_empty_id,
)
from customer_images.core.enforce_consistency import apply_atomically, ensure_consistent
from customer_images.core.entities import Customer, CustomerDataset, CustomerImage, utc_now
from customer_images.core.errors import ConflictError, ImageLimitExceededError, NotFoundError
from customer_images.core.repository_protocols import DocumentStorage
from customer_images.schemas.storage import CustomerDataDocument

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonCustomerRepository:
    """CustomerRepository backed by DocumentStorage."""

    def __init__(
        self, storage: DocumentStorage, storage_key: str = CUSTOMERS_STORAGE_KEY,
    ):
        self.storage = storage
        self.storage_key = storage_key

    # ─── Dataset load / mutate ─────────────────────────────────────

    async def _load(self) -> CustomerDataset:
        document = await self.storage.read(self.storage_key, CustomerDataDocument)
        dataset = document.to_domain() if document is not None else CustomerDataset()
        ensure_consistent(dataset)
        return dataset

    async def _mutate(self, mutation: Callable[[CustomerDataset], T]) -> T:
        dataset = await self._load()
        result = apply_atomically(dataset, lambda: mutation(dataset))
        await self._persist(dataset)
        return result

    async def _persist(self, dataset: CustomerDataset) -> None:
        """Write an already-validated dataset."""
        await self.storage.write(
            self.storage_key, CustomerDataDocument.from_domain(dataset),
        )

    @staticmethod
    def _require_customer(dataset: CustomerDataset, customer_id: UUID) -> Customer:
        customer = dataset.find(customer_id)
        if customer is None:
            raise NotFoundError.for_customer(customer_id)
        return customer

    # ─── Queries ───────────────────────────────────────────────────

    async def get_by_id(self, customer_id: UUID) -> Customer | None:
        dataset = await self._load()
        return dataset.find(customer_id)

    async def get_all(self) -> list[Customer]:
        dataset = await self._load()
        return list(dataset.customers)

    async def get_customer_images(self, customer_id: UUID) -> list[CustomerImage]:
        dataset = await self._load()
        return list(self._require_customer(dataset, customer_id).images)

    async def get_customer_image(
        self, customer_id: UUID, image_id: UUID,
    ) -> CustomerImage | None:
        dataset = await self._load()
        return self._require_customer(dataset, customer_id).find_image(image_id)

    # ─── Customer mutations ────────────────────────────────────────

    async def create(self, customer: Customer) -> Customer:
        """Append a stamped copy: id assigned if empty, both timestamps set.

        The caller's object is left untouched; use the returned customer.
        """
        created = copy.deepcopy(customer)
        if is_empty_id(created.id):
            created.id = uuid.uuid4()
        now = utc_now()
        created.created_at = now
        created.updated_at = now

        def _append(dataset: CustomerDataset) -> None:
            if dataset.find(created.id) is not None:
                raise ConflictError("Customer", str(created.id))
            dataset.customers.append(copy.deepcopy(created))

        await self._mutate(_append)
        logger.info("Customer created", extra={"customer_id": str(created.id)})
        return created

    async def update(self, customer: Customer) -> Customer:
        """Replace the stored record in place, refreshing updated_at."""
        def _replace(dataset: CustomerDataset) -> None:
            index = dataset.index_of(customer.id)
            if index is None:
                raise NotFoundError.for_customer(customer.id)
            customer.updated_at = utc_now()
            dataset.customers[index] = copy.deepcopy(customer)

        await self._mutate(_replace)
        logger.info("Customer updated", extra={"customer_id": str(customer.id)})
        return customer

    async def delete(self, customer_id: UUID) -> bool:
        """Remove the customer and its images. False when absent, never raises for that."""
        dataset = await self._load()
        if dataset.find(customer_id) is None:
            return False

        def _remove() -> None:
            dataset.customers[:] = [c for c in dataset.customers if c.id != customer_id]

        apply_atomically(dataset, _remove)
        await self._persist(dataset)
        logger.info("Customer deleted", extra={"customer_id": str(customer_id)})
        return True

    # ─── Image mutations ───────────────────────────────────────────

    async def add_image(self, customer_id: UUID, image: CustomerImage) -> CustomerImage:
        """Attach image to customer: owner forced, id assigned if empty, upload time stamped."""
        def _attach(dataset: CustomerDataset) -> None:
            customer = self._require_customer(dataset, customer_id)
            if len(customer.images) >= MAX_IMAGES_PER_CUSTOMER:
                raise ImageLimitExceededError(
                    len(customer.images), 1, MAX_IMAGES_PER_CUSTOMER,
                )
            image.customer_id = customer_id
            if is_empty_id(image.id):
                image.id = uuid.uuid4()
            now = utc_now()
            image.uploaded_at = now
            customer.images.append(copy.deepcopy(image))
            customer.updated_at = now

        await self._mutate(_attach)
        logger.info(
            "Image added",
            extra={"customer_id": str(customer_id), "image_id": str(image.id)},
        )
        return image

    async def remove_image(self, customer_id: UUID, image_id: UUID) -> bool:
        """Detach image from customer. False when the image is absent (nothing written)."""
        dataset = await self._load()
        customer = self._require_customer(dataset, customer_id)
        if customer.find_image(image_id) is None:
            return False

        def _detach() -> None:
            customer.images[:] = [img for img in customer.images if img.id != image_id]
            customer.updated_at = utc_now()

        apply_atomically(dataset, _detach)
        await self._persist(dataset)
        logger.info(
            "Image removed",
            extra={"customer_id": str(customer_id), "image_id": str(image_id)},
        )
        return True
