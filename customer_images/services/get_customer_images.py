"""Get Customer Images — a customer's images, oldest upload first.

Invariants:
    - Missing customer → NotFoundError; any other repository failure → OperationFailedError
    - Ordering is by uploaded_at ascending, independent of storage order (stable for ties)
"""

import logging
from uuid import UUID

from customer_images.core.entities import CustomerImage
from customer_images.core.errors import ErrorContext, NotFoundError, OperationFailedError
from customer_images.core.repository_protocols import CustomerRepository

logger = logging.getLogger(__name__)


class GetCustomerImagesUseCase:

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    async def execute(self, customer_id: UUID) -> list[CustomerImage]:
        try:
            customer = await self.repository.get_by_id(customer_id)
            if customer is None:
                raise NotFoundError.for_customer(customer_id)
            images = await self.repository.get_customer_images(customer_id)
        except NotFoundError:
            raise
        except Exception as e:
            logger.error(
                f"Failed to retrieve images: {e}",
                extra={"customer_id": str(customer_id)},
            )
            raise OperationFailedError(
                f"Failed to retrieve images for customer {customer_id}",
                ErrorContext(customer_id=str(customer_id)),
            ) from e
        return sorted(images, key=lambda img: img.uploaded_at)
