"""Get Customer — fetch one customer with nested images; absence is not an error."""

import logging
from uuid import UUID

from customer_images.core.entities import Customer
from customer_images.core.errors import ErrorContext, OperationFailedError
from customer_images.core.repository_protocols import CustomerRepository

logger = logging.getLogger(__name__)


class GetCustomerUseCase:

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    async def execute(self, customer_id: UUID) -> Customer | None:
        try:
            return await self.repository.get_by_id(customer_id)
        except Exception as e:
            logger.error(
                f"Failed to retrieve customer: {e}",
                extra={"customer_id": str(customer_id)},
            )
            raise OperationFailedError(
                f"Failed to retrieve customer {customer_id}",
                ErrorContext(customer_id=str(customer_id)),
            ) from e
