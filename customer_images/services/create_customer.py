"""Create Customer — validates required fields and persists a new customer.

Invariants:
    - Blank name or email raises InvalidArgumentError before storage is touched
    - Identifier and both timestamps are assigned by the repository
    - Any repository failure is re-raised as OperationFailedError, chained to its cause
"""

import logging

from customer_images.core.entities import Customer
from customer_images.core.errors import InvalidArgumentError, OperationFailedError
from customer_images.core.repository_protocols import CustomerRepository

logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    """Create-customer operation."""

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    async def execute(
        self,
        name: str,
        email: str,
        phone_number: str | None = None,
        address: str | None = None,
    ) -> Customer:
        if not name or not name.strip():
            raise InvalidArgumentError("Customer name cannot be empty", "name")
        if not email or not email.strip():
            raise InvalidArgumentError("Customer email cannot be empty", "email")

        customer = Customer(
            name=name, email=email,
            phone_number=phone_number, address=address,
        )
        try:
            return await self.repository.create(customer)
        except Exception as e:
            logger.error(f"Failed to create customer: {e}", exc_info=True)
            raise OperationFailedError(f"Failed to create customer: {e}") from e
