"""Delete Image — remove one image from a customer.

Invariants:
    - Missing customer → NotFoundError (raised)
    - Missing image for an existing customer → failure result (returned, not raised)
    - Repository reporting "not removed" → failure result
"""

import logging
from uuid import UUID

from customer_images.core.errors import NotFoundError
from customer_images.core.repository_protocols import CustomerRepository
from customer_images.core.validation_result import ValidationResult

logger = logging.getLogger(__name__)


class DeleteImageUseCase:
    """Delete-image operation."""

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    async def execute(self, customer_id: UUID, image_id: UUID) -> ValidationResult:
        customer = await self.repository.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError.for_customer(customer_id)

        image = await self.repository.get_customer_image(customer_id, image_id)
        if image is None:
            return ValidationResult.failure(
                f"Image with ID '{image_id}' was not found for customer '{customer_id}'"
            )

        try:
            removed = await self.repository.remove_image(customer_id, image_id)
        except NotFoundError:
            raise
        except Exception as e:
            logger.error(
                f"Failed to delete image: {e}",
                extra={"customer_id": str(customer_id), "image_id": str(image_id)},
            )
            return ValidationResult.failure(f"Failed to delete image: {e}")

        if not removed:
            return ValidationResult.failure(
                f"Failed to remove image with ID '{image_id}' for customer '{customer_id}'"
            )
        return ValidationResult.success()
