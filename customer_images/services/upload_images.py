"""Upload Images — batch upload with all-or-nothing validation.

Invariants:
    - Empty batch → failure result, storage untouched
    - Missing customer → NotFoundError
    - Ceiling breach → failure result from can_add_images, storage untouched
    - Every image is validated before any write; errors from all images are accumulated
      and a single invalid image rejects the whole batch
    - Valid batches are written one image per repository call, in input order

Design Decisions:
    - Business-rule outcomes are returned as ValidationResult; only not-found raises
    - Not batched into one write: a storage failure midway leaves earlier images persisted
"""

import logging
from uuid import UUID

from customer_images.core.enforce_images import can_add_images, validate_image
from customer_images.core.entities import CustomerImage, ImageUpload
from customer_images.core.errors import (
    ImageLimitExceededError,
    NotFoundError,
    ValidationError,
)
from customer_images.core.repository_protocols import CustomerRepository
from customer_images.core.validation_result import ValidationResult

logger = logging.getLogger(__name__)


class UploadImagesUseCase:
    """Upload-images operation."""

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    async def execute(
        self, customer_id: UUID, images: list[ImageUpload] | None,
    ) -> ValidationResult:
        if not images:
            return ValidationResult.failure("At least one image must be provided")

        customer = await self.repository.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError.for_customer(customer_id)

        count_check = can_add_images(customer, len(images))
        if count_check.is_failure:
            logger.info(
                f"Image upload rejected: {count_check.error_message}",
                extra={"customer_id": str(customer_id), "image_count": len(images)},
            )
            return count_check

        errors, validated = self._validate_all(customer_id, images)
        if errors:
            return ValidationResult.failure(errors)

        try:
            for image in validated:
                await self.repository.add_image(customer_id, image)
        except NotFoundError:
            raise
        except ImageLimitExceededError as e:
            return ValidationResult.failure(e.message)
        except ValidationError as e:
            return ValidationResult.failure(e.errors)
        except Exception as e:
            logger.error(
                f"Failed to upload images: {e}",
                extra={"customer_id": str(customer_id)}, exc_info=True,
            )
            return ValidationResult.failure(f"Failed to upload images: {e}")

        logger.info(
            "Images uploaded",
            extra={"customer_id": str(customer_id), "image_count": len(validated)},
        )
        return ValidationResult.success()

    @staticmethod
    def _validate_all(
        customer_id: UUID, images: list[ImageUpload],
    ) -> tuple[list[str], list[CustomerImage]]:
        errors: list[str] = []
        validated: list[CustomerImage] = []
        for upload in images:
            result = validate_image(
                upload.base64_data, upload.file_name,
                upload.content_type, upload.size_in_bytes,
            )
            if result.is_failure:
                errors.extend(result.errors)
                continue
            validated.append(CustomerImage(
                customer_id=customer_id,
                base64_data=upload.base64_data,
                file_name=upload.file_name,
                content_type=upload.content_type,
                size_in_bytes=upload.size_in_bytes,
            ))
        return errors, validated
