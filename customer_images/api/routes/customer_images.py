"""Customer Images — upload, list and delete the images attached to a customer.

Invariants:
    - Upload is all-or-nothing at validation time: any invalid item rejects the batch
    - A failed ValidationResult from a use case → 400 with every error in details
    - Absent customer → 404 (NotFoundError raised by the use case)

Design Decisions:
    - Failure results are raised as ValidationError (business_rule category) so the
      global handler owns the error envelope
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from customer_images.api.dependencies import (
    get_delete_image,
    get_get_customer_images,
    get_upload_images,
)
from customer_images.core.errors import ErrorCategory, ErrorContext, ValidationError
from customer_images.core.validation_result import ValidationResult
from customer_images.schemas.customer import (
    CustomerImageResponse,
    MessageResponse,
    UploadImagesRequest,
)
from customer_images.services.delete_image import DeleteImageUseCase
from customer_images.services.get_customer_images import GetCustomerImagesUseCase
from customer_images.services.upload_images import UploadImagesUseCase

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/customers/{customer_id}/images", tags=["images"])


def _raise_on_failure(
    result: ValidationResult, code: str, context: ErrorContext,
) -> None:
    if result.is_failure:
        raise ValidationError(
            result.errors, context, code, ErrorCategory.BUSINESS_RULE,
        )


@router.post(
    "", response_model=MessageResponse, status_code=status.HTTP_201_CREATED,
)
async def upload_images(
    customer_id: UUID,
    body: UploadImagesRequest,
    use_case: UploadImagesUseCase = Depends(get_upload_images),
):
    """Attach a batch of base64 images to the customer."""
    result = await use_case.execute(
        customer_id, [item.to_upload() for item in body.images],
    )
    _raise_on_failure(
        result, "IMAGE_UPLOAD_REJECTED",
        ErrorContext(customer_id=str(customer_id)),
    )
    return MessageResponse(message="Images uploaded successfully")


@router.get(
    "", response_model=list[CustomerImageResponse], response_model_by_alias=True,
)
async def list_images(
    customer_id: UUID,
    use_case: GetCustomerImagesUseCase = Depends(get_get_customer_images),
):
    images = await use_case.execute(customer_id)
    return [CustomerImageResponse.from_domain(img) for img in images]


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    customer_id: UUID,
    image_id: UUID,
    use_case: DeleteImageUseCase = Depends(get_delete_image),
):
    """Remove one image; unknown image id → 400, unknown customer → 404."""
    result = await use_case.execute(customer_id, image_id)
    _raise_on_failure(
        result, "IMAGE_DELETE_REJECTED",
        ErrorContext(customer_id=str(customer_id), image_id=str(image_id)),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
