"""Customers — create, fetch and delete customer profiles.

Invariants:
    - Request bodies are validated by Pydantic before reaching the route handler
    - Absent customer → NotFoundError (404 via the global handler)
    - Responses are camelCase (CamelCaseModel aliases)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from customer_images.api.dependencies import (
    get_create_customer,
    get_get_customer,
    get_repository,
)
from customer_images.core.errors import NotFoundError
from customer_images.core.repository_protocols import CustomerRepository
from customer_images.schemas.customer import CustomerCreate, CustomerResponse
from customer_images.services.create_customer import CreateCustomerUseCase
from customer_images.services.get_customer import GetCustomerUseCase

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


@router.post(
    "", response_model=CustomerResponse, response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    body: CustomerCreate,
    use_case: CreateCustomerUseCase = Depends(get_create_customer),
):
    """Create a customer with no images."""
    customer = await use_case.execute(
        name=body.name, email=str(body.email),
        phone_number=body.phone_number, address=body.address,
    )
    return CustomerResponse.from_domain(customer)


@router.get(
    "/{customer_id}", response_model=CustomerResponse, response_model_by_alias=True,
)
async def get_customer(
    customer_id: UUID,
    use_case: GetCustomerUseCase = Depends(get_get_customer),
):
    """Customer profile with nested images."""
    customer = await use_case.execute(customer_id)
    if customer is None:
        raise NotFoundError.for_customer(customer_id)
    return CustomerResponse.from_domain(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: UUID,
    repository: CustomerRepository = Depends(get_repository),
):
    """Delete a customer together with all of its images."""
    if not await repository.delete(customer_id):
        raise NotFoundError.for_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
