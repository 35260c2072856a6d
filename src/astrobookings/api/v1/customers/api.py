"""
Customer API endpoints.

Customers are addressed by email in the path. Starlette percent-decodes path
parameters, so ``/customers/ada%2Btrips%40example.com`` looks up
``ada+trips@example.com``.
"""

from fastapi import APIRouter, Response, status
from loguru import logger

from astrobookings.api.v1.common.results import require_deleted, require_found, unwrap
from astrobookings.api.v1.customers.request import CustomerPayload
from astrobookings.api.v1.customers.response import CustomerResponse
from astrobookings.di import CustomerDirectoryDep

router = APIRouter()

RESOURCE = "Customer"


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a customer",
)
async def create_customer(
    payload: CustomerPayload,
    directory: CustomerDirectoryDep,
) -> CustomerResponse:
    """
    Create a customer.

    Args:
        payload: Customer fields
        directory: Customer directory (injected)

    Returns:
        The stored customer
    """
    customer = unwrap(directory.create(payload.to_data()))
    logger.info(f"POST /customers - created {customer.email}")
    return CustomerResponse.from_record(customer)


@router.get("", response_model=list[CustomerResponse], summary="List customers")
async def list_customers(directory: CustomerDirectoryDep) -> list[CustomerResponse]:
    """List every customer in creation order."""
    return [
        CustomerResponse.from_record(customer) for customer in directory.list_all()
    ]


@router.get("/{email}", response_model=CustomerResponse, summary="Get a customer")
async def get_customer(email: str, directory: CustomerDirectoryDep) -> CustomerResponse:
    """
    Get a customer by email.

    Raises:
        ResourceNotFoundError: If the customer does not exist (404)
    """
    customer = require_found(directory.get_by_email(email), RESOURCE, email)
    return CustomerResponse.from_record(customer)


@router.put(
    "/{email}",
    response_model=CustomerResponse,
    summary="Update a customer",
    description="""
    Merge the supplied fields over the stored customer. Sending a new `email`
    moves the customer to that address; the old address stops resolving.
    """,
)
async def update_customer(
    email: str,
    payload: CustomerPayload,
    directory: CustomerDirectoryDep,
) -> CustomerResponse:
    """
    Update a customer.

    Raises:
        ResourceValidationError: If the merged customer is invalid (400)
        ResourceNotFoundError: If the customer does not exist (404)
    """
    customer = unwrap(directory.update(email, payload.to_data()))
    logger.info(f"PUT /customers/{email} - updated")
    return CustomerResponse.from_record(customer)


@router.delete(
    "/{email}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a customer",
)
async def delete_customer(email: str, directory: CustomerDirectoryDep) -> Response:
    """
    Delete a customer.

    Raises:
        ResourceNotFoundError: If the customer does not exist (404)
    """
    require_deleted(directory.delete(email), RESOURCE, email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
