"""
Rocket API endpoints.

CRUD over the rocket catalog. Validation failures surface as 400 Problem
Details with the full field error list; unknown ids as 404.
"""

from fastapi import APIRouter, Response, status
from loguru import logger

from astrobookings.api.v1.common.results import require_deleted, require_found, unwrap
from astrobookings.api.v1.rockets.request import RocketPayload
from astrobookings.api.v1.rockets.response import RocketResponse
from astrobookings.di import RocketCatalogDep

router = APIRouter()

RESOURCE = "Rocket"


@router.post(
    "",
    response_model=RocketResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a rocket",
)
async def create_rocket(
    payload: RocketPayload,
    catalog: RocketCatalogDep,
) -> RocketResponse:
    """
    Create a rocket.

    Args:
        payload: Rocket fields
        catalog: Rocket catalog (injected)

    Returns:
        The stored rocket
    """
    rocket = unwrap(catalog.create(payload.to_data()))
    logger.info(f"POST /rockets - created {rocket.id}")
    return RocketResponse.from_record(rocket)


@router.get("", response_model=list[RocketResponse], summary="List rockets")
async def list_rockets(catalog: RocketCatalogDep) -> list[RocketResponse]:
    """List every rocket in creation order."""
    return [RocketResponse.from_record(rocket) for rocket in catalog.list_all()]


@router.get("/{rocket_id}", response_model=RocketResponse, summary="Get a rocket")
async def get_rocket(rocket_id: str, catalog: RocketCatalogDep) -> RocketResponse:
    """
    Get a rocket by id.

    Raises:
        ResourceNotFoundError: If the rocket does not exist (404)
    """
    rocket = require_found(catalog.get_by_id(rocket_id), RESOURCE, rocket_id)
    return RocketResponse.from_record(rocket)


@router.put(
    "/{rocket_id}",
    response_model=RocketResponse,
    summary="Update a rocket",
    description="Merge the supplied fields over the stored rocket and re-validate.",
)
async def update_rocket(
    rocket_id: str,
    payload: RocketPayload,
    catalog: RocketCatalogDep,
) -> RocketResponse:
    """
    Update a rocket.

    Raises:
        ResourceValidationError: If the merged rocket is invalid (400)
        ResourceNotFoundError: If the rocket does not exist (404)
    """
    rocket = unwrap(catalog.update(rocket_id, payload.to_data()))
    logger.info(f"PUT /rockets/{rocket_id} - updated")
    return RocketResponse.from_record(rocket)


@router.delete(
    "/{rocket_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a rocket",
    description="Launches that reference the rocket are kept as they are.",
)
async def delete_rocket(rocket_id: str, catalog: RocketCatalogDep) -> Response:
    """
    Delete a rocket.

    Raises:
        ResourceNotFoundError: If the rocket does not exist (404)
    """
    require_deleted(catalog.delete(rocket_id), RESOURCE, rocket_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
