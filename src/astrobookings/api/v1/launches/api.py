"""
Launch API endpoints.

CRUD over the launch schedule. Every create and update re-resolves the
referenced rocket, so ``availableSeats`` always reflects its current capacity.
"""

from fastapi import APIRouter, Response, status
from loguru import logger

from astrobookings.api.v1.common.results import require_deleted, require_found, unwrap
from astrobookings.api.v1.launches.request import LaunchPayload
from astrobookings.api.v1.launches.response import LaunchResponse
from astrobookings.di import LaunchScheduleDep

router = APIRouter()

RESOURCE = "Launch"


@router.post(
    "",
    response_model=LaunchResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule a launch",
    description="""
    Schedule a launch of an existing rocket.

    - `rocketId` must reference an existing rocket
    - `launchDateTime` must be an ISO 8601 date-time in the future
    - `price` must be greater than zero
    - `minPassengers` must be between 1 and the rocket capacity

    `availableSeats` is initialized from the rocket capacity.
    """,
)
async def create_launch(
    payload: LaunchPayload,
    schedule: LaunchScheduleDep,
) -> LaunchResponse:
    """
    Create a launch.

    Args:
        payload: Launch fields
        schedule: Launch schedule (injected)

    Returns:
        The stored launch
    """
    launch = unwrap(schedule.create(payload.to_data()))
    logger.info(f"POST /launches - created {launch.id}")
    return LaunchResponse.from_record(launch)


@router.get("", response_model=list[LaunchResponse], summary="List launches")
async def list_launches(schedule: LaunchScheduleDep) -> list[LaunchResponse]:
    """List every launch in creation order."""
    return [LaunchResponse.from_record(launch) for launch in schedule.list_all()]


@router.get("/{launch_id}", response_model=LaunchResponse, summary="Get a launch")
async def get_launch(launch_id: str, schedule: LaunchScheduleDep) -> LaunchResponse:
    """
    Get a launch by id.

    Raises:
        ResourceNotFoundError: If the launch does not exist (404)
    """
    launch = require_found(schedule.get_by_id(launch_id), RESOURCE, launch_id)
    return LaunchResponse.from_record(launch)


@router.put(
    "/{launch_id}",
    response_model=LaunchResponse,
    summary="Update a launch",
    description="""
    Merge the supplied fields over the stored launch and re-validate it as a
    whole. `rocketId` may point to a different rocket; `availableSeats` is
    recomputed from the rocket's current capacity.
    """,
)
async def update_launch(
    launch_id: str,
    payload: LaunchPayload,
    schedule: LaunchScheduleDep,
) -> LaunchResponse:
    """
    Update a launch.

    Raises:
        ResourceValidationError: If the merged launch is invalid (400)
        ResourceNotFoundError: If the launch does not exist (404)
    """
    launch = unwrap(schedule.update(launch_id, payload.to_data()))
    logger.info(f"PUT /launches/{launch_id} - updated")
    return LaunchResponse.from_record(launch)


@router.delete(
    "/{launch_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a launch",
)
async def delete_launch(launch_id: str, schedule: LaunchScheduleDep) -> Response:
    """
    Delete a launch.

    Raises:
        ResourceNotFoundError: If the launch does not exist (404)
    """
    require_deleted(schedule.delete(launch_id), RESOURCE, launch_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
