"""Launch Request Models."""

from typing import Any

from pydantic import Field

from astrobookings.api.v1.common.models import CamelPayload


class LaunchPayload(CamelPayload):
    """
    Create or update payload for a launch.

    Attributes:
        rocket_id: Rocket flying the launch (``rocketId``)
        launch_date_time: ISO 8601 date-time in the future (``launchDateTime``)
        price: Ticket price, strictly positive
        min_passengers: Passengers needed for the launch (``minPassengers``)
    """

    rocket_id: Any = Field(None, description="Rocket identifier")
    launch_date_time: Any = Field(
        None,
        description="ISO 8601 launch date and time",
        examples=["2030-07-20T20:17:00Z"],
    )
    price: Any = Field(None, description="Ticket price", examples=[250000])
    min_passengers: Any = Field(
        None, description="Minimum passengers (1 to rocket capacity)", examples=[3]
    )
