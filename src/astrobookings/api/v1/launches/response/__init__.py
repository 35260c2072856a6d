"""Launch Response Models."""

from dataclasses import asdict
from datetime import datetime

from pydantic import Field

from astrobookings.api.v1.common.models import CamelResponse
from astrobookings.infrastructure.repositories.launch_repository import Launch


class LaunchResponse(CamelResponse):
    """
    Launch record as returned by the API.

    Attributes:
        available_seats: Capacity of the rocket at the last create/update
    """

    id: str = Field(..., description="Launch identifier")
    rocket_id: str = Field(..., description="Rocket identifier")
    launch_date_time: datetime = Field(..., description="Launch date and time (UTC)")
    price: int | float = Field(..., description="Ticket price as stored")
    min_passengers: int = Field(..., description="Minimum passengers")
    available_seats: int = Field(..., description="Seats available on the rocket")

    @classmethod
    def from_record(cls, launch: Launch) -> "LaunchResponse":
        return cls(**asdict(launch))
