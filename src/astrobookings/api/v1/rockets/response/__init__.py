"""Rocket Response Models."""

from dataclasses import asdict

from pydantic import Field

from astrobookings.api.v1.common.models import CamelResponse
from astrobookings.infrastructure.repositories.rocket_repository import Rocket


class RocketResponse(CamelResponse):
    """Rocket record as returned by the API."""

    id: str = Field(..., description="Rocket identifier")
    name: str = Field(..., description="Rocket name")
    range: str = Field(..., description="Travel range")
    capacity: int = Field(..., description="Maximum passengers")

    @classmethod
    def from_record(cls, rocket: Rocket) -> "RocketResponse":
        return cls(**asdict(rocket))
