"""Rocket Request Models."""

from typing import Any

from pydantic import Field

from astrobookings.api.v1.common.models import CamelPayload


class RocketPayload(CamelPayload):
    """
    Create or update payload for a rocket.

    On update every field is optional; omitted fields keep their value.

    Attributes:
        name: Display name
        range: suborbital, orbital, moon or mars
        capacity: Maximum passengers (1-10)
    """

    name: Any = Field(None, description="Rocket name", examples=["Falcon Heavy"])
    range: Any = Field(
        None,
        description="Travel range (suborbital, orbital, moon, mars)",
        examples=["orbital"],
    )
    capacity: Any = Field(None, description="Maximum passengers (1-10)", examples=[7])
