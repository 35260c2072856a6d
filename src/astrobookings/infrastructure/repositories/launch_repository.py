"""
Abstract interface for launch storage.

Launches are keyed by a generated identifier and point at a rocket through
``rocket_id``. The repository does not enforce that reference; the launch
schedule service validates it on every create and update.
"""

from dataclasses import dataclass
from datetime import datetime

from astrobookings.infrastructure.repositories.base import Repository


@dataclass
class Launch:
    """
    Launch record.

    Attributes:
        id: Generated identifier
        rocket_id: Identifier of the rocket flying this launch
        launch_date_time: Scheduled departure (aware, UTC)
        price: Ticket price, strictly positive
        min_passengers: Passengers required for the launch to go ahead
        available_seats: Rocket capacity captured on the last create/update
    """

    id: str
    rocket_id: str
    launch_date_time: datetime
    price: int | float
    min_passengers: int
    available_seats: int


class LaunchRepository(Repository[Launch]):
    """Storage contract for launch records keyed by ``Launch.id``."""
