"""
Abstract interface for rocket storage.

Rockets are keyed by a generated identifier that never changes.
"""

from dataclasses import dataclass

from astrobookings.infrastructure.repositories.base import Repository

ROCKET_RANGES: tuple[str, ...] = ("suborbital", "orbital", "moon", "mars")


@dataclass
class Rocket:
    """
    Rocket record.

    Attributes:
        id: Generated identifier (immutable)
        name: Trimmed, non-empty display name
        range: Travel range class (suborbital, orbital, moon, mars)
        capacity: Maximum passengers (1-10)
    """

    id: str
    name: str
    range: str
    capacity: int


class RocketRepository(Repository[Rocket]):
    """Storage contract for rocket records keyed by ``Rocket.id``."""
