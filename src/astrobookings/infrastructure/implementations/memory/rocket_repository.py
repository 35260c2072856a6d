"""In-memory rocket repository."""

from astrobookings.infrastructure.implementations.memory.base import InMemoryRepository
from astrobookings.infrastructure.repositories.rocket_repository import (
    Rocket,
    RocketRepository,
)


class InMemoryRocketRepository(InMemoryRepository[Rocket], RocketRepository):
    """Rockets keyed by id."""

    resource_name = "rocket"

    def _key(self, record: Rocket) -> str:
        return record.id
