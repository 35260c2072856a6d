"""In-memory launch repository."""

from astrobookings.infrastructure.implementations.memory.base import InMemoryRepository
from astrobookings.infrastructure.repositories.launch_repository import (
    Launch,
    LaunchRepository,
)


class InMemoryLaunchRepository(InMemoryRepository[Launch], LaunchRepository):
    """Launches keyed by id."""

    resource_name = "launch"

    def _key(self, record: Launch) -> str:
        return record.id
