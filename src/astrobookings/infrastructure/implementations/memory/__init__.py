"""In-memory repository implementations (process lifetime storage)."""

from astrobookings.infrastructure.implementations.memory.customer_repository import (
    InMemoryCustomerRepository,
)
from astrobookings.infrastructure.implementations.memory.launch_repository import (
    InMemoryLaunchRepository,
)
from astrobookings.infrastructure.implementations.memory.rocket_repository import (
    InMemoryRocketRepository,
)

__all__ = [
    "InMemoryCustomerRepository",
    "InMemoryLaunchRepository",
    "InMemoryRocketRepository",
]
