"""Abstract repository interfaces and record types."""

from astrobookings.infrastructure.repositories.base import Repository
from astrobookings.infrastructure.repositories.customer_repository import (
    Customer,
    CustomerRepository,
)
from astrobookings.infrastructure.repositories.launch_repository import (
    Launch,
    LaunchRepository,
)
from astrobookings.infrastructure.repositories.rocket_repository import (
    ROCKET_RANGES,
    Rocket,
    RocketRepository,
)

__all__ = [
    "ROCKET_RANGES",
    "Customer",
    "CustomerRepository",
    "Launch",
    "LaunchRepository",
    "Repository",
    "Rocket",
    "RocketRepository",
]
