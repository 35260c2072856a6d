"""
Repository factory for provider selection.

Selects repository implementations and identifier generators based on
configuration:
- memory: dict-backed storage for the lifetime of the process

Usage:
    from astrobookings.infrastructure import RepositoryFactory
    from astrobookings.config import get_settings

    # Option 1: From settings
    factory = RepositoryFactory.from_settings(get_settings())

    # Option 2: Manual configuration
    factory = RepositoryFactory(provider="memory", id_strategy="sequential")

    # Get repositories
    rocket_repo = factory.get_rocket_repository()
    launch_repo = factory.get_launch_repository()
    customer_repo = factory.get_customer_repository()
"""

from typing import TYPE_CHECKING, Literal

from loguru import logger

from astrobookings.infrastructure.repositories import (
    CustomerRepository,
    LaunchRepository,
    RocketRepository,
)
from astrobookings.utils.ids import IdGenerator, build_id_generator

if TYPE_CHECKING:
    from astrobookings.config import Settings

RepositoryProvider = Literal["memory"]


class RepositoryFactory:
    """
    Factory for creating repository instances and id generators.

    Each call returns a fresh, empty repository; callers wire one instance per
    collection into the services.
    """

    def __init__(
        self,
        provider: RepositoryProvider | None = None,
        id_strategy: str = "uuid",
    ):
        """
        Initialize repository factory.

        Args:
            provider: Repository provider. If None, uses "memory".
            id_strategy: Identifier generation strategy ("uuid", "sequential")
        """
        if provider is None:
            provider = "memory"

        self.provider = provider
        self.id_strategy = id_strategy

        logger.info(
            f"Initialized RepositoryFactory with provider: {provider}, "
            f"id strategy: {id_strategy}"
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RepositoryFactory":
        """
        Create factory from Settings object.

        Args:
            settings: Application settings from config.py

        Returns:
            RepositoryFactory configured from settings
        """
        return cls(
            provider=settings.repository_provider,
            id_strategy=settings.id_strategy,
        )

    def get_rocket_repository(self) -> RocketRepository:
        """
        Get rocket repository for configured provider.

        Raises:
            ValueError: If provider is not supported
        """
        if self.provider == "memory":
            from astrobookings.infrastructure.implementations.memory import (
                InMemoryRocketRepository,
            )

            return InMemoryRocketRepository()

        raise ValueError(f"Unsupported provider: {self.provider}")

    def get_launch_repository(self) -> LaunchRepository:
        """
        Get launch repository for configured provider.

        Raises:
            ValueError: If provider is not supported
        """
        if self.provider == "memory":
            from astrobookings.infrastructure.implementations.memory import (
                InMemoryLaunchRepository,
            )

            return InMemoryLaunchRepository()

        raise ValueError(f"Unsupported provider: {self.provider}")

    def get_customer_repository(self) -> CustomerRepository:
        """
        Get customer repository for configured provider.

        Raises:
            ValueError: If provider is not supported
        """
        if self.provider == "memory":
            from astrobookings.infrastructure.implementations.memory import (
                InMemoryCustomerRepository,
            )

            return InMemoryCustomerRepository()

        raise ValueError(f"Unsupported provider: {self.provider}")

    def get_id_generator(self, prefix: str) -> IdGenerator:
        """
        Get identifier generator for a resource kind.

        Args:
            prefix: Resource prefix ("rocket", "launch")

        Raises:
            ValueError: If the id strategy is not supported
        """
        return build_id_generator(self.id_strategy, prefix)
