"""Tests for repository factory."""

from unittest.mock import patch

import pytest

from astrobookings.config import Settings, get_settings
from astrobookings.infrastructure import RepositoryFactory
from astrobookings.infrastructure.implementations.memory import (
    InMemoryCustomerRepository,
    InMemoryLaunchRepository,
    InMemoryRocketRepository,
)
from astrobookings.utils.ids import SequentialIdGenerator, UUIDGenerator


def test_factory_creates_memory_repositories_by_default():
    factory = RepositoryFactory()

    assert factory.provider == "memory"
    assert isinstance(factory.get_rocket_repository(), InMemoryRocketRepository)
    assert isinstance(factory.get_launch_repository(), InMemoryLaunchRepository)
    assert isinstance(factory.get_customer_repository(), InMemoryCustomerRepository)


def test_factory_returns_fresh_repositories():
    """Each call yields a separate, empty collection."""
    factory = RepositoryFactory()

    assert factory.get_rocket_repository() is not factory.get_rocket_repository()


def test_factory_from_settings_uses_id_strategy():
    factory = RepositoryFactory.from_settings(get_settings())

    assert factory.id_strategy == "sequential"
    assert isinstance(factory.get_id_generator("rocket"), SequentialIdGenerator)


def test_factory_from_environment():
    with patch.dict("os.environ", {"ID_STRATEGY": "uuid"}):
        factory = RepositoryFactory.from_settings(Settings())

    assert isinstance(factory.get_id_generator("launch"), UUIDGenerator)


def test_factory_rejects_unknown_provider():
    factory = RepositoryFactory(provider="postgres")  # type: ignore[arg-type]

    with pytest.raises(ValueError, match="Unsupported provider"):
        factory.get_rocket_repository()
    with pytest.raises(ValueError):
        factory.get_launch_repository()
    with pytest.raises(ValueError):
        factory.get_customer_repository()
