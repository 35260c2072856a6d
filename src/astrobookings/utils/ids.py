"""
Identifier generators for rockets and launches.

Generators only promise uniqueness for the lifetime of the process; ids are
never reused after a record is deleted.
"""

import itertools
import threading
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    """Callable returning a fresh identifier on each call."""

    def __call__(self) -> str: ...


class UUIDGenerator:
    """Random UUID4 identifiers (production default)."""

    def __call__(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator:
    """
    Monotonic ``<prefix>-<n>`` identifiers.

    Deterministic, which makes it convenient for tests and local demos.

    Example:
        >>> next_id = SequentialIdGenerator("rocket")
        >>> next_id(), next_id()
        ('rocket-1', 'rocket-2')
    """

    def __init__(self, prefix: str, start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{self.prefix}-{value}"


def build_id_generator(strategy: str, prefix: str) -> IdGenerator:
    """
    Build the generator selected by the ``id_strategy`` setting.

    Args:
        strategy: "uuid" or "sequential"
        prefix: Resource prefix used by the sequential strategy

    Returns:
        Identifier generator

    Raises:
        ValueError: If the strategy is unknown
    """
    if strategy == "uuid":
        return UUIDGenerator()
    if strategy == "sequential":
        return SequentialIdGenerator(prefix)
    raise ValueError(f"Unsupported id strategy: {strategy}")
