"""
Dictionary-backed repository shared by the in-memory implementations.

Records live in an insertion-ordered ``dict`` for the lifetime of the
process. Every method takes the repository lock, so single calls are atomic;
services hold the same lock for multi-step sequences.
"""

import threading
from abc import abstractmethod
from typing import Generic, TypeVar

from loguru import logger

from astrobookings.infrastructure.repositories.base import Repository

R = TypeVar("R")


class InMemoryRepository(Repository[R], Generic[R]):
    """Keyed in-memory collection."""

    resource_name = "record"

    def __init__(self) -> None:
        self._records: dict[str, R] = {}
        self._lock = threading.RLock()

        logger.debug(f"Initialized in-memory {self.resource_name} repository")

    @abstractmethod
    def _key(self, record: R) -> str:
        """Return the primary key of ``record``."""
        pass

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def add(self, record: R) -> None:
        key = self._key(record)
        with self._lock:
            if key in self._records:
                raise KeyError(f"Duplicate {self.resource_name} key: {key}")
            self._records[key] = record

    def get(self, key: str) -> R | None:
        with self._lock:
            return self._records.get(key)

    def list_all(self) -> list[R]:
        with self._lock:
            return list(self._records.values())

    def replace(self, record: R) -> None:
        key = self._key(record)
        with self._lock:
            if key not in self._records:
                raise KeyError(f"Unknown {self.resource_name} key: {key}")
            self._records[key] = record

    def remove(self, key: str) -> bool:
        with self._lock:
            return self._records.pop(key, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._records)
