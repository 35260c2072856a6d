"""
Abstract keyed-collection interface shared by all repositories.

Every repository exposes a re-entrant lock. Services hold it across a whole
validate-then-commit sequence so no other writer can change the collection
between the check and the write.
"""

import threading
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

R = TypeVar("R")


class Repository(ABC, Generic[R]):
    """
    Abstract interface for keyed record storage.

    Implementations must keep insertion order for ``list_all``.
    """

    @property
    @abstractmethod
    def lock(self) -> threading.RLock:
        """Re-entrant lock guarding the collection."""
        pass

    @abstractmethod
    def add(self, record: R) -> None:
        """
        Store a new record.

        Args:
            record: Record to store

        Raises:
            KeyError: If a record with the same key already exists
        """
        pass

    @abstractmethod
    def get(self, key: str) -> R | None:
        """
        Retrieve a record by key.

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    def list_all(self) -> list[R]:
        """List all records in insertion order."""
        pass

    @abstractmethod
    def replace(self, record: R) -> None:
        """
        Overwrite an existing record in place.

        Raises:
            KeyError: If no record exists under the record's key
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> bool:
        """
        Delete a record.

        Returns:
            True if a record was removed, False if not found
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
        pass
