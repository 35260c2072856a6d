"""
Infrastructure layer for record storage.

This module provides repository interfaces and implementations for:
- Rockets (keyed by generated id)
- Launches (keyed by generated id)
- Customers (keyed by email)

Supports providers via factory pattern:
- memory: dict-backed storage for the lifetime of the process
"""

from astrobookings.infrastructure.factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
