"""
Operation results returned by the domain services.

Services never raise for expected outcomes. Each mutating operation returns
one of:

- Ok: the operation succeeded and carries the resulting record
- ValidationFailure: the candidate record was rejected, with every field error
- NotFound: the looked-up key does not exist in the target collection

Callers branch on the result type (``isinstance``) and translate it into
their own protocol, e.g. HTTP status codes.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FieldError:
    """
    A single field-level validation error.

    Attributes:
        field: Record attribute name (snake_case)
        message: Human-readable description of the problem
    """

    field: str
    message: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful operation carrying the resulting record."""

    value: T


@dataclass(frozen=True)
class ValidationFailure:
    """
    Rejected create/update request.

    Attributes:
        errors: Ordered, non-empty tuple of field errors (never truncated)
    """

    errors: tuple[FieldError, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("ValidationFailure requires at least one field error")

    def fields(self) -> list[str]:
        """Return the failing field names in reporting order."""
        return [error.field for error in self.errors]

    def messages_for(self, field: str) -> list[str]:
        """Return every message reported for ``field``."""
        return [error.message for error in self.errors if error.field == field]


@dataclass(frozen=True)
class NotFound:
    """
    Lookup miss.

    Attributes:
        resource: Resource kind, e.g. "Rocket"
        key: The identifier that was looked up
    """

    resource: str
    key: str

    @property
    def message(self) -> str:
        """Human-readable message naming the resource kind."""
        return f"{self.resource} not found"


__all__ = ["FieldError", "NotFound", "Ok", "ValidationFailure"]
