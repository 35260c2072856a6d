"""Translate service results into return values or boundary exceptions."""

from typing import TypeVar

from astrobookings.domain.exceptions import (
    ResourceNotFoundError,
    ResourceValidationError,
)
from astrobookings.domain.results import NotFound, Ok, ValidationFailure

T = TypeVar("T")


def unwrap(result: Ok[T] | ValidationFailure | NotFound) -> T:
    """
    Return the value of a successful result.

    Raises:
        ResourceValidationError: If the result is a ValidationFailure (400)
        ResourceNotFoundError: If the result is a NotFound (404)
    """
    if isinstance(result, ValidationFailure):
        raise ResourceValidationError(result)
    if isinstance(result, NotFound):
        raise ResourceNotFoundError(result)
    return result.value


def require_found(record: T | None, resource: str, key: str) -> T:
    """
    Return ``record`` or raise when a lookup came back empty.

    Raises:
        ResourceNotFoundError: If ``record`` is None (404)
    """
    if record is None:
        raise ResourceNotFoundError.for_key(resource, key)
    return record


def require_deleted(deleted: bool, resource: str, key: str) -> None:
    """
    Raise when a delete did not remove anything.

    Raises:
        ResourceNotFoundError: If ``deleted`` is False (404)
    """
    if not deleted:
        raise ResourceNotFoundError.for_key(resource, key)
