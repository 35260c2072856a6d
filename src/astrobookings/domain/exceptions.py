"""
Exceptions raised at the HTTP boundary when a service result is a failure.

Services return results; the API layer converts failures into these
exceptions so the global exception handlers can render them.
"""

from astrobookings.domain.results import NotFound, ValidationFailure


class ResourceValidationError(Exception):
    """A create/update request was rejected with field errors."""

    def __init__(self, failure: ValidationFailure):
        self.failure = failure
        super().__init__(f"{len(failure.errors)} validation error(s)")


class ResourceNotFoundError(Exception):
    """The requested resource does not exist."""

    def __init__(self, not_found: NotFound):
        self.not_found = not_found
        super().__init__(not_found.message)

    @classmethod
    def for_key(cls, resource: str, key: str) -> "ResourceNotFoundError":
        """Build the error for a lookup miss on ``key``."""
        return cls(NotFound(resource, key))
