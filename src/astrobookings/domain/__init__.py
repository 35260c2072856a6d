"""
Domain layer - business rules for rockets, launches and customers.

This package contains:
- Results: tagged outcomes returned by every service operation
- Validation: shared field checks used by the service validators
- Exceptions: boundary exceptions carrying failed results
"""

from astrobookings.domain.exceptions import (
    ResourceNotFoundError,
    ResourceValidationError,
)
from astrobookings.domain.results import FieldError, NotFound, Ok, ValidationFailure

__all__ = [
    "FieldError",
    "NotFound",
    "Ok",
    "ResourceNotFoundError",
    "ResourceValidationError",
    "ValidationFailure",
]
