"""
Models package.

Contains shared Pydantic models used across multiple modules.
Module-specific models are located in their respective module directories.
"""

from astrobookings.models.errors import FieldErrorDetail, ProblemDetail
from astrobookings.models.shared import MessageResponse

__all__ = [
    # Shared
    "MessageResponse",
    # RFC 7807 Error models
    "FieldErrorDetail",
    "ProblemDetail",
]
