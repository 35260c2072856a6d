"""Error response models following RFC 7807 Problem Details."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

# RFC status code to section mapping
status_to_section: dict[int, str] = {
    400: "6.5.1",
    404: "6.5.4",
    405: "6.5.5",
    500: "6.6.1",
    503: "6.6.4",
}


def get_rfc_section_url(status: int) -> str:
    """Get the RFC section URL for a given HTTP status code.

    Args:
        status: The HTTP status code.

    Returns:
        The URL to the corresponding section in the RFC.
    """
    base_url = "https://datatracker.ietf.org/doc/html/rfc7231#section-"
    section = status_to_section.get(status)
    if section is None:
        return f"{base_url}6.6.1"  # Default to 500 Internal Server Error
    return f"{base_url}{section}"


class FieldErrorDetail(BaseModel):
    """Validation error for a single field.

    Attributes:
        field: Name of the offending field as sent on the wire (camelCase).
        message: Human-readable error message.
    """

    field: str = Field(..., description="Offending field")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetail(BaseModel):
    """Problem Detail response as defined in RFC 7807.

    Provides standardized error responses across all API endpoints.

    Attributes:
        type: URI reference to the problem type (auto-generated from status).
        title: Short, human-readable summary of the problem type.
        status: HTTP status code.
        detail: Human-readable explanation specific to this occurrence.
        instance: URI reference identifying the specific occurrence.
        errors: Ordered field errors (for 400 responses).

    Example:
        ```python
        problem = ProblemDetail(
            title="Validation Error",
            status=400,
            detail="One or more validation errors occurred (1 errors).",
            instance="/rockets",
            errors=[FieldErrorDetail(field="capacity", message="...")],
        )
        ```
    """

    type: str | None = Field(
        default=None,
        description="URI reference to the problem type (RFC 7807)",
        json_schema_extra={
            "example": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.1"
        },
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        json_schema_extra={"example": "Validation Error"},
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        json_schema_extra={"example": 400},
    )
    detail: str | None = Field(
        default=None,
        description="Human-readable explanation",
        json_schema_extra={"example": "Rocket not found"},
    )
    instance: str | None = Field(
        default=None,
        description="URI reference identifying this occurrence",
        json_schema_extra={"example": "/rockets/rocket-1"},
    )
    errors: list[FieldErrorDetail] | None = Field(
        default=None,
        description="Field errors (for 400 responses)",
        json_schema_extra={
            "example": [
                {
                    "field": "capacity",
                    "message": "Capacity must be an integer between 1 and 10 (inclusive)",
                }
            ]
        },
    )

    @model_validator(mode="before")
    @classmethod
    def set_default_type(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Set the default type based on the status if not provided.

        Args:
            values: The model values.

        Returns:
            Updated values with type set.
        """
        if "type" not in values or values["type"] is None:
            status = values.get("status", 500)
            values["type"] = get_rfc_section_url(status)
        return values
