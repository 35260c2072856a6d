"""
Shared data models used across the application.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Root endpoint response."""

    message: str = Field(..., description="Human-readable message")
    version: str = Field(..., description="Backend version")
    docs: str | None = Field(None, description="Documentation URL when enabled")
