"""Health check response models."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="ok", description="Service status")
    version: str = Field(..., description="Backend version")
    timestamp: datetime = Field(..., description="Current server time (UTC)")
    uptime: float = Field(..., description="Seconds since the application started")
