"""Shared response models."""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    success: bool = True
    message: str
    timestamp: datetime = Field(default_factory=utc_now)
    service: str


class ErrorResponse(BaseModel):
    """Standard error response model."""
    success: bool = False
    error: str
    code: Optional[str] = None
    details: Optional[Any] = None
