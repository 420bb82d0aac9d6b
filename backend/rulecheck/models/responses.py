"""API response models."""

from pydantic import BaseModel
from typing import Literal


class MessageResponse(BaseModel):
    """Plain message body used for both success and failure."""

    message: str


class FieldErrorResponse(BaseModel):
    """One failing field of a rejected request body."""

    field: str
    reason: str


class ValidationFailedResponse(BaseModel):
    """400 body when a decoded record fails its rules."""

    message: str = "Invalid Body Input"
    errors: list[FieldErrorResponse] = []


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
