"""API Pydantic models."""

from .responses import (
    ErrorCodes,
    ErrorResponse,
    EventResponse,
    HealthResponse,
    SubmissionResponse,
)

__all__ = [
    "HealthResponse",
    "EventResponse",
    "SubmissionResponse",
    "ErrorResponse",
    "ErrorCodes",
]
