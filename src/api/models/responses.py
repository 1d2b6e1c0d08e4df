"""Pydantic response models for API endpoints."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    calendar_backend: str
    event_count: int
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class EventResponse(BaseModel):
    """Catalog event."""

    id: str
    title: str
    date: datetime
    description: str
    display_date: str  # e.g. "27 Oct 2026"


class SubmissionResponse(BaseModel):
    """Outcome of adding an event to the calendar, with its user-facing message."""

    outcome: str  # "saved", "save_failed" or "denied"
    title: str
    message: str
    entry_id: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    UNAUTHORIZED = "UNAUTHORIZED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    CALENDAR_UNAVAILABLE = "CALENDAR_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"
