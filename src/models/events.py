"""
Data models for catalog events, calendar entries and submission outcomes.

Frozen dataclasses: records are created once and never mutated.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from core.config import EVENT_DURATION

# Marker for the host's default calendar for new entries
DEFAULT_CALENDAR = "default"


@dataclass(frozen=True)
class EventRecord:
    """A personal event listed in the catalog."""

    title: str
    date: datetime  # start instant, timezone-aware
    description: str = ""
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError("Event title must not be empty")
        if not isinstance(self.date, datetime):
            raise ValueError(f"Event '{self.title}' has no start instant")
        if self.date.tzinfo is None or self.date.utcoffset() is None:
            raise ValueError(f"Event '{self.title}' start must be timezone-aware")

    @property
    def end(self) -> datetime:
        return self.date + EVENT_DURATION


@dataclass(frozen=True)
class CalendarEntry:
    """Single-occurrence entry handed to the host calendar."""

    title: str
    start: datetime
    end: datetime
    notes: str
    calendar: str = DEFAULT_CALENDAR

    @classmethod
    def from_event(cls, event: EventRecord) -> "CalendarEntry":
        return cls(
            title=event.title,
            start=event.date,
            end=event.end,
            notes=event.description,
        )


class OutcomeStatus(str, Enum):
    SAVED = "saved"
    SAVE_FAILED = "save_failed"
    DENIED = "denied"


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of one submission attempt."""

    status: OutcomeStatus
    reason: str | None = None  # denial or save failure description
    entry_id: str | None = None  # host id of the created entry

    @classmethod
    def saved(cls, entry_id: str | None) -> "SubmissionOutcome":
        return cls(OutcomeStatus.SAVED, entry_id=entry_id)

    @classmethod
    def save_failed(cls, reason: str) -> "SubmissionOutcome":
        return cls(OutcomeStatus.SAVE_FAILED, reason=reason)

    @classmethod
    def denied(cls, reason: str | None = None) -> "SubmissionOutcome":
        return cls(OutcomeStatus.DENIED, reason=reason)


@dataclass(frozen=True)
class Notification:
    """User-visible message pair."""

    title: str
    message: str
