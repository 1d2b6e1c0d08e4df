"""
Event catalog built from the compiled-in event list.
"""

import uuid
from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta, timezone

from core.config import DEFAULT_EVENTS, DISPLAY_DATE_FORMAT
from models.events import EventRecord


class EventCatalog:
    """Immutable, ordered sequence of events."""

    def __init__(self, events: Iterable[EventRecord]):
        self._events = tuple(events)
        self._by_id = {event.id: event for event in self._events}

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[EventRecord]:
        return iter(self._events)

    def __getitem__(self, index: int) -> EventRecord:
        return self._events[index]

    def get(self, event_id: uuid.UUID | str) -> EventRecord | None:
        """Look up an event by id; malformed ids are treated as unknown."""
        if isinstance(event_id, str):
            try:
                event_id = uuid.UUID(event_id)
            except ValueError:
                return None
        return self._by_id.get(event_id)


def build_catalog(
    now: datetime | None = None,
    entries: Iterable[tuple[str, int, str]] = DEFAULT_EVENTS,
) -> EventCatalog:
    """
    Create the catalog from (title, days from now, note) entries.

    Args:
        now: Reference instant. Uses current UTC time if None.
        entries: Event definitions, kept in order.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    return EventCatalog(
        EventRecord(title=title, date=now + timedelta(days=days), description=note)
        for title, days, note in entries
    )


def format_event_date(d: datetime) -> str:
    """Format date as 'DD Mon YYYY' (e.g., '27 Oct 2026')."""
    return d.strftime(DISPLAY_DATE_FORMAT)


def format_event_row(event: EventRecord) -> str:
    """Format a catalog row for listing."""
    return f"{format_event_date(event.date)}  {event.title}"
