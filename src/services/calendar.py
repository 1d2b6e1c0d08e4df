"""
Host calendar access: write permission checks and entry creation.

Two hosts are provided: MS Graph (a user's default Outlook calendar) and an
in-process store for local runs and tests.
"""

import asyncio
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

from msgraph import GraphServiceClient
from msgraph.generated.models.body_type import BodyType
from msgraph.generated.models.date_time_time_zone import DateTimeTimeZone
from msgraph.generated.models.event import Event
from msgraph.generated.models.item_body import ItemBody

from core.config import CALENDAR_BACKEND, CALENDAR_BACKENDS, CALENDAR_USER
from core.graph_client import get_graph_client
from models.events import CalendarEntry


@dataclass(frozen=True)
class AccessResult:
    """Host answer to a write access request."""

    granted: bool
    error: str | None = None


class CalendarSaveError(Exception):
    """The host could not store a calendar entry."""


class CalendarHost(Protocol):
    async def request_write_access(self) -> AccessResult: ...

    async def save_event(self, entry: CalendarEntry) -> str: ...


# =============================================================================
# MS GRAPH
# =============================================================================


def to_graph_event(entry: CalendarEntry) -> Event:
    """Convert a calendar entry to a single-occurrence MS Graph Event."""
    return Event(
        subject=entry.title,
        start=DateTimeTimeZone(date_time=_utc_iso(entry.start), time_zone="UTC"),
        end=DateTimeTimeZone(date_time=_utc_iso(entry.end), time_zone="UTC"),
        body=ItemBody(content_type=BodyType.Text, content=entry.notes),
    )


def _utc_iso(dt: datetime) -> str:
    # Graph wants a naive timestamp plus a separate time zone name
    return dt.astimezone(timezone.utc).replace(tzinfo=None).isoformat()


class GraphCalendarHost:
    """Writes to a user's default calendar through MS Graph."""

    def __init__(self, user_id: str, graph: GraphServiceClient | None = None):
        if not user_id:
            raise ValueError("CALENDAR_USER must be set to use the graph calendar backend")
        self.user_id = user_id
        self.graph = graph if graph is not None else get_graph_client()

    async def request_write_access(self) -> AccessResult:
        """
        Check that the default calendar exists and is editable.

        API errors (missing mailbox, revoked consent, ...) are reported as a
        refusal with the error text, never raised.
        """
        try:
            calendar = await self.graph.users.by_user_id(self.user_id).calendar.get()
        except Exception as e:
            return AccessResult(granted=False, error=str(e))

        if calendar is None:
            return AccessResult(granted=False, error="No default calendar")
        if not calendar.can_edit:
            return AccessResult(granted=False)
        return AccessResult(granted=True)

    async def save_event(self, entry: CalendarEntry) -> str:
        try:
            created = await self.graph.users.by_user_id(self.user_id).calendar.events.post(
                to_graph_event(entry)
            )
        except Exception as e:
            raise CalendarSaveError(str(e)) from e

        if created is None or not created.id:
            raise CalendarSaveError("Calendar did not return the created event")
        return created.id


# =============================================================================
# IN-MEMORY
# =============================================================================


class InMemoryCalendarHost:
    """
    In-process calendar store.

    Args:
        grant: Answer given to every access request.
        access_error: Error reported alongside the access answer.
        fail_with: When set, every save fails with this reason.
    """

    def __init__(
        self,
        grant: bool = True,
        access_error: str | None = None,
        fail_with: str | None = None,
    ):
        self.grant = grant
        self.access_error = access_error
        self.fail_with = fail_with
        self.access_requests = 0
        self.entries: dict[str, CalendarEntry] = {}

    async def request_write_access(self) -> AccessResult:
        self.access_requests += 1
        await asyncio.sleep(0)
        return AccessResult(granted=self.grant, error=self.access_error)

    async def save_event(self, entry: CalendarEntry) -> str:
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise CalendarSaveError(self.fail_with)
        entry_id = str(uuid.uuid4())
        self.entries[entry_id] = entry
        return entry_id


def get_calendar_host(backend: str = CALENDAR_BACKEND) -> CalendarHost:
    """Create the configured calendar host."""
    if backend not in CALENDAR_BACKENDS:
        raise ValueError(
            f"Unknown calendar backend '{backend}', expected one of: {', '.join(sorted(CALENDAR_BACKENDS))}"
        )
    if backend == "memory":
        return InMemoryCalendarHost()
    return GraphCalendarHost(CALENDAR_USER)
