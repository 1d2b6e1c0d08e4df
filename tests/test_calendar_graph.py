"""Tests for the MS Graph calendar host and host selection."""

import asyncio
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from msgraph.generated.models.body_type import BodyType

from models.events import CalendarEntry, OutcomeStatus
from services.calendar import (
    CalendarSaveError,
    GraphCalendarHost,
    InMemoryCalendarHost,
    get_calendar_host,
    to_graph_event,
)
from services.submission import submit

USER = "someone@example.com"


def make_graph(calendar=None, calendar_error=None, created=None, post_error=None):
    """Mock GraphServiceClient exposing users/{id}/calendar(/events)."""
    graph = MagicMock()
    user = graph.users.by_user_id.return_value
    user.calendar.get = AsyncMock(return_value=calendar, side_effect=calendar_error)
    user.calendar.events.post = AsyncMock(return_value=created, side_effect=post_error)
    return graph


def entry_at(start):
    return CalendarEntry(title="Date", start=start, end=start + timedelta(hours=1), notes="Bring some flowers")


def test_to_graph_event_uses_utc():
    start = datetime(2026, 10, 23, 11, 30, tzinfo=timezone(timedelta(hours=2)))
    event = to_graph_event(entry_at(start))

    assert event.subject == "Date"
    assert event.start.date_time == "2026-10-23T09:30:00"
    assert event.start.time_zone == "UTC"
    assert event.end.date_time == "2026-10-23T10:30:00"
    assert event.body.content == "Bring some flowers"
    assert event.body.content_type == BodyType.Text
    assert event.recurrence is None


def test_access_granted_for_editable_calendar():
    graph = make_graph(calendar=SimpleNamespace(can_edit=True))
    host = GraphCalendarHost(USER, graph=graph)

    result = asyncio.run(host.request_write_access())

    assert result.granted
    assert result.error is None
    graph.users.by_user_id.assert_called_with(USER)


def test_access_refused_for_read_only_calendar():
    host = GraphCalendarHost(USER, graph=make_graph(calendar=SimpleNamespace(can_edit=False)))
    result = asyncio.run(host.request_write_access())
    assert not result.granted


def test_access_error_reported_not_raised():
    graph = make_graph(calendar_error=Exception("MailboxNotEnabledForRESTAPI"))
    result = asyncio.run(GraphCalendarHost(USER, graph=graph).request_write_access())

    assert not result.granted
    assert result.error == "MailboxNotEnabledForRESTAPI"


def test_save_returns_created_id():
    graph = make_graph(created=SimpleNamespace(id="AAMkAD"))
    host = GraphCalendarHost(USER, graph=graph)

    entry_id = asyncio.run(host.save_event(entry_at(datetime(2026, 10, 23, 9, 30, tzinfo=timezone.utc))))

    assert entry_id == "AAMkAD"
    posted = graph.users.by_user_id.return_value.calendar.events.post.await_args.args[0]
    assert posted.subject == "Date"


def test_save_error_wrapped():
    graph = make_graph(post_error=Exception("ErrorAccessDenied"))
    host = GraphCalendarHost(USER, graph=graph)

    with pytest.raises(CalendarSaveError, match="ErrorAccessDenied"):
        asyncio.run(host.save_event(entry_at(datetime(2026, 10, 23, 9, 30, tzinfo=timezone.utc))))


def test_save_without_created_id_fails():
    host = GraphCalendarHost(USER, graph=make_graph(created=None))
    with pytest.raises(CalendarSaveError):
        asyncio.run(host.save_event(entry_at(datetime(2026, 10, 23, 9, 30, tzinfo=timezone.utc))))


def test_submit_through_graph_denied_skips_save(date_event):
    graph = make_graph(calendar=SimpleNamespace(can_edit=False))
    outcome = asyncio.run(submit(date_event, GraphCalendarHost(USER, graph=graph)))

    assert outcome.status == OutcomeStatus.DENIED
    graph.users.by_user_id.return_value.calendar.events.post.assert_not_awaited()


def test_submit_through_graph_saves(date_event):
    graph = make_graph(calendar=SimpleNamespace(can_edit=True), created=SimpleNamespace(id="AAMkAD"))
    outcome = asyncio.run(submit(date_event, GraphCalendarHost(USER, graph=graph)))

    assert outcome.status == OutcomeStatus.SAVED
    assert outcome.entry_id == "AAMkAD"


def test_graph_host_requires_user():
    with pytest.raises(ValueError, match="CALENDAR_USER"):
        GraphCalendarHost("", graph=make_graph())


def test_get_calendar_host_memory():
    assert isinstance(get_calendar_host("memory"), InMemoryCalendarHost)


def test_get_calendar_host_unknown_backend():
    with pytest.raises(ValueError, match="Unknown calendar backend"):
        get_calendar_host("caldav")
