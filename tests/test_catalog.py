"""Tests for the event catalog."""

from datetime import datetime, timedelta, timezone

from core.config import DEFAULT_EVENTS
from services.catalog import build_catalog, format_event_date, format_event_row


def test_default_catalog(now):
    catalog = build_catalog(now=now)

    assert len(catalog) == 2
    assert [e.title for e in catalog] == ["Mike birthday", "Date"]
    assert catalog[0].date == now + timedelta(days=9)
    assert catalog[0].description == ""
    assert catalog[1].date == now + timedelta(days=5)
    assert catalog[1].description == "Bring some flowers"


def test_catalog_keeps_entry_order(now):
    catalog = build_catalog(now=now, entries=[("B", 2, ""), ("A", 1, ""), ("C", 3, "")])
    assert [e.title for e in catalog] == ["B", "A", "C"]


def test_catalog_defaults_to_current_time():
    before = datetime.now(timezone.utc)
    catalog = build_catalog()
    after = datetime.now(timezone.utc)

    assert before + timedelta(days=9) <= catalog[0].date <= after + timedelta(days=9)


def test_lookup_by_id(now):
    catalog = build_catalog(now=now)
    event = catalog[1]

    assert catalog.get(event.id) is event
    assert catalog.get(str(event.id)) is event


def test_lookup_unknown_or_malformed_id(now):
    catalog = build_catalog(now=now)

    assert catalog.get("00000000-0000-0000-0000-000000000000") is None
    assert catalog.get("not-a-uuid") is None


def test_catalogs_are_independent(now):
    first = build_catalog(now=now)
    second = build_catalog(now=now)
    assert first[0].id != second[0].id


def test_format_event_date():
    assert format_event_date(datetime(2026, 10, 27, 9, 30, tzinfo=timezone.utc)) == "27 Oct 2026"


def test_format_event_row(birthday_event):
    assert format_event_row(birthday_event) == "27 Oct 2026  Mike birthday"


def test_format_event_date_uses_calendar_year():
    # 29 Dec 2026 falls in ISO week 1 of 2027
    assert format_event_date(datetime(2026, 12, 29, 9, 30, tzinfo=timezone.utc)) == "29 Dec 2026"


def test_default_events_are_fixed():
    assert isinstance(DEFAULT_EVENTS, tuple)
    assert build_catalog(entries=DEFAULT_EVENTS)[0].title == "Mike birthday"
