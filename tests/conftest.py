"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from faker import Faker

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.events import EventRecord  # noqa: E402
from services.calendar import InMemoryCalendarHost  # noqa: E402

NOW = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference instant for catalog building."""
    return NOW


@pytest.fixture
def birthday_event():
    """Event with an empty note."""
    return EventRecord(title="Mike birthday", date=NOW + timedelta(days=9), description="")


@pytest.fixture
def date_event():
    """Event with a note."""
    return EventRecord(title="Date", date=NOW + timedelta(days=5), description="Bring some flowers")


@pytest.fixture
def random_events():
    """Arbitrary events for properties that must hold for every event."""
    fake = Faker()
    Faker.seed(1234)
    return [
        EventRecord(
            title=fake.sentence(nb_words=3),
            date=fake.date_time_between(start_date="-1y", end_date="+1y", tzinfo=timezone.utc),
            description=fake.text(max_nb_chars=80) if i % 2 else "",
        )
        for i in range(25)
    ]


@pytest.fixture
def granting_host():
    return InMemoryCalendarHost(grant=True)


@pytest.fixture
def denying_host():
    return InMemoryCalendarHost(grant=False)


@pytest.fixture
def failing_host():
    return InMemoryCalendarHost(grant=True, fail_with="Calendar is read-only")
