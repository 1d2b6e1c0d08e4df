#!/usr/bin/env python3
"""
Add one catalog event to the calendar.

Requests write access on the calendar, saves the event as a one-hour entry
and prints the resulting message. Use list_events.py to see event numbers.

Usage:
    uv run python src/scripts/add_event_to_calendar.py <number> [--backend memory]

Example:
    uv run python src/scripts/add_event_to_calendar.py 2
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import CALENDAR_BACKEND, CALENDAR_BACKENDS
from models.events import OutcomeStatus
from services.calendar import get_calendar_host
from services.catalog import build_catalog, format_event_row
from services.submission import NotificationSlot, submit_and_notify


async def run(number: int, backend: str) -> bool:
    """Submit the selected event. Returns True if it was saved."""
    catalog = build_catalog()
    if not 1 <= number <= len(catalog):
        raise ValueError(f"Event number must be between 1 and {len(catalog)}, got {number}")

    event = catalog[number - 1]
    host = get_calendar_host(backend)
    print(f"Adding: {format_event_row(event)}")

    slot = NotificationSlot()
    outcome = await submit_and_notify(event, host, slot)
    notification = slot.take()

    print(f"\n{notification.title}: {notification.message}")
    if outcome.reason:
        print(f"  ({outcome.reason})")
    return outcome.status == OutcomeStatus.SAVED


def main():
    parser = argparse.ArgumentParser(description="Add a catalog event to the calendar")
    parser.add_argument(
        "number",
        type=int,
        help="Event number as shown by list_events.py",
    )
    parser.add_argument(
        "--backend",
        choices=sorted(CALENDAR_BACKENDS),
        default=CALENDAR_BACKEND,
        help="Calendar host to write to",
    )

    args = parser.parse_args()

    try:
        saved = asyncio.run(run(args.number, args.backend))
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)

    if not saved:
        sys.exit(1)


if __name__ == "__main__":
    main()
