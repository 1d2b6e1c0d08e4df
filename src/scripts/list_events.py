#!/usr/bin/env python3
"""
List the events that can be added to the calendar.

Usage:
    uv run python src/scripts/list_events.py
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from services.catalog import build_catalog, format_event_row


def main():
    catalog = build_catalog()

    print(f"{len(catalog)} events\n")
    for number, event in enumerate(catalog, 1):
        print(f"  [{number}] {format_event_row(event)}")
        if event.description:
            print(f"      {event.description}")


if __name__ == "__main__":
    main()
