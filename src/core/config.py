"""
Configuration constants and environment setup.
"""

import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = PROJECT_ROOT / "data" / "db" / "calendar-access.db"

# =============================================================================
# EVENT CATALOG
# =============================================================================

# (title, days from now, note)
DEFAULT_EVENTS = (
    ("Mike birthday", 9, ""),
    ("Date", 5, "Bring some flowers"),
)

# Calendar entries always last one hour
EVENT_DURATION = timedelta(seconds=3600)

DISPLAY_DATE_FORMAT = "%d %b %Y"  # e.g., "27 Oct 2026"

# =============================================================================
# NOTIFICATION MESSAGES
# =============================================================================

ACCESS_DENIED_NOTIFICATION = ("Error", "Access to the calendar was denied.")
SAVE_FAILED_NOTIFICATION = ("Error", "There was an error adding the event to your calendar.")
SAVED_NOTIFICATION = ("Event Added", "The event has been successfully added to your calendar.")

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

CALENDAR_BACKENDS = {"graph", "memory"}
CALENDAR_BACKEND = os.environ.get("CALENDAR_BACKEND", "graph").lower()

# Mailbox whose default calendar receives new entries
CALENDAR_USER = os.environ.get("CALENDAR_USER", "")

# =============================================================================
# MS GRAPH CREDENTIALS (from environment)
# =============================================================================

GRAPH_TENANT_ID = os.environ.get("MICROSOFT_GRAPH_TENANT_ID", "")
GRAPH_APP_ID = os.environ.get("MICROSOFT_GRAPH_APP_ID", "")
GRAPH_CLIENT_SECRET = os.environ.get("MICROSOFT_GRAPH_CLIENT_SECRET", "")

# =============================================================================
# API CONFIGURATION
# =============================================================================

CALENDAR_API_KEY = os.environ.get("CALENDAR_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
