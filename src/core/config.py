"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
OUTPUT_DIR = PROJECT_ROOT / "output"

# =============================================================================
# PLANNING CONFIGURATION
# =============================================================================

PLANNING_TIMEZONE = os.environ.get("PLANNING_TIMEZONE", "Europe/Berlin")

# Contacts carrying this keyword are shown as rows in the grid ("" keeps all)
ACTIVE_EMPLOYEE_KEYWORD = os.environ.get("STAFFING_ACTIVE_EMPLOYEE_KEYWORD", "Monteur")

# Co-assignee avatars shown per badge before collapsing into "+N"
MAX_VISIBLE_CO_ASSIGNEES = int(os.environ.get("MAX_VISIBLE_CO_ASSIGNEES", "2"))

WORK_DAYS_PER_WEEK = 5

# Furthest week (in either direction) the grid can be asked for
MAX_WEEK_OFFSET = int(os.environ.get("MAX_WEEK_OFFSET", "520"))

# =============================================================================
# DOMAIN VOCABULARIES
# =============================================================================

# Matched as substrings of lowercased url labels / extra field keys
PRIMARY_CALENDAR_LABELS = ("einsatz", "zuweisung", "assignment", "primary")
ABSENCE_CALENDAR_LABELS = ("abwesenheit", "absence", "vacation", "urlaub", "sick", "krank")
EXTRA_FIELD_CALENDAR_MARKER = "ical"

UNKNOWN_STATUS = "unknown"
UNKNOWN_LOCATION = "Unbekannt"

# Project status -> cell color (hex RGB, no leading '#')
PROJECT_STATUS_COLORS = {
    "new": "570DF8",
    "in_progress": "F000B8",
    "done": "36D399",
    "archived": "3D4451",
    UNKNOWN_STATUS: "D1D5DB",
}

# Monday-first, indexed by date.weekday()
WEEKDAY_NAMES = ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag")
WEEKDAY_SHORT_NAMES = ("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So")

# =============================================================================
# REPORT CONFIGURATION
# =============================================================================

GRID_EMPLOYEE_HEADER = "Mitarbeiter"
GRID_SHEET_NAME = "Wochenplanung"
CO_ASSIGNEE_TOOLTIP_PREFIX = "Ebenfalls zugewiesen: "
RESUMED_MARKER = "…"
CONTINUES_MARKER = "→"

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
