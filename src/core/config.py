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
DB_PATH = Path(
    os.environ.get("CALENDAR_DB_PATH", str(PROJECT_ROOT / "data" / "db" / "calendar.db"))
)

# =============================================================================
# CALENDAR DISPLAY
# =============================================================================

EVENT_MARKER = "*"  # shown next to a day that has at least one event
WEEKDAY_LABELS = ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]

# Matched case-insensitively against user input
MONTH_NAMES = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]

# Blank lines printed before each redraw of the menu
CLEAR_SCREEN_LINES = int(os.environ.get("CALENDAR_CLEAR_LINES", "50"))

# =============================================================================
# INPUT LIMITS
# =============================================================================

MIN_HOUR = 0
MAX_HOUR = 23
MENU_OPTIONS = 5
