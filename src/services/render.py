"""
Text rendering of a month as a weekday grid.

All functions are pure; callers pass in the days that have events.
"""

import calendar
from datetime import date

from core.config import EVENT_MARKER, WEEKDAY_LABELS

INNER_WIDTH = 32
TOP_BORDER = "+" + "-" * (INNER_WIDTH + 2) + "+"
ROW_BORDER = "+----" * 7 + "+"
BLANK_CELL = "|    "


def month_layout(year: int, month: int) -> tuple[int, int]:
    """
    Return (first_weekday, days_in_month) for a month (1-12).

    first_weekday counts from Sunday = 0.
    """
    monday_based, days_in_month = calendar.monthrange(year, month)
    return (monday_based + 1) % 7, days_in_month


def trailing_blanks(first_weekday: int, days_in_month: int) -> int:
    """Blank cells needed after the last day to complete the final row."""
    return (7 - (first_weekday + days_in_month) % 7) % 7


def format_event_count(count: int) -> str:
    """Format an event count ("no events", "1 event" or "n events")."""
    res = f"{count if count else 'no'} event"
    if count != 1:
        res += "s"
    return res


def month_and_year_name(year: int, month: int) -> str:
    """Label such as 'February 2024'."""
    return date(year, month, 1).strftime("%B %Y")


def format_day_cell(day: int, marked: bool) -> str:
    marker = EVENT_MARKER if marked else " "
    return f"| {day:>2}{marker}"


def render_calendar(
    year: int, month: int, days_with_events: set[int], event_count: int
) -> str:
    """
    Render the month as a fixed-width text grid.

    Example header:
        +----------------------------------+
        | February 2024 (2 events)         |
        +----+----+----+----+----+----+----+
        | Su | Mo | Tu | We | Th | Fr | Sa |
    """
    first_weekday, days_in_month = month_layout(year, month)
    extra_days = trailing_blanks(first_weekday, days_in_month)

    title = f"{month_and_year_name(year, month)} ({format_event_count(event_count)})"
    # Long localized month names must not widen the box
    title = title[:INNER_WIDTH]
    lines = [
        TOP_BORDER,
        f"| {title:<{INNER_WIDTH}} |",
        ROW_BORDER,
        "".join(f"| {label} " for label in WEEKDAY_LABELS) + "|",
        ROW_BORDER,
    ]

    # Counter starts at or below 1 so the first week lines up with its weekday
    row = []
    for day in range(1 - first_weekday, days_in_month + extra_days + 1):
        if 1 <= day <= days_in_month:
            row.append(format_day_cell(day, day in days_with_events))
        else:
            row.append(BLANK_CELL)
        if len(row) == 7:
            lines.append("".join(row) + "|")
            row = []

    lines.append(ROW_BORDER)
    return "\n".join(lines)
