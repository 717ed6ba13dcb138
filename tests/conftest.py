"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.database import get_connection, insert_event  # noqa: E402
from services.calendar import MonthCalendar  # noqa: E402


@pytest.fixture
def conn():
    """In-memory database with the calendar tables created."""
    connection = get_connection(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def closed_conn():
    """A connection that fails every operation."""
    connection = get_connection(":memory:")
    connection.close()
    return connection


@pytest.fixture
def sample_event():
    """Sample event values for testing."""
    return {
        "name": "Standup",
        "note": "Daily sync",
        "time": datetime(2024, 2, 5, 9, 0),
    }


@pytest.fixture
def sample_events(sample_event):
    """Events spread over February and March 2024."""
    return [
        sample_event,
        {**sample_event, "name": "Retro", "note": None, "time": datetime(2024, 2, 5, 15, 0)},
        {**sample_event, "name": "Dentist", "note": "", "time": datetime(2024, 2, 29, 8, 0)},
        {**sample_event, "name": "Planning", "time": datetime(2024, 3, 1, 10, 0)},
    ]


@pytest.fixture
def month_calendar(conn, sample_events):
    """MonthCalendar on February 2024 with the sample events stored."""
    for e in sample_events:
        insert_event(conn, e["name"], e["note"], e["time"])
    cal = MonthCalendar(conn)
    assert cal.change_month(2024, 2) is None
    return cal
