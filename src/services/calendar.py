"""
Month-scoped event cache backed by the SQLite events table.

The cache holds every event of the selected month, bucketed by day of month.
Store operations always run first; the cache only changes once they succeed.
"""

import sqlite3
from datetime import date, datetime

from core import database
from core.errors import StoreError, store_error_from
from models.events import Event
from services.render import month_and_year_name, render_calendar


class MonthCalendar:
    """Events for one (year, month), kept in sync with the database."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        today = date.today()
        self._year = today.year
        self._month = today.month
        self._events: dict[int, list[Event]] = {}

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        """Currently selected month (1-12)."""
        return self._month

    def month_and_year_name(self) -> str:
        return month_and_year_name(self._year, self._month)

    def change_month(self, year: int, month: int) -> StoreError | None:
        """
        Select a new month and reload its events from the database.

        The previous month stays selected if the query fails.
        """
        try:
            rows = database.select_month_events(self.conn, year, month)
        except sqlite3.Error as e:
            return store_error_from(e)

        events: dict[int, list[Event]] = {}
        for row in rows:
            event = Event.from_row(row)
            events.setdefault(event.day, []).append(event)

        self._year, self._month, self._events = year, month, events
        return None

    def add_event(self, name: str, note: str | None, time: datetime) -> Event | StoreError:
        """
        Insert an event into the database, then into the cache.

        The caller is responsible for `time` falling within the selected month.
        """
        event = Event(id=None, name=name, note=note, time=time)
        try:
            event_id = database.insert_event(self.conn, event.name, event.note, event.time)
        except sqlite3.Error as e:
            return store_error_from(e)

        event = event.with_id(event_id)
        self._events.setdefault(event.day, []).append(event)
        return event

    def delete_event(self, event: Event) -> StoreError | None:
        """Delete an event from the database, then from its day bucket."""
        try:
            database.delete_event(self.conn, event.id)
        except sqlite3.Error as e:
            return store_error_from(e)

        bucket = self._events.get(event.day)
        if bucket is None:
            return None
        # Match on id; two events may share name and time
        remaining = [e for e in bucket if e.id != event.id]
        if remaining:
            self._events[event.day] = remaining
        else:
            del self._events[event.day]
        return None

    def get_events(self) -> dict[int, list[Event]]:
        """Snapshot of day -> events, in day order."""
        return {day: list(self._events[day]) for day in sorted(self._events)}

    def get_all_events(self) -> list[Event]:
        """All events in the month, by day then insertion order."""
        return [event for day in sorted(self._events) for event in self._events[day]]

    def days_with_events(self) -> set[int]:
        return set(self._events)

    def render(self) -> str:
        return render_calendar(
            self._year,
            self._month,
            self.days_with_events(),
            len(self.get_all_events()),
        )

    def print_calendar(self):
        print(self.render())
