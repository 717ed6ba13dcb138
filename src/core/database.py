"""
SQLite database operations for calendar events.
"""

import sqlite3
from datetime import datetime
from pathlib import Path

from core.config import DB_PATH
from core.errors import StoreConnectionError

# Year is zero-padded separately; strftime("%Y") gives "999" for year 999
TIMESTAMP_FORMAT = "%m-%d %H:%M:%S"


def get_connection(path: Path | str = DB_PATH) -> sqlite3.Connection:
    """
    Open a database connection and make sure the tables exist.

    Raises:
        StoreConnectionError: if the database cannot be opened
    """
    try:
        if str(path) != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(path)
        create_tables(conn)
    except (OSError, sqlite3.Error) as e:
        raise StoreConnectionError(f"Could not open database at {path}: {e}") from e
    return conn


def create_tables(conn: sqlite3.Connection):
    """Create the events and action log tables if they don't exist."""
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS events (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            note TEXT,
            time TEXT NOT NULL
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS calendar_actions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            action_id TEXT UNIQUE NOT NULL,
            timestamp TEXT NOT NULL,
            action TEXT NOT NULL CHECK(action IN ('change_month', 'add_event', 'delete_event')),
            event_id INTEGER,
            year INTEGER,
            month INTEGER,
            status TEXT NOT NULL CHECK(status IN ('ok', 'error')),
            error_code TEXT,
            error_message TEXT
        )
    """)

    cursor.execute("CREATE INDEX IF NOT EXISTS idx_events_time ON events(time)")
    conn.commit()


def format_timestamp(time: datetime) -> str:
    """Format a datetime the way it is stored in the events table."""
    return f"{time.year:04d}-{time.strftime(TIMESTAMP_FORMAT)}"


def select_month_events(conn: sqlite3.Connection, year: int, month: int) -> list[tuple]:
    """Return (id, name, note, time) rows for every event in the given month (1-12)."""
    cursor = conn.cursor()
    cursor.execute(
        """
        SELECT id, name, note, time FROM events
        WHERE CAST(strftime('%Y', time) AS INTEGER) = ?
          AND CAST(strftime('%m', time) AS INTEGER) = ?
        ORDER BY id
        """,
        (year, month),
    )
    return cursor.fetchall()


def insert_event(
    conn: sqlite3.Connection, name: str, note: str | None, time: datetime
) -> int:
    """Insert an event and return its generated id."""
    cursor = conn.cursor()
    try:
        cursor.execute(
            "INSERT INTO events (name, note, time) VALUES (?, ?, ?)",
            (name, note or None, format_timestamp(time)),
        )
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    return cursor.lastrowid


def delete_event(conn: sqlite3.Connection, event_id: int) -> int:
    """Delete an event by id and return the number of rows removed."""
    cursor = conn.cursor()
    try:
        cursor.execute("DELETE FROM events WHERE id = ?", (event_id,))
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    return cursor.rowcount
