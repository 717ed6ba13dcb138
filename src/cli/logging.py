"""SQLite action logging for the calendar client."""

import sqlite3
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from core.errors import StoreError


@dataclass
class ActionLog:
    """One user action against the calendar and its outcome."""

    action: str  # change_month, add_event, delete_event
    action_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    event_id: int | None = None
    year: int | None = None
    month: int | None = None
    status: str = "ok"
    error_code: str | None = None
    error_message: str | None = None

    def record_error(self, error: StoreError):
        self.status = "error"
        self.error_code = error.code
        self.error_message = error.error


def log_action(conn: sqlite3.Connection, log: ActionLog) -> None:
    """Write an action log row to the calendar_actions table."""
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO calendar_actions (
            action_id, timestamp, action, event_id, year, month,
            status, error_code, error_message
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
    """,
        (
            log.action_id,
            log.timestamp,
            log.action,
            log.event_id,
            log.year,
            log.month,
            log.status,
            log.error_code,
            log.error_message,
        ),
    )
    conn.commit()
