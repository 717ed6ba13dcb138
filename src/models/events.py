"""
Data model for calendar events.

Events are immutable; a copy with the store-assigned id is made after insert.
"""

from dataclasses import dataclass, replace
from datetime import datetime

DATE_FORMAT_LONG = "%A, %B %d, %Y"
DATE_FORMAT_SHORT = "%B %d"
TIME_FORMAT = "%I:%M %p"


@dataclass(frozen=True)
class Event:
    """A named event at a point in time."""

    id: int | None
    name: str
    note: str | None
    time: datetime

    def __post_init__(self):
        # Empty notes and missing notes mean the same thing
        if not self.note:
            object.__setattr__(self, "note", None)
        object.__setattr__(self, "time", self.time.replace(second=0, microsecond=0))

    @classmethod
    def from_row(cls, row: tuple) -> "Event":
        """Parse an (id, name, note, time) row from the events table."""
        event_id, name, note, time = row
        if isinstance(time, str):
            time = datetime.fromisoformat(time)
        return cls(id=event_id, name=name, note=note, time=time)

    def with_id(self, event_id: int) -> "Event":
        return replace(self, id=event_id)

    @property
    def day(self) -> int:
        return self.time.day

    @property
    def has_note(self) -> bool:
        return self.note is not None

    def date_and_time(self) -> str:
        """Short description without the year, e.g. 'February 05 at 09:00 AM'."""
        return f"{self.time.strftime(DATE_FORMAT_SHORT)} at {self.time.strftime(TIME_FORMAT)}"

    def describe(self) -> list[str]:
        """Lines shown when viewing the event."""
        lines = [f"EVENT NAME: {self.name}"]
        if self.has_note:
            lines.append(f' -- NOTE: "{self.note}"')
        lines.append(f" -- DATE: {self.time.strftime(DATE_FORMAT_LONG)}")
        lines.append(f" -- TIME: {self.time.strftime(TIME_FORMAT)}")
        return lines
