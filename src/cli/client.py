"""
Interactive text menu for browsing and editing a month of events.
"""

import sqlite3
from datetime import MAXYEAR, MINYEAR, datetime
from typing import Callable

from cli.logging import ActionLog, log_action
from cli.prompts import InputFn, prompt_boolean, prompt_int_range, prompt_month
from core.config import CLEAR_SCREEN_LINES, MAX_HOUR, MENU_OPTIONS, MIN_HOUR
from core.errors import StoreError
from models.events import Event
from services.calendar import MonthCalendar
from services.render import month_layout

NO_EVENTS_MESSAGE = " - No events found for this month."


class CalendarClient:
    """Prompt loop driving a MonthCalendar."""

    def __init__(
        self,
        calendar: MonthCalendar,
        input_fn: InputFn | None = None,
        output_fn: Callable[[str], None] | None = None,
    ):
        self.calendar = calendar
        self.input = input_fn or input
        self.output = output_fn or print

    def run(self):
        """Run the menu until the user quits. Blocks on input."""
        # Nothing is shown until some month has loaded
        while not self.change_calendar_date():
            pass
        running = True
        while running:
            self.output("\n" * (CLEAR_SCREEN_LINES - 1))
            self.output(self.calendar.render())
            self.output("")
            self.print_options()
            option = prompt_int_range(self.input, ">> ", 1, MENU_OPTIONS)
            self.output("")
            if option == 1:
                self.view_event()
            elif option == 2:
                self.add_event()
            elif option == 3:
                self.delete_event()
            elif option == 4:
                self.change_calendar_date()
            else:
                running = False

    def print_options(self):
        self.output("OPTIONS:")
        self.output("  1) View an event")
        self.output("  2) Add an event")
        self.output("  3) Delete an event")
        self.output("  4) Change the month")
        self.output("  5) Quit\n")

    def wait_for_enter(self):
        self.input("\n(press ENTER to continue) ")

    def prompt_event(self) -> Event:
        """List the month's events and let the user pick one."""
        events = self.calendar.get_all_events()
        self.output(f"Events in {self.calendar.month_and_year_name()}: ")
        for i, event in enumerate(events, start=1):
            self.output(f"  {i}) {event.name} ({event.date_and_time()})")
        self.output("\nPick which event ")
        return events[prompt_int_range(self.input, ">> ", 1, len(events)) - 1]

    def change_calendar_date(self) -> bool:
        """Ask for a month and year and load its events."""
        month = prompt_month(self.input, "Enter a month >> ")
        year = prompt_int_range(self.input, "Enter a year >> ", MINYEAR, MAXYEAR)

        log = ActionLog(action="change_month", year=year, month=month)
        error = self.calendar.change_month(year, month)
        if error is not None:
            log.record_error(error)
            self._report_error(error)
        self._log(log)
        return error is None

    def view_event(self):
        if not self.calendar.get_events():
            self.output(NO_EVENTS_MESSAGE)
        else:
            target = self.prompt_event()
            self.output("\n-----\n")
            for line in target.describe():
                self.output(line)
        self.wait_for_enter()

    def add_event(self):
        year, month = self.calendar.year, self.calendar.month
        _, days_in_month = month_layout(year, month)

        name = self.input("Name of event >> ")
        note = self.input("Set a note (optional) >> ")
        day = prompt_int_range(self.input, f"Enter the day of month (1-{days_in_month}) >> ", 1, days_in_month)
        hour = prompt_int_range(
            self.input, f"Enter the hour of day ({MIN_HOUR}-{MAX_HOUR}) >> ", MIN_HOUR, MAX_HOUR
        )

        log = ActionLog(action="add_event", year=year, month=month)
        result = self.calendar.add_event(name, note, datetime(year, month, day, hour))
        if isinstance(result, StoreError):
            log.record_error(result)
            self._report_error(result)
        else:
            log.event_id = result.id
            self.output("\n - Added event to calendar.")
        self._log(log)
        self.wait_for_enter()

    def delete_event(self):
        if not self.calendar.get_events():
            self.output(NO_EVENTS_MESSAGE)
            self.wait_for_enter()
            return

        target = self.prompt_event()
        if not prompt_boolean(self.input, f'Confirm deletion of event "{target.name}" (y/n) >> '):
            self.output("\n - Event was not deleted.")
            self.wait_for_enter()
            return

        log = ActionLog(
            action="delete_event",
            event_id=target.id,
            year=self.calendar.year,
            month=self.calendar.month,
        )
        error = self.calendar.delete_event(target)
        if error is not None:
            log.record_error(error)
            self._report_error(error)
        else:
            self.output("\n - Event deleted from calendar.")
        self._log(log)
        self.wait_for_enter()

    def _report_error(self, error: StoreError):
        self.output(f"\nError: {error.error}")

    def _log(self, log: ActionLog):
        try:
            log_action(self.calendar.conn, log)
        except sqlite3.Error as e:
            self.output(f"Warning: could not write action log: {e}")
