"""
Tests for the interactive client, driven by scripted input.
"""

import builtins

from cli.client import NO_EVENTS_MESSAGE, CalendarClient
from core.errors import ErrorCodes, StoreError
from scripts import run_calendar
from services.calendar import MonthCalendar


def scripted(*answers):
    remaining = iter(answers)
    return lambda prompt: next(remaining)


def make_client(month_calendar, *answers):
    output = []
    client = CalendarClient(month_calendar, input_fn=scripted(*answers), output_fn=output.append)
    return client, output


def logged_actions(conn):
    return conn.execute("SELECT action, status FROM calendar_actions ORDER BY id").fetchall()


def test_full_session(conn):
    cal = MonthCalendar(conn)
    client, output = make_client(
        cal,
        "february", "2024",                  # initial month
        "2", "Standup", "", "5", "9", "",    # add
        "1", "1", "",                        # view
        "3", "1", "y", "",                   # delete
        "5",                                 # quit
    )

    client.run()

    text = "\n".join(output)
    assert " - Added event to calendar." in text
    assert "EVENT NAME: Standup" in text
    assert "  1) Standup (February 05 at 09:00 AM)" in text
    assert " - Event deleted from calendar." in text
    assert cal.get_events() == {}
    assert logged_actions(conn) == [
        ("change_month", "ok"),
        ("add_event", "ok"),
        ("delete_event", "ok"),
    ]


def test_change_month(month_calendar):
    client, _ = make_client(month_calendar, "march", "2024")
    assert client.change_calendar_date() is True
    assert (month_calendar.year, month_calendar.month) == (2024, 3)


def test_change_month_failure_reported(conn, month_calendar):
    conn.execute("DROP TABLE events")
    client, output = make_client(month_calendar, "march", "2024")

    assert client.change_calendar_date() is False

    assert month_calendar.month == 2
    assert any(line.startswith("\nError: ") for line in output)
    assert logged_actions(conn) == [("change_month", "error")]


def test_view_without_events(conn):
    cal = MonthCalendar(conn)
    cal.change_month(2023, 1)
    client, output = make_client(cal, "")
    client.view_event()
    assert output == [NO_EVENTS_MESSAGE]


def test_add_rejects_day_beyond_month_length(month_calendar):
    client, _ = make_client(month_calendar, "Leap day", "", "30", "29", "0", "")
    client.add_event()
    added = month_calendar.get_events()[29][-1]
    assert added.name == "Leap day"
    assert added.time.hour == 0


def test_add_failure_leaves_calendar_unchanged(conn, month_calendar):
    before = month_calendar.get_all_events()
    conn.execute("DROP TABLE events")
    client, output = make_client(month_calendar, "Lunch", "", "6", "12", "")

    client.add_event()

    assert month_calendar.get_all_events() == before
    assert " - Added event to calendar." not in output
    assert logged_actions(conn) == [("add_event", "error")]


def test_delete_declined(month_calendar):
    client, output = make_client(month_calendar, "3", "n", "")
    client.delete_event()
    assert "\n - Event was not deleted." in output
    assert 29 in month_calendar.get_events()


def test_delete_picks_from_month_list(month_calendar):
    client, _ = make_client(month_calendar, "2", "yes", "")
    client.delete_event()
    assert [e.name for e in month_calendar.get_all_events()] == ["Standup", "Dentist"]


def test_log_failure_does_not_break_action(conn, month_calendar):
    conn.execute("DROP TABLE calendar_actions")
    client, output = make_client(month_calendar, "Lunch", "", "6", "12", "")

    client.add_event()

    assert 6 in month_calendar.get_events()
    assert any(line.startswith("Warning: could not write action log") for line in output)


class TestRunCalendar:
    def test_runs_and_closes(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(builtins, "input", scripted("july", "2024", "5"))
        assert run_calendar.main(tmp_path / "calendar.db") == 0
        assert "July 2024 (no events)" in capsys.readouterr().out

    def test_connection_failure_exits(self, tmp_path, capsys):
        blocker = tmp_path / "file"
        blocker.write_text("")
        assert run_calendar.main(blocker / "calendar.db") == 1
        assert "could not connect to the database" in capsys.readouterr().out


def test_run_asks_again_until_first_month_loads(conn, monkeypatch):
    cal = MonthCalendar(conn)
    real_change_month = cal.change_month
    failures = [StoreError(error="database is locked", code=ErrorCodes.OPERATION_ERROR)]

    def fail_once(year, month):
        if failures:
            return failures.pop()
        return real_change_month(year, month)

    monkeypatch.setattr(cal, "change_month", fail_once)
    client, output = make_client(cal, "march", "2024", "april", "2024", "5")

    client.run()

    assert (cal.year, cal.month) == (2024, 4)
    assert "\nError: database is locked" in output
    assert sum("April 2024 (no events)" in line for line in output) == 1
    assert logged_actions(conn) == [("change_month", "error"), ("change_month", "ok")]
