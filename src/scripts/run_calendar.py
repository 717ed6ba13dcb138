#!/usr/bin/env python3
"""
Run the interactive text calendar.

Reads the database location from CALENDAR_DB_PATH (or .env) and opens a
single connection for the whole session.

Usage:
    uv run python src/scripts/run_calendar.py
    uv run python src/scripts/run_calendar.py --db data/db/other.db
"""

import argparse
import sys
import traceback
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.client import CalendarClient
from core.config import DB_PATH
from core.database import get_connection
from core.errors import StoreConnectionError
from services.calendar import MonthCalendar


def main(db_path: Path = DB_PATH) -> int:
    """Main entry point. Returns the process exit code."""
    try:
        conn = get_connection(db_path)
    except StoreConnectionError as e:
        print("Error: could not connect to the database.")
        print("Check that CALENDAR_DB_PATH points to a writable location.")
        print(f"  ({e})")
        return 1

    try:
        client = CalendarClient(MonthCalendar(conn))
        client.run()
    except (KeyboardInterrupt, EOFError):
        print("\nBye!")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    finally:
        conn.close()

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Browse and edit calendar events")
    parser.add_argument(
        "--db",
        type=Path,
        default=DB_PATH,
        help=f"Path to the SQLite database. Defaults to {DB_PATH}.",
    )
    args = parser.parse_args()

    sys.exit(main(args.db))
