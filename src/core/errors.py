"""
Store error values returned by calendar operations.
"""

import sqlite3

from pydantic import BaseModel


class ErrorCodes:
    """Error code constants."""

    CONNECTION_ERROR = "CONNECTION_ERROR"
    OPERATION_ERROR = "OPERATION_ERROR"


class StoreError(BaseModel):
    """Failure of a single store operation."""

    error: str
    code: str
    details: list[str] = []


class StoreConnectionError(Exception):
    """Raised when a session with the database cannot be established."""


def store_error_from(exc: sqlite3.Error) -> StoreError:
    """Convert a sqlite3 exception into a StoreError value."""
    # Closed or misused connections surface as ProgrammingError/InterfaceError
    if isinstance(exc, (sqlite3.ProgrammingError, sqlite3.InterfaceError)):
        code = ErrorCodes.CONNECTION_ERROR
    else:
        code = ErrorCodes.OPERATION_ERROR
    return StoreError(
        error=str(exc) or exc.__class__.__name__,
        code=code,
        details=[exc.__class__.__name__],
    )
