"""Error types raised by the runner and the solvers.

All exceptions derive from `AocError` so the CLI can report any of them
uniformly. HTTP failures carry the status code and response body for
diagnosis.
"""

from __future__ import annotations

from typing import Any, Optional


class AocError(Exception):
    """Base error for all aocsolver exceptions."""


class AocClientError(AocError):
    """Raised when fetching from the Advent of Code website fails.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional response payload (e.g., body text).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class SessionIdError(AocError):
    """Raised when the session id cannot be read, stored or is invalid."""


class NoSolverError(AocError):
    """Raised when no solver module exists for the requested day."""

    def __init__(self, year: int, day: int) -> None:
        super().__init__(f"no solver for day {day} of year {year}")
        self.year = year
        self.day = day


class InputParseError(AocError, ValueError):
    """Raised for puzzle input that does not match the expected format."""


class ScaffoldError(AocError):
    """Raised when a solver module cannot be created from the template."""
