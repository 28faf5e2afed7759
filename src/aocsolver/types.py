"""types.py - Canonical dataclasses shared by the runner and solvers.

Defines immutable dataclasses used throughout the package:
- InputKey: (year, day) identifying one puzzle input
- RequestedDays: the days a CLI invocation works on
- Solution: a described puzzle answer
- NOT_IMPLEMENTED: marker for a part without a solver
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Union

from .config import FIRST_DAY, LAST_DAY, current_aoc_date


@dataclass(frozen=True, order=True)
class InputKey:
    """Identifies the input of one puzzle.

    Attributes:
        year: Contest year
        day: Day of the advent calendar
    """

    year: int
    day: int

    def __post_init__(self):
        if self.year < 0:
            raise ValueError(f"Year must be non-negative, got {self.year}")
        if not (FIRST_DAY <= self.day <= LAST_DAY):
            raise ValueError(f"Day must be in {FIRST_DAY}..{LAST_DAY}, got {self.day}")

    def serialize(self) -> str:
        """Return the cache file name for this input."""
        return f"{self.year:04d}-{self.day:02d}"


@dataclass(frozen=True)
class RequestedDays:
    """Year and days selected on the command line.

    Attributes:
        year: Contest year
        days: Days to process, in the requested order
    """

    year: int
    days: List[int] = field(default_factory=list)

    @classmethod
    def from_args(
        cls, year: Optional[int], days: Optional[List[int]], today: Optional[date] = None
    ) -> "RequestedDays":
        """Fill in missing year/days from the current puzzle date.

        Args:
            year: Year from the CLI or None
            days: Days from the CLI or None
            today: Date in the puzzle time zone (default: now)

        Returns:
            RequestedDays with both fields populated
        """
        if year is not None and days is not None:
            return cls(year=year, days=list(days))
        if today is None:
            today = current_aoc_date()
        return cls(
            year=year if year is not None else today.year,
            days=list(days) if days is not None else [today.day],
        )

    def keys(self) -> List[InputKey]:
        """Return one InputKey per requested day."""
        return [InputKey(self.year, day) for day in self.days]


@dataclass(frozen=True)
class Solution:
    """A puzzle answer with a short description.

    Attributes:
        description: What the number means (e.g. 'Sum of part numbers')
        solution: The answer as submitted to the website
    """

    description: str
    solution: str

    @classmethod
    def of(cls, description: str, value: object) -> "Solution":
        """Build a Solution, stringifying the value."""
        return cls(description, str(value))

    def __str__(self) -> str:
        return f"{self.description}: {self.solution}"


class _NotImplemented:
    """Marker for a puzzle part that has no solver."""

    _instance: Optional["_NotImplemented"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __str__(self) -> str:
        return "(Solver for part not implemented.)"

    def __repr__(self) -> str:
        return "NOT_IMPLEMENTED"

    def __reduce__(self):
        return (_NotImplemented, ())


NOT_IMPLEMENTED = _NotImplemented()

MaybeSolution = Union[Solution, _NotImplemented]
