"""Tests for the shared dataclasses and calendar helpers."""
from __future__ import annotations
import pickle
from datetime import date, datetime, timezone

import pytest

from aocsolver.config import current_aoc_date
from aocsolver.types import NOT_IMPLEMENTED, InputKey, RequestedDays, Solution


def test_input_key_serialize_and_order():
    assert InputKey(2023, 5).serialize() == "2023-05"
    assert sorted([InputKey(2024, 1), InputKey(2023, 25)])[0] == InputKey(2023, 25)


@pytest.mark.parametrize("year, day", [(2024, 0), (2024, 26), (-1, 1)])
def test_input_key_rejects_out_of_range(year, day):
    with pytest.raises(ValueError):
        InputKey(year, day)


def test_requested_days_defaults_to_today():
    requested = RequestedDays.from_args(None, None, today=date(2024, 12, 7))
    assert requested == RequestedDays(2024, [7])
    assert requested.keys() == [InputKey(2024, 7)]


def test_requested_days_keeps_explicit_values():
    requested = RequestedDays.from_args(2023, [3, 1], today=date(2024, 12, 7))
    assert requested.year == 2023
    assert requested.days == [3, 1]
    assert RequestedDays.from_args(None, [2], today=date(2025, 12, 1)) == RequestedDays(2025, [2])


def test_puzzle_date_is_utc_minus_5():
    # 03:00 UTC on the 2nd is still the 1st in the puzzle time zone
    assert current_aoc_date(datetime(2024, 12, 2, 3, 0, tzinfo=timezone.utc)) == date(2024, 12, 1)
    assert current_aoc_date(datetime(2024, 12, 2, 5, 0, tzinfo=timezone.utc)) == date(2024, 12, 2)


def test_solution_rendering():
    solution = Solution.of("Sum of part numbers", 4361)
    assert solution.solution == "4361"
    assert str(solution) == "Sum of part numbers: 4361"


def test_not_implemented_is_a_singleton():
    assert str(NOT_IMPLEMENTED) == "(Solver for part not implemented.)"
    assert pickle.loads(pickle.dumps(NOT_IMPLEMENTED)) is NOT_IMPLEMENTED
