"""Published examples for the 2025 puzzles."""
from __future__ import annotations

import pytest

from aocsolver.dispatch import solver_for
from aocsolver.errors import InputParseError
from aocsolver.types import NOT_IMPLEMENTED

YEAR = 2025

# (day, example, part, expected)
EXAMPLES = [
    (1, 1, 1, "3"),
    (1, 1, 2, "6"),
    (2, 1, 1, "1227775554"),
    (2, 1, 2, "4174379265"),
    (3, 1, 1, "357"),
    (3, 1, 2, "3121910778619"),
    (4, 1, 1, "13"),
    (4, 1, 2, "43"),
    (5, 1, 1, "3"),
    (5, 1, 2, "14"),
    (6, 1, 1, "4277556"),
    (6, 1, 2, "3263827"),
    (7, 1, 1, "21"),
    (7, 1, 2, "40"),
    (8, 1, 2, "25272"),
    (9, 1, 1, "50"),
    (9, 1, 2, "24"),
    (10, 1, 1, "7"),
    (10, 1, 2, "33"),
    (11, 1, 1, "5"),
    (11, 2, 2, "2"),
    (12, 1, 1, "2"),
]


def solve(solver, part: int):
    return solver.solve_part_1() if part == 1 else solver.solve_part_2()


@pytest.mark.parametrize("day, n, part, expected", EXAMPLES)
def test_example(example, day, n, part, expected):
    solver = solver_for(example(YEAR, day, n), YEAR, day)
    assert solve(solver, part).solution == expected


def test_ten_shortest_connections(example):
    solver = solver_for(example(YEAR, 8), YEAR, 8)
    assert solver.make_connections(10) == 40


def test_joltage_picks_largest_digits_in_order():
    from aocsolver.solvers.year2025.day3 import max_joltage

    assert max_joltage("987654321111111", 2) == 98
    assert max_joltage("811111111111119", 2) == 89
    assert max_joltage("234234234234278", 12) == 434234234278


def test_rotation_parsing_rejects_unknown_direction():
    from aocsolver.solvers.year2025.day1 import parse_rotation

    with pytest.raises(InputParseError):
        parse_rotation("X12")


def test_machine_without_button_for_counter():
    from aocsolver.solvers.year2025.day10 import Machine, fewest_presses_for_joltage

    assert fewest_presses_for_joltage(Machine(0, ((0,),), (2, 0))) == 2
    with pytest.raises(ValueError):
        fewest_presses_for_joltage(Machine(0, ((0,),), (2, 1)))


def test_last_day_has_no_second_part(example):
    solver = solver_for(example(YEAR, 12), YEAR, 12)
    assert solver.solve_part_2() is NOT_IMPLEMENTED
