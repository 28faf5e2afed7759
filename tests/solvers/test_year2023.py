"""Published examples for the 2023 puzzles."""
from __future__ import annotations

import pytest

from aocsolver.dispatch import solver_for
from aocsolver.types import NOT_IMPLEMENTED

YEAR = 2023

# (day, example, part, expected)
EXAMPLES = [
    (1, 1, 1, "142"),
    (1, 2, 2, "281"),
    (2, 1, 1, "8"),
    (2, 1, 2, "2286"),
    (3, 1, 1, "4361"),
    (3, 1, 2, "467835"),
    (4, 1, 1, "13"),
    (4, 1, 2, "30"),
    (5, 1, 1, "35"),
    (5, 1, 2, "46"),
    (6, 1, 1, "288"),
    (6, 1, 2, "71503"),
    (7, 1, 1, "6440"),
    (7, 1, 2, "5905"),
    (8, 1, 1, "2"),
    (8, 2, 1, "6"),
    (8, 3, 2, "6"),
    (9, 1, 1, "114"),
    (9, 1, 2, "2"),
    (10, 1, 1, "4"),
    (10, 2, 1, "8"),
    (10, 3, 2, "4"),
    (10, 4, 2, "8"),
    (11, 1, 1, "374"),
    (12, 1, 1, "21"),
    (12, 1, 2, "525152"),
    (13, 1, 1, "405"),
    (13, 1, 2, "400"),
    (14, 1, 1, "136"),
    (14, 1, 2, "64"),
    (15, 1, 1, "1320"),
    (15, 1, 2, "145"),
    (16, 1, 1, "46"),
    (16, 1, 2, "51"),
    (17, 1, 1, "102"),
    (17, 1, 2, "94"),
    (17, 2, 2, "71"),
    (18, 1, 1, "62"),
    (18, 1, 2, "952408144115"),
    (19, 1, 1, "19114"),
    (19, 1, 2, "167409079868000"),
    (20, 1, 1, "32000000"),
    (20, 2, 1, "11687500"),
    (22, 1, 1, "5"),
    (22, 1, 2, "7"),
    (23, 1, 1, "94"),
    (23, 1, 2, "154"),
    (24, 1, 2, "47"),
    (25, 1, 1, "54"),
]


def solve(solver, part: int):
    return solver.solve_part_1() if part == 1 else solver.solve_part_2()


@pytest.mark.parametrize("day, n, part, expected", EXAMPLES)
def test_example(example, day, n, part, expected):
    solver = solver_for(example(YEAR, day, n), YEAR, day)
    assert solve(solver, part).solution == expected


@pytest.mark.parametrize("expansion, expected", [(2, 374), (10, 1030), (100, 8410)])
def test_galaxy_expansion(example, expansion, expected):
    solver = solver_for(example(YEAR, 11), YEAR, 11)
    assert solver.sum_shortest_paths(expansion) == expected


@pytest.mark.parametrize(
    "steps, infinite, expected",
    [(6, False, 16), (6, True, 16), (10, True, 50), (50, True, 1594)],
)
def test_garden_plots(example, steps, infinite, expected):
    solver = solver_for(example(YEAR, 21), YEAR, 21)
    assert solver.reachable_in_steps(steps, infinite=infinite)[-1] == expected


def test_hailstone_intersections_in_test_area(example):
    solver = solver_for(example(YEAR, 24), YEAR, 24)
    assert solver.count_intersections(7, 27) == 2


def test_last_day_has_no_second_part(example):
    solver = solver_for(example(YEAR, 25), YEAR, 25)
    assert solver.solve_part_2() is NOT_IMPLEMENTED


def test_calibration_value_handles_overlapping_words():
    from aocsolver.solvers.year2023.day1 import calibration_value

    assert calibration_value("eightwo", spelled=True) == 82
    assert calibration_value("no digits here") == 0


def test_ways_to_win_excludes_ties():
    from aocsolver.solvers.year2023.day6 import ways_to_win

    # holding for 10 of 30 ms exactly ties a record of 200
    assert ways_to_win(30, 200) == 9
    assert ways_to_win(20, 100) == 0
