"""Published examples for the 2024 puzzles."""
from __future__ import annotations

import pytest

from aocsolver.dispatch import solver_for
from aocsolver.types import NOT_IMPLEMENTED

YEAR = 2024

# (day, example, part, expected)
EXAMPLES = [
    (1, 1, 1, "11"),
    (1, 1, 2, "31"),
    (2, 1, 1, "2"),
    (2, 1, 2, "4"),
    (3, 1, 1, "161"),
    (3, 2, 2, "48"),
    (4, 1, 1, "18"),
    (4, 1, 2, "9"),
    (5, 1, 1, "143"),
    (5, 1, 2, "123"),
    (6, 1, 1, "41"),
    (6, 1, 2, "6"),
    (7, 1, 1, "3749"),
    (7, 1, 2, "11387"),
    (8, 1, 1, "14"),
    (8, 1, 2, "34"),
    (9, 1, 1, "1928"),
    (9, 1, 2, "2858"),
    (10, 1, 1, "36"),
    (10, 1, 2, "81"),
    (11, 1, 1, "55312"),
    (12, 1, 1, "140"),
    (12, 1, 2, "80"),
    (12, 2, 1, "1930"),
    (12, 2, 2, "1206"),
    (13, 1, 1, "480"),
    (13, 1, 2, "875318608908"),
    (15, 1, 1, "2028"),
    (15, 2, 2, "618"),
    (16, 1, 1, "7036"),
    (16, 1, 2, "45"),
    (17, 1, 1, "4,6,3,5,6,3,5,2,1,0"),
    (17, 2, 2, "117440"),
    (19, 1, 1, "6"),
    (19, 1, 2, "16"),
    (21, 1, 1, "126384"),
    (22, 1, 1, "37327623"),
    (22, 2, 2, "23"),
    (23, 1, 1, "7"),
    (23, 1, 2, "co,de,ka,ta"),
    (24, 1, 1, "4"),
    (25, 1, 1, "3"),
]


def solve(solver, part: int):
    return solver.solve_part_1() if part == 1 else solver.solve_part_2()


@pytest.mark.parametrize("day, n, part, expected", EXAMPLES)
def test_example(example, day, n, part, expected):
    solver = solver_for(example(YEAR, day, n), YEAR, day)
    assert solve(solver, part).solution == expected


def test_stones_after_six_blinks():
    from aocsolver.solvers.year2024.day11 import count_stones

    assert count_stones([125, 17], 6) == 22


def test_safety_factor_on_small_floor(example):
    solver = solver_for(example(YEAR, 14), YEAR, 14)
    assert solver.safety_factor(width=11, height=7) == 12


def test_ram_run_on_small_grid(example):
    solver = solver_for(example(YEAR, 18), YEAR, 18)
    assert solver.shortest_path(size=7, fallen=12) == 22
    assert solver.first_blocking_byte(size=7) == "6,1"


@pytest.mark.parametrize(
    "max_cheat, min_saving, expected",
    [
        (2, 64, 1),
        (2, 40, 2),
        (2, 20, 5),
        (2, 10, 10),
        (2, 2, 44),
        (20, 76, 3),
        (20, 74, 7),
        (20, 50, 285),
    ],
)
def test_cheats(example, max_cheat, min_saving, expected):
    solver = solver_for(example(YEAR, 20), YEAR, 20)
    assert solver.count_cheats(max_cheat, min_saving) == expected


def test_chronospatial_program_registers():
    from aocsolver.solvers.year2024.day17 import run

    # bst 6: B = C % 8
    assert run([2, 6], a=0, c=9) == []
    assert run([5, 0, 5, 1, 5, 4], a=10) == [0, 1, 2]


def test_last_day_has_no_second_part(example):
    solver = solver_for(example(YEAR, 25), YEAR, 25)
    assert solver.solve_part_2() is NOT_IMPLEMENTED
