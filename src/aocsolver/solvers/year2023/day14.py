"""Day 14: Parabolic Reflector Dish"""
from __future__ import annotations
from typing import Dict, Tuple

from ...types import Solution
from .. import Solver

Platform = Tuple[str, ...]

SPIN_CYCLES = 1_000_000_000


def _roll_to_start(line: str) -> str:
    # 'O' sorts after '.', so reverse order moves rocks to the front of each segment
    return "#".join("".join(sorted(segment, reverse=True)) for segment in line.split("#"))


def roll_north(platform: Platform) -> Platform:
    columns = ["".join(col) for col in zip(*platform)]
    rolled = [_roll_to_start(col) for col in columns]
    return tuple("".join(row) for row in zip(*rolled))


def rotate_clockwise(platform: Platform) -> Platform:
    return tuple("".join(row) for row in zip(*platform[::-1]))


def spin_cycle(platform: Platform) -> Platform:
    """Tilt north, west, south, east."""
    for _ in range(4):
        platform = rotate_clockwise(roll_north(platform))
    return platform


def north_load(platform: Platform) -> int:
    height = len(platform)
    return sum(row.count("O") * (height - i) for i, row in enumerate(platform))


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.platform: Platform = tuple(line for line in input.splitlines() if line.strip())

    def solve_part_1(self) -> Solution:
        return Solution.of("Total load (part 1)", north_load(roll_north(self.platform)))

    def solve_part_2(self) -> Solution:
        seen: Dict[Platform, int] = {}
        history = []
        platform = self.platform
        step = 0
        while platform not in seen:
            seen[platform] = step
            history.append(platform)
            platform = spin_cycle(platform)
            step += 1
        cycle_start = seen[platform]
        cycle_length = step - cycle_start
        final = history[cycle_start + (SPIN_CYCLES - cycle_start) % cycle_length]
        return Solution.of("Total load (part 2)", north_load(final))
