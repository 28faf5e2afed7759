"""Day 14: Restroom Redoubt"""
from __future__ import annotations
import re

import numpy as np

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

ROBOT_PATTERN = re.compile(r"^p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)$")
WIDTH = 101
HEIGHT = 103


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        robots = []
        for line in input.splitlines():
            if not line.strip():
                continue
            match = ROBOT_PATTERN.match(line.strip())
            if match is None:
                raise InputParseError(f"invalid robot: {line!r}")
            robots.append([int(v) for v in match.groups()])
        robots_array = np.array(robots, dtype=np.int64).reshape(-1, 4)
        self.positions = robots_array[:, :2]
        self.velocities = robots_array[:, 2:]

    def positions_after(self, seconds: int, width: int, height: int) -> np.ndarray:
        return (self.positions + seconds * self.velocities) % np.array([width, height])

    def safety_factor(self, width: int = WIDTH, height: int = HEIGHT, seconds: int = 100) -> int:
        pos = self.positions_after(seconds, width, height)
        x, y = pos[:, 0], pos[:, 1]
        mid_x, mid_y = width // 2, height // 2
        factor = 1
        for x_side in (x < mid_x, x > mid_x):
            for y_side in (y < mid_y, y > mid_y):
                factor *= int(np.count_nonzero(x_side & y_side))
        return factor

    def easter_egg_time(self, width: int = WIDTH, height: int = HEIGHT) -> int:
        """First second at which no two robots overlap."""
        for seconds in range(width * height):
            pos = self.positions_after(seconds, width, height)
            if len(np.unique(pos[:, 0] * height + pos[:, 1])) == len(pos):
                return seconds
        raise ValueError("robots never spread out without overlap")

    def solve_part_1(self) -> Solution:
        return Solution.of("Safety factor after 100 seconds", self.safety_factor())

    def solve_part_2(self) -> Solution:
        return Solution.of("Seconds until the Easter egg", self.easter_egg_time())
