"""Day 9: Mirage Maintenance"""
from __future__ import annotations
from typing import List

import numpy as np

from ...types import Solution
from .. import Solver


def extrapolate_right(values: np.ndarray) -> int:
    """Next value of the sequence via repeated differences."""
    total = 0
    while values.size and np.any(values != 0):
        total += int(values[-1])
        values = np.diff(values)
    return total


def extrapolate_left(values: np.ndarray) -> int:
    """Previous value of the sequence via repeated differences."""
    return extrapolate_right(values[::-1])


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.sequences: List[np.ndarray] = [
            np.array([int(v) for v in line.split()], dtype=np.int64)
            for line in input.splitlines()
            if line.strip()
        ]

    def solve_part_1(self) -> Solution:
        return Solution.of(
            "Sum of extrapolated values", sum(extrapolate_right(s) for s in self.sequences)
        )

    def solve_part_2(self) -> Solution:
        return Solution.of(
            "Sum of backwards extrapolated values",
            sum(extrapolate_left(s) for s in self.sequences),
        )
