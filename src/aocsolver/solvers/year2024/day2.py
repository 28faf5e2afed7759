"""Day 2: Red-Nosed Reports"""
from __future__ import annotations
from typing import List

from ...types import Solution
from .. import Solver


def is_safe(report: List[int]) -> bool:
    """Strictly monotonic with steps of 1 to 3."""
    steps = [b - a for a, b in zip(report, report[1:])]
    return all(1 <= s <= 3 for s in steps) or all(-3 <= s <= -1 for s in steps)


def is_safe_dampened(report: List[int]) -> bool:
    return is_safe(report) or any(
        is_safe(report[:i] + report[i + 1:]) for i in range(len(report))
    )


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.reports = [[int(v) for v in line.split()] for line in input.splitlines() if line.strip()]

    def solve_part_1(self) -> Solution:
        return Solution.of("Safe reports", sum(is_safe(r) for r in self.reports))

    def solve_part_2(self) -> Solution:
        return Solution.of("Safe reports with Problem Dampener", sum(is_safe_dampened(r) for r in self.reports))
