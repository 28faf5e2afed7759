"""Day 7: Laboratories"""
from __future__ import annotations
from collections import Counter

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.rows = [line for line in input.splitlines() if line.strip()]
        start = self.rows[0].find("S") if self.rows else -1
        if start < 0:
            raise InputParseError("missing start marker")
        self.start = start
        self.width = len(self.rows[0])

    def propagate(self):
        """Return (number of splits, number of timelines)."""
        beams: Counter = Counter({self.start: 1})
        splits = 0
        for row in self.rows[1:]:
            following: Counter = Counter()
            for col, timelines in beams.items():
                if row[col] == "^":
                    splits += 1
                    if col > 0:
                        following[col - 1] += timelines
                    if col + 1 < self.width:
                        following[col + 1] += timelines
                else:
                    following[col] += timelines
            beams = following
        return splits, sum(beams.values())

    def solve_part_1(self) -> Solution:
        return Solution.of("Beam splits", self.propagate()[0])

    def solve_part_2(self) -> Solution:
        return Solution.of("Timelines", self.propagate()[1])
