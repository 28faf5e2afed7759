"""Day 5: Cafeteria"""
from __future__ import annotations
from typing import List, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

Range = Tuple[int, int]


def merge_ranges(ranges: List[Range]) -> List[Range]:
    """Merge overlapping inclusive ranges."""
    merged: List[Range] = []
    for lo, hi in sorted(ranges):
        if merged and lo <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
        else:
            merged.append((lo, hi))
    return merged


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        blocks = input.strip().split("\n\n")
        if len(blocks) != 2:
            raise InputParseError("expected ranges and ingredient ids separated by a blank line")
        self.ranges: List[Range] = []
        for line in blocks[0].splitlines():
            lo, sep, hi = line.partition("-")
            if not sep:
                raise InputParseError(f"invalid range: {line!r}")
            self.ranges.append((int(lo), int(hi)))
        self.ingredients = [int(line) for line in blocks[1].split()]

    def is_fresh(self, ingredient: int) -> bool:
        return any(lo <= ingredient <= hi for lo, hi in self.ranges)

    def solve_part_1(self) -> Solution:
        return Solution.of("Fresh ingredients", sum(1 for i in self.ingredients if self.is_fresh(i)))

    def solve_part_2(self) -> Solution:
        total = sum(hi - lo + 1 for lo, hi in merge_ranges(self.ranges))
        return Solution.of("Fresh ingredient ids", total)
