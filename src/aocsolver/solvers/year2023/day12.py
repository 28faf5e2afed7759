"""Day 12: Hot Springs"""
from __future__ import annotations
from functools import lru_cache
from typing import List, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


def count_arrangements(pattern: str, groups: Tuple[int, ...]) -> int:
    """Count ways to assign '?' so that damaged runs ('#') match ``groups``."""

    @lru_cache(maxsize=None)
    def count(i: int, g: int) -> int:
        if g == len(groups):
            return 0 if "#" in pattern[i:] else 1
        if i >= len(pattern):
            return 0
        total = 0
        if pattern[i] in ".?":
            total += count(i + 1, g)
        if pattern[i] in "#?":
            end = i + groups[g]
            if (
                end <= len(pattern)
                and "." not in pattern[i:end]
                and (end == len(pattern) or pattern[end] != "#")
            ):
                total += count(end + 1, g + 1)
        return total

    return count(0, 0)


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.records: List[Tuple[str, Tuple[int, ...]]] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            parts = line.split()
            if len(parts) != 2:
                raise InputParseError(f"invalid record: {line!r}")
            self.records.append((parts[0], tuple(int(v) for v in parts[1].split(","))))

    def solve_part_1(self) -> Solution:
        total = sum(count_arrangements(p, g) for p, g in self.records)
        return Solution.of("Sum of arrangements", total)

    def solve_part_2(self) -> Solution:
        total = sum(count_arrangements("?".join([p] * 5), g * 5) for p, g in self.records)
        return Solution.of("Sum of arrangements, unfolded", total)
