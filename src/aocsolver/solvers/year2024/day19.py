"""Day 19: Linen Layout"""
from __future__ import annotations
from typing import List

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


def count_arrangements(design: str, towels: List[str]) -> int:
    ways = [1] + [0] * len(design)
    for end in range(1, len(design) + 1):
        for towel in towels:
            if len(towel) <= end and design.startswith(towel, end - len(towel)):
                ways[end] += ways[end - len(towel)]
    return ways[-1]


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        blocks = input.strip().split("\n\n")
        if len(blocks) != 2:
            raise InputParseError("expected towel patterns and designs separated by a blank line")
        self.towels = [t.strip() for t in blocks[0].split(",")]
        self.designs = [line.strip() for line in blocks[1].splitlines() if line.strip()]
        self.ways = [count_arrangements(d, self.towels) for d in self.designs]

    def solve_part_1(self) -> Solution:
        return Solution.of("Possible designs", sum(1 for w in self.ways if w))

    def solve_part_2(self) -> Solution:
        return Solution.of("Total arrangements", sum(self.ways))
