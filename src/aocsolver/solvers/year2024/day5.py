"""Day 5: Print Queue"""
from __future__ import annotations
from functools import cmp_to_key
from typing import List, Set, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        blocks = input.strip().split("\n\n")
        if len(blocks) != 2:
            raise InputParseError("expected rules and updates separated by a blank line")
        self.rules: Set[Tuple[int, int]] = set()
        for line in blocks[0].splitlines():
            before, sep, after = line.partition("|")
            if not sep:
                raise InputParseError(f"invalid ordering rule: {line!r}")
            self.rules.add((int(before), int(after)))
        self.updates: List[List[int]] = [
            [int(v) for v in line.split(",")] for line in blocks[1].splitlines() if line.strip()
        ]

    def compare(self, a: int, b: int) -> int:
        if (a, b) in self.rules:
            return -1
        if (b, a) in self.rules:
            return 1
        return 0

    def in_order(self, update: List[int]) -> bool:
        return all(
            (update[j], update[i]) not in self.rules
            for i in range(len(update))
            for j in range(i + 1, len(update))
        )

    def solve_part_1(self) -> Solution:
        total = sum(u[len(u) // 2] for u in self.updates if self.in_order(u))
        return Solution.of("Sum of middle pages of ordered updates", total)

    def solve_part_2(self) -> Solution:
        key = cmp_to_key(self.compare)
        total = sum(
            sorted(u, key=key)[len(u) // 2] for u in self.updates if not self.in_order(u)
        )
        return Solution.of("Sum of middle pages of reordered updates", total)
