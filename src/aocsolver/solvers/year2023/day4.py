"""Day 4: Scratchcards"""
from __future__ import annotations
import re
from typing import List

from ...types import Solution
from .. import Solver

LINE_PATTERN = re.compile(r"^Card\s+(\d+):([0-9 ]*)\|([0-9 ]*)$")


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.num_winning: List[int] = []
        for line in input.splitlines():
            match = LINE_PATTERN.match(line.strip())
            if match is None:
                continue
            winning = set(map(int, match.group(2).split()))
            ours = set(map(int, match.group(3).split()))
            self.num_winning.append(len(winning & ours))

    def solve_part_1(self) -> Solution:
        points = sum(1 << (n - 1) for n in self.num_winning if n > 0)
        return Solution.of("Points", points)

    def solve_part_2(self) -> Solution:
        n = len(self.num_winning)
        copies = [1] * n
        for i, wins in enumerate(self.num_winning):
            for j in range(i + 1, min(n, i + 1 + wins)):
                copies[j] += copies[i]
        return Solution.of("Number of scratch cards", sum(copies))
