"""Day 3: Mull It Over"""
from __future__ import annotations
import re

from ...types import Solution
from .. import Solver

INSTRUCTION = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|do\(\)|don't\(\)")


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.instructions = list(INSTRUCTION.finditer(input))

    def run(self, conditionals: bool) -> int:
        enabled = True
        total = 0
        for match in self.instructions:
            op = match.group(0)
            if op == "do()":
                enabled = True
            elif op == "don't()":
                enabled = not conditionals
            elif enabled:
                total += int(match.group(1)) * int(match.group(2))
        return total

    def solve_part_1(self) -> Solution:
        return Solution.of("Sum of multiplications", self.run(conditionals=False))

    def solve_part_2(self) -> Solution:
        return Solution.of("Sum of enabled multiplications", self.run(conditionals=True))
