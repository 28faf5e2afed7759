"""Day 6: Trash Compactor"""
from __future__ import annotations
from math import prod
from typing import List

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


def _apply(operator: str, operands: List[int]) -> int:
    if operator == "+":
        return sum(operands)
    if operator == "*":
        return prod(operands)
    raise InputParseError(f"invalid operator {operator!r}")


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        lines = [line for line in input.split("\n") if line.strip()]
        if len(lines) < 2:
            raise InputParseError("worksheet needs operand rows and an operator row")
        width = max(len(line) for line in lines)
        self.rows = [line.ljust(width) for line in lines[:-1]]
        self.operators = lines[-1].ljust(width)

    def solve_part_1(self) -> Solution:
        numbers = [[int(v) for v in row.split()] for row in self.rows]
        operators = self.operators.split()
        total = sum(
            _apply(op, [row[i] for row in numbers]) for i, op in enumerate(operators)
        )
        return Solution.of("Grand total", total)

    def solve_part_2(self) -> Solution:
        # numbers are read top-to-bottom per column, problems right-to-left
        total = 0
        operands: List[int] = []
        for col in range(len(self.operators) - 1, -1, -1):
            digits = "".join(row[col] for row in self.rows).strip()
            if digits:
                operands.append(int(digits))
            operator = self.operators[col]
            if operator in ("+", "*"):
                total += _apply(operator, operands)
                operands = []
        return Solution.of("Grand total read column-wise", total)
