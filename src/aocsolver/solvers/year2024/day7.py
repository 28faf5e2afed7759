"""Day 7: Bridge Repair"""
from __future__ import annotations
from typing import List, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


def can_produce(target: int, operands: List[int], concat: bool) -> bool:
    """Work backwards from the target, undoing the last operation."""
    if len(operands) == 1:
        return target == operands[0]
    *rest, last = operands
    if target > last and can_produce(target - last, rest, concat):
        return True
    if target % last == 0 and can_produce(target // last, rest, concat):
        return True
    if concat:
        suffix = str(last)
        text = str(target)
        if len(text) > len(suffix) and text.endswith(suffix):
            return can_produce(int(text[: -len(suffix)]), rest, concat)
    return False


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.equations: List[Tuple[int, List[int]]] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            target, sep, operands = line.partition(":")
            if not sep:
                raise InputParseError(f"invalid equation: {line!r}")
            self.equations.append((int(target), [int(v) for v in operands.split()]))

    def calibration(self, concat: bool) -> int:
        return sum(t for t, ops in self.equations if can_produce(t, ops, concat))

    def solve_part_1(self) -> Solution:
        return Solution.of("Total calibration result", self.calibration(concat=False))

    def solve_part_2(self) -> Solution:
        return Solution.of("Total calibration result with concatenation", self.calibration(concat=True))
