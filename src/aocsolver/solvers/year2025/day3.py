"""Day 3: Lobby"""
from __future__ import annotations
from typing import List

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


def max_joltage(bank: str, batteries: int) -> int:
    """Largest number formed by ``batteries`` digits of ``bank`` kept in order.

    Each digit is the greedy maximum among the positions that still leave
    enough digits for the rest.
    """
    if len(bank) < batteries:
        raise InputParseError(f"bank {bank!r} has fewer than {batteries} batteries")
    digits: List[str] = []
    start = 0
    for remaining in range(batteries, 0, -1):
        window = bank[start:len(bank) - remaining + 1]
        best = max(window)
        start += window.index(best) + 1
        digits.append(best)
    return int("".join(digits))


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.banks = [line.strip() for line in input.splitlines() if line.strip()]
        for bank in self.banks:
            if not bank.isdigit():
                raise InputParseError(f"invalid battery bank: {bank!r}")

    def solve_part_1(self) -> Solution:
        return Solution.of("Output joltage", sum(max_joltage(b, 2) for b in self.banks))

    def solve_part_2(self) -> Solution:
        return Solution.of("Output joltage with safety override", sum(max_joltage(b, 12) for b in self.banks))
