"""Day 1: Trebuchet?!"""
from __future__ import annotations
import re

from ...types import Solution
from .. import Solver

DIGIT_NAMES = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9,
}

# Lookahead so that overlapping words ("eightwo") are all found
_SPELLED = re.compile(r"(?=([1-9]|" + "|".join(DIGIT_NAMES) + "))")


def parse_spelled_digit(token: str) -> int:
    if token.isdigit():
        return int(token)
    return DIGIT_NAMES[token]


def calibration_value(line: str, spelled: bool = False) -> int:
    """Combine the first and last digit of a line; 0 if there is none."""
    if spelled:
        digits = [parse_spelled_digit(m.group(1)) for m in _SPELLED.finditer(line)]
    else:
        digits = [int(c) for c in line if c.isdigit()]
    if not digits:
        return 0
    return 10 * digits[0] + digits[-1]


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.lines = input.splitlines()

    def solve_part_1(self) -> Solution:
        total = sum(calibration_value(line) for line in self.lines)
        return Solution.of("Calibration sum (part 1)", total)

    def solve_part_2(self) -> Solution:
        total = sum(calibration_value(line, spelled=True) for line in self.lines)
        return Solution.of("Calibration sum (part 2)", total)
