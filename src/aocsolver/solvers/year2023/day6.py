"""Day 6: Wait For It"""
from __future__ import annotations
import math
from typing import List

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


def parse_line(line: str, prefix: str) -> List[str]:
    if not line.startswith(prefix):
        raise InputParseError(f"invalid line prefix, expected {prefix!r}")
    return line[len(prefix):].split()


def ways_to_win(time: int, record: int) -> int:
    """Count hold durations h with h * (time - h) > record.

    The distance is a downward parabola in h, so the winning holds form a
    contiguous interval around time / 2.
    """
    discriminant = time * time - 4 * record
    if discriminant <= 0:
        return 0
    root = math.isqrt(discriminant)
    low = max((time - root) // 2, 0)
    while low * (time - low) <= record:
        low += 1
    while low > 0 and (low - 1) * (time - low + 1) > record:
        low -= 1
    high = time - low
    if high < low:
        return 0
    return high - low + 1


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        lines = [line for line in input.splitlines() if line.strip()]
        if len(lines) < 2:
            raise InputParseError("expected 'Time:' and 'Distance:' lines")
        self.times = parse_line(lines[0], "Time:")
        self.distances = parse_line(lines[1], "Distance:")

    def solve_part_1(self) -> Solution:
        product = 1
        for time, distance in zip(self.times, self.distances):
            product *= ways_to_win(int(time), int(distance))
        return Solution.of("Product of ways to win (part 1)", product)

    def solve_part_2(self) -> Solution:
        time = int("".join(self.times))
        distance = int("".join(self.distances))
        return Solution.of("Ways to win the single race", ways_to_win(time, distance))
