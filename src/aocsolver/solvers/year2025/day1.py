"""Day 1: Secret Entrance"""
from __future__ import annotations
from typing import List

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

DIAL_SIZE = 100
DIAL_START = 50


def parse_rotation(line: str) -> int:
    direction, distance = line[:1], line[1:]
    if direction not in ("L", "R") or not distance.isdigit():
        raise InputParseError(f"invalid rotation: {line!r}")
    return int(distance) if direction == "R" else -int(distance)


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.rotations: List[int] = [
            parse_rotation(line.strip()) for line in input.splitlines() if line.strip()
        ]

    def solve_part_1(self) -> Solution:
        dial = DIAL_START
        zeros = 0
        for rotation in self.rotations:
            dial = (dial + rotation) % DIAL_SIZE
            zeros += dial == 0
        return Solution.of("Password", zeros)

    def solve_part_2(self) -> Solution:
        dial = DIAL_START
        zeros = 0
        for rotation in self.rotations:
            if rotation >= 0:
                zeros += (dial + rotation) // DIAL_SIZE
            else:
                # distance to the next zero going left; a dial at 0 needs a full turn
                first = dial if dial else DIAL_SIZE
                if -rotation >= first:
                    zeros += 1 + (-rotation - first) // DIAL_SIZE
            dial = (dial + rotation) % DIAL_SIZE
        return Solution.of("Password with method 0x434C49434B", zeros)
