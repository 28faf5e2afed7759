"""Day 18: Lavaduct Lagoon"""
from __future__ import annotations
import re
from typing import List, Tuple

from ...errors import InputParseError
from ...grid import Direction
from ...types import Solution
from .. import Solver

LINE_PATTERN = re.compile(r"^([URDL]) (\d+) \(#([0-9a-f]{5})([0-3])\)$")
HEX_DIRECTIONS = (Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP)

Instruction = Tuple[Direction, int]


def lagoon_volume(plan: List[Instruction]) -> int:
    """Cubic meters held by the trench and its interior."""
    pos = (0, 0)
    twice_area = 0
    perimeter = 0
    for direction, distance in plan:
        nxt = direction.step(pos, distance)
        twice_area += pos[0] * nxt[1] - nxt[0] * pos[1]
        perimeter += distance
        pos = nxt
    # Pick's theorem for interior points plus the trench itself
    return abs(twice_area) // 2 + perimeter // 2 + 1


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.plan: List[Instruction] = []
        self.color_plan: List[Instruction] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            match = LINE_PATTERN.match(line.strip())
            if match is None:
                raise InputParseError(f"invalid dig instruction: {line!r}")
            self.plan.append((Direction.from_char(match.group(1)), int(match.group(2))))
            self.color_plan.append(
                (HEX_DIRECTIONS[int(match.group(4))], int(match.group(3), 16))
            )

    def solve_part_1(self) -> Solution:
        return Solution.of("Lagoon volume", lagoon_volume(self.plan))

    def solve_part_2(self) -> Solution:
        return Solution.of("Lagoon volume from colour codes", lagoon_volume(self.color_plan))
