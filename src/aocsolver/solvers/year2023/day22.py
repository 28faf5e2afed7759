"""Day 22: Sand Slabs"""
from __future__ import annotations
from typing import Dict, List, Set, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

Brick = Tuple[Tuple[int, int, int], Tuple[int, int, int]]


def parse_brick(line: str) -> Brick:
    try:
        a, b = line.split("~")
        x1, y1, z1 = (int(v) for v in a.split(","))
        x2, y2, z2 = (int(v) for v in b.split(","))
    except ValueError as e:
        raise InputParseError(f"invalid brick: {line!r}") from e
    return (min(x1, x2), min(y1, y2), min(z1, z2)), (max(x1, x2), max(y1, y2), max(z1, z2))


def settle(bricks: List[Brick]) -> Tuple[List[Set[int]], List[Set[int]]]:
    """Drop the bricks and return (supported_by, supports) per brick index."""
    order = sorted(range(len(bricks)), key=lambda i: bricks[i][0][2])
    heights: Dict[Tuple[int, int], Tuple[int, int]] = {}  # (x, y) -> (top z, brick)
    supported_by: List[Set[int]] = [set() for _ in bricks]
    supports: List[Set[int]] = [set() for _ in bricks]
    for i in order:
        (x1, y1, z1), (x2, y2, z2) = bricks[i]
        cells = [(x, y) for x in range(x1, x2 + 1) for y in range(y1, y2 + 1)]
        floor = max((heights.get(cell, (0, -1))[0] for cell in cells), default=0)
        for cell in cells:
            top, below = heights.get(cell, (0, -1))
            if below >= 0 and top == floor:
                supported_by[i].add(below)
                supports[below].add(i)
        new_top = floor + (z2 - z1) + 1
        for cell in cells:
            heights[cell] = (new_top, i)
    return supported_by, supports


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        bricks = [parse_brick(line.strip()) for line in input.splitlines() if line.strip()]
        self.supported_by, self.supports = settle(bricks)

    def would_fall(self, removed: int) -> int:
        fallen = {removed}
        queue = [removed]
        while queue:
            brick = queue.pop()
            for above in self.supports[brick]:
                if above not in fallen and self.supported_by[above] <= fallen:
                    fallen.add(above)
                    queue.append(above)
        return len(fallen) - 1

    def solve_part_1(self) -> Solution:
        safe = sum(
            1
            for above in self.supports
            if all(len(self.supported_by[a]) > 1 for a in above)
        )
        return Solution.of("Bricks safe to disintegrate", safe)

    def solve_part_2(self) -> Solution:
        total = sum(self.would_fall(i) for i in range(len(self.supports)))
        return Solution.of("Sum of other bricks that would fall", total)
