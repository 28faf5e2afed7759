"""Day 16: The Floor Will Be Lava"""
from __future__ import annotations
from typing import List, Tuple

from ...grid import Direction
from ...types import Solution
from .. import Solver

UP, RIGHT, DOWN, LEFT = Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT

# Outgoing directions for a beam entering a tile while heading in a direction
DEFLECTIONS = {
    "/": {UP: (RIGHT,), RIGHT: (UP,), DOWN: (LEFT,), LEFT: (DOWN,)},
    "\\": {UP: (LEFT,), LEFT: (UP,), DOWN: (RIGHT,), RIGHT: (DOWN,)},
    "|": {UP: (UP,), DOWN: (DOWN,), LEFT: (UP, DOWN), RIGHT: (UP, DOWN)},
    "-": {LEFT: (LEFT,), RIGHT: (RIGHT,), UP: (LEFT, RIGHT), DOWN: (LEFT, RIGHT)},
}


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.rows: List[str] = [line for line in input.splitlines() if line.strip()]
        self.height = len(self.rows)
        self.width = len(self.rows[0])

    def count_energized_tiles(self, start: Tuple[int, int], heading: Direction) -> int:
        seen = set()
        stack = [(start, heading)]
        while stack:
            pos, heading = stack.pop()
            r, c = pos
            if not (0 <= r < self.height and 0 <= c < self.width) or (pos, heading) in seen:
                continue
            seen.add((pos, heading))
            tile = self.rows[r][c]
            for out in DEFLECTIONS.get(tile, {}).get(heading, (heading,)):
                stack.append((out.step(pos), out))
        return len({pos for pos, _ in seen})

    def solve_part_1(self) -> Solution:
        return Solution.of("Energized tiles", self.count_energized_tiles((0, 0), RIGHT))

    def solve_part_2(self) -> Solution:
        starts = []
        for r in range(self.height):
            starts.append(((r, 0), RIGHT))
            starts.append(((r, self.width - 1), LEFT))
        for c in range(self.width):
            starts.append(((0, c), DOWN))
            starts.append(((self.height - 1, c), UP))
        best = max(self.count_energized_tiles(pos, heading) for pos, heading in starts)
        return Solution.of("Most energized tiles", best)
