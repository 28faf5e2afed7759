"""Day 6: Guard Gallivant"""
from __future__ import annotations
from typing import Optional, Set, Tuple

from ...grid import Direction, Pos, find, in_bounds, parse_grid
from ...types import Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        grid = parse_grid(input)
        self.start = find(grid, "^")
        self.shape = grid.shape
        self.obstacles = grid == "#"

    def patrol(self, extra: Optional[Pos] = None) -> Optional[Set[Pos]]:
        """Visited positions, or None if the guard ends up in a loop."""
        pos, heading = self.start, Direction.UP
        states: Set[Tuple[Pos, Direction]] = set()
        while True:
            if (pos, heading) in states:
                return None
            states.add((pos, heading))
            nxt = heading.step(pos)
            if not in_bounds(nxt, self.shape):
                return {p for p, _ in states}
            if self.obstacles[nxt] or nxt == extra:
                heading = heading.turn_right()
            else:
                pos = nxt

    def solve_part_1(self) -> Solution:
        visited = self.patrol()
        if visited is None:
            raise ValueError("guard loops without an added obstruction")
        return Solution.of("Distinct positions visited", len(visited))

    def solve_part_2(self) -> Solution:
        visited = self.patrol() or set()
        # only cells on the unobstructed route can change it
        loops = sum(
            1 for cell in visited if cell != self.start and self.patrol(extra=cell) is None
        )
        return Solution.of("Obstruction positions causing a loop", loops)
