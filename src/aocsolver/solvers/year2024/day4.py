"""Day 4: Ceres Search"""
from __future__ import annotations

from ...grid import parse_grid
from ...types import Solution
from .. import Solver

DIRECTIONS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.grid = parse_grid(input)
        self.height, self.width = self.grid.shape

    def _at(self, r: int, c: int) -> str:
        if 0 <= r < self.height and 0 <= c < self.width:
            return str(self.grid[r, c])
        return ""

    def solve_part_1(self) -> Solution:
        count = 0
        for r in range(self.height):
            for c in range(self.width):
                for dr, dc in DIRECTIONS:
                    if all(self._at(r + i * dr, c + i * dc) == ch for i, ch in enumerate("XMAS")):
                        count += 1
        return Solution.of("XMAS occurrences", count)

    def solve_part_2(self) -> Solution:
        count = 0
        for r in range(1, self.height - 1):
            for c in range(1, self.width - 1):
                if self.grid[r, c] != "A":
                    continue
                diagonal = self._at(r - 1, c - 1) + self._at(r + 1, c + 1)
                anti = self._at(r - 1, c + 1) + self._at(r + 1, c - 1)
                if diagonal in ("MS", "SM") and anti in ("MS", "SM"):
                    count += 1
        return Solution.of("X-MAS occurrences", count)
