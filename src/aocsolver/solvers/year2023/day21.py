"""Day 21: Step Counter

On the infinite map the reachable count grows quadratically in whole map
widths, so part 2 fits a quadratic through three BFS samples.
"""
from __future__ import annotations
from typing import List

from ...grid import find, parse_grid
from ...types import Solution
from .. import Solver

PART_1_STEPS = 64
PART_2_STEPS = 26501365


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        grid = parse_grid(input)
        self.start = find(grid, "S")
        self.height, self.width = grid.shape
        self.rocks = grid == "#"

    def reachable_in_steps(self, steps: int, infinite: bool = False) -> List[int]:
        """Plots reachable in exactly ``n`` steps for every ``n`` up to ``steps``."""
        frontier = {self.start}
        seen = {self.start}
        counts = [1]  # n = 0, and every alternate layer thereafter
        by_parity = [1, 0]
        for n in range(1, steps + 1):
            nxt = set()
            for r, c in frontier:
                for nr, nc in ((r - 1, c), (r, c + 1), (r + 1, c), (r, c - 1)):
                    if (nr, nc) in seen:
                        continue
                    if infinite:
                        blocked = self.rocks[nr % self.height, nc % self.width]
                    elif 0 <= nr < self.height and 0 <= nc < self.width:
                        blocked = self.rocks[nr, nc]
                    else:
                        continue
                    if not blocked:
                        nxt.add((nr, nc))
            seen |= nxt
            frontier = nxt
            by_parity[n % 2] += len(nxt)
            counts.append(by_parity[n % 2])
        return counts

    def solve_part_1(self) -> Solution:
        reachable = self.reachable_in_steps(PART_1_STEPS)[-1]
        return Solution.of(f"Garden plots reachable in {PART_1_STEPS} steps", reachable)

    def solve_part_2(self) -> Solution:
        size = self.width
        offset = PART_2_STEPS % size
        counts = self.reachable_in_steps(offset + 2 * size, infinite=True)
        y0, y1, y2 = counts[offset], counts[offset + size], counts[offset + 2 * size]
        n = PART_2_STEPS // size
        # Newton forward differences
        reachable = y0 + n * (y1 - y0) + n * (n - 1) // 2 * (y2 - 2 * y1 + y0)
        return Solution.of(f"Garden plots reachable in {PART_2_STEPS} steps", reachable)
