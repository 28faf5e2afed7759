"""Day 10: Hoof It"""
from __future__ import annotations
from functools import lru_cache
from typing import FrozenSet, List

import numpy as np

from ...grid import Pos, neighbors_4, parse_digit_grid
from ...types import Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.heights = parse_digit_grid(input)
        self.trailheads: List[Pos] = [(int(r), int(c)) for r, c in np.argwhere(self.heights == 0)]

        @lru_cache(maxsize=None)
        def peaks(pos: Pos) -> FrozenSet[Pos]:
            height = self.heights[pos]
            if height == 9:
                return frozenset([pos])
            reached: FrozenSet[Pos] = frozenset()
            for nxt in neighbors_4(pos, self.heights.shape):
                if self.heights[nxt] == height + 1:
                    reached |= peaks(nxt)
            return reached

        @lru_cache(maxsize=None)
        def rating(pos: Pos) -> int:
            height = self.heights[pos]
            if height == 9:
                return 1
            return sum(
                rating(nxt)
                for nxt in neighbors_4(pos, self.heights.shape)
                if self.heights[nxt] == height + 1
            )

        self.peaks = peaks
        self.rating = rating

    def solve_part_1(self) -> Solution:
        return Solution.of("Sum of trailhead scores", sum(len(self.peaks(t)) for t in self.trailheads))

    def solve_part_2(self) -> Solution:
        return Solution.of("Sum of trailhead ratings", sum(self.rating(t) for t in self.trailheads))
