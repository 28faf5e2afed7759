"""Day 11: Cosmic Expansion"""
from __future__ import annotations

import numpy as np

from ...grid import parse_grid
from ...types import Solution
from .. import Solver


def _pairwise_distance_sum(coords: np.ndarray) -> int:
    """Sum of |a - b| over all unordered pairs of a 1D coordinate list."""
    coords = np.sort(coords)
    n = len(coords)
    # Each coordinate is subtracted by the i later ones and added by the i earlier ones
    weights = 2 * np.arange(n, dtype=np.int64) - (n - 1)
    return int(np.sum(coords * weights))


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        galaxies = parse_grid(input) == "#"
        self.rows, self.cols = np.nonzero(galaxies)
        self.empty_rows = np.cumsum(~galaxies.any(axis=1))
        self.empty_cols = np.cumsum(~galaxies.any(axis=0))

    def sum_shortest_paths(self, expansion: int) -> int:
        """Sum of Manhattan distances with every empty row/col ``expansion`` wide."""
        rows = self.rows + (expansion - 1) * self.empty_rows[self.rows]
        cols = self.cols + (expansion - 1) * self.empty_cols[self.cols]
        return _pairwise_distance_sum(rows.astype(np.int64)) + _pairwise_distance_sum(
            cols.astype(np.int64)
        )

    def solve_part_1(self) -> Solution:
        return Solution.of("Sum of shortest paths", self.sum_shortest_paths(2))

    def solve_part_2(self) -> Solution:
        return Solution.of("Sum of shortest paths, older galaxies", self.sum_shortest_paths(1_000_000))
