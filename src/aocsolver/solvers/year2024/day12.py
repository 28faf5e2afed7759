"""Day 12: Garden Groups"""
from __future__ import annotations
from typing import List, Set

import numpy as np
from scipy import ndimage

from ...grid import parse_grid
from ...types import Solution
from .. import Solver


def count_sides(region: np.ndarray) -> int:
    """Number of straight fence sides, counted as region corners."""
    padded = np.pad(region, 1)
    corners = 0
    for dr, dc in ((-1, -1), (-1, 1), (1, -1), (1, 1)):
        vertical = np.roll(padded, -dr, axis=0)
        horizontal = np.roll(padded, -dc, axis=1)
        diagonal = np.roll(np.roll(padded, -dr, axis=0), -dc, axis=1)
        convex = padded & ~vertical & ~horizontal
        concave = padded & vertical & horizontal & ~diagonal
        corners += int(np.count_nonzero(convex | concave))
    return corners


def perimeter(region: np.ndarray) -> int:
    padded = np.pad(region, 1).astype(np.int8)
    return int(np.abs(np.diff(padded, axis=0)).sum() + np.abs(np.diff(padded, axis=1)).sum())


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        grid = parse_grid(input)
        self.regions: List[np.ndarray] = []
        plants: Set[str] = set(grid.flatten().tolist())
        for plant in sorted(plants):
            labels, count = ndimage.label(grid == plant)
            for label in range(1, count + 1):
                self.regions.append(labels == label)

    def solve_part_1(self) -> Solution:
        price = sum(int(r.sum()) * perimeter(r) for r in self.regions)
        return Solution.of("Total fencing price", price)

    def solve_part_2(self) -> Solution:
        price = sum(int(r.sum()) * count_sides(r) for r in self.regions)
        return Solution.of("Total fencing price with bulk discount", price)
