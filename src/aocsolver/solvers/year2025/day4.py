"""Day 4: Printing Department"""
from __future__ import annotations

import numpy as np
from scipy import ndimage

from ...grid import parse_grid
from ...types import Solution
from .. import Solver

# counts the eight neighbours, not the cell itself
NEIGHBOURS = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]])
MAX_NEIGHBOURS = 3


def accessible(rolls: np.ndarray) -> np.ndarray:
    """Rolls with fewer than four neighbouring rolls."""
    counts = ndimage.convolve(rolls.astype(np.int64), NEIGHBOURS, mode="constant", cval=0)
    return rolls & (counts <= MAX_NEIGHBOURS)


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.rolls = parse_grid(input) == "@"

    def solve_part_1(self) -> Solution:
        return Solution.of("Accessible paper rolls", int(np.count_nonzero(accessible(self.rolls))))

    def solve_part_2(self) -> Solution:
        rolls = self.rolls.copy()
        removed = 0
        while True:
            reachable = accessible(rolls)
            count = int(np.count_nonzero(reachable))
            if count == 0:
                break
            removed += count
            rolls &= ~reachable
        return Solution.of("Removable paper rolls", removed)
