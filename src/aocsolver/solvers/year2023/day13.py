"""Day 13: Point of Incidence"""
from __future__ import annotations
from typing import List, Optional

import numpy as np

from ...grid import parse_grid
from ...types import Solution
from .. import Solver


def find_reflection(pattern: np.ndarray, smudges: int = 0) -> Optional[int]:
    """Return the number of rows above a horizontal mirror line.

    The mirror must differ from a perfect reflection in exactly ``smudges``
    cells.
    """
    height = pattern.shape[0]
    for rows_above in range(1, height):
        span = min(rows_above, height - rows_above)
        upper = pattern[rows_above - span:rows_above]
        lower = pattern[rows_above:rows_above + span][::-1]
        if int(np.count_nonzero(upper != lower)) == smudges:
            return rows_above
    return None


def summarize(pattern: np.ndarray, smudges: int = 0) -> int:
    rows = find_reflection(pattern, smudges)
    if rows is not None:
        return 100 * rows
    cols = find_reflection(pattern.T, smudges)
    if cols is not None:
        return cols
    raise ValueError("pattern has no reflection line")


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.patterns: List[np.ndarray] = [
            parse_grid(block) == "#" for block in input.strip().split("\n\n")
        ]

    def solve_part_1(self) -> Solution:
        return Solution.of("Summarized notes", sum(summarize(p) for p in self.patterns))

    def solve_part_2(self) -> Solution:
        return Solution.of(
            "Summarized notes with smudges fixed", sum(summarize(p, smudges=1) for p in self.patterns)
        )
