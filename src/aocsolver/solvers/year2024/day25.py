"""Day 25: Code Chronicle"""
from __future__ import annotations

import numpy as np

from ...grid import parse_grid
from ...types import NOT_IMPLEMENTED, MaybeSolution, Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        schematics = [parse_grid(block) == "#" for block in input.strip().split("\n\n")]
        self.locks = [s for s in schematics if s[0].all()]
        self.keys = [s for s in schematics if not s[0].all()]

    def solve_part_1(self) -> Solution:
        fitting = sum(
            1 for lock in self.locks for key in self.keys if not np.any(lock & key)
        )
        return Solution.of("Fitting lock/key pairs", fitting)

    def solve_part_2(self) -> MaybeSolution:
        return NOT_IMPLEMENTED
