"""Day 20: Race Condition"""
from __future__ import annotations
from typing import List

import numpy as np

from ...errors import InputParseError
from ...grid import Pos, find, neighbors_4, parse_grid
from ...types import Solution
from .. import Solver

MIN_SAVING = 100


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        grid = parse_grid(input)
        start, end = find(grid, "S"), find(grid, "E")
        track: List[Pos] = [start]
        prev = None
        while track[-1] != end:
            pos = track[-1]
            onward = [
                n for n in neighbors_4(pos, grid.shape) if grid[n] != "#" and n != prev
            ]
            if len(onward) != 1:
                raise InputParseError("race track must be a single path")
            prev = pos
            track.append(onward[0])
        # index along the track is the distance from the start
        self.track = np.array(track, dtype=np.int64)

    def count_cheats(self, max_cheat: int, min_saving: int) -> int:
        """Cheats of at most ``max_cheat`` picoseconds saving ``min_saving`` or more."""
        total = 0
        for i in range(len(self.track)):
            rest = self.track[i + min_saving:]
            if len(rest) == 0:
                break
            cheat = np.abs(rest - self.track[i]).sum(axis=1)
            saving = np.arange(min_saving, min_saving + len(rest)) - cheat
            total += int(np.count_nonzero((cheat <= max_cheat) & (saving >= min_saving)))
        return total

    def solve_part_1(self) -> Solution:
        return Solution.of("Cheats saving at least 100 ps", self.count_cheats(2, MIN_SAVING))

    def solve_part_2(self) -> Solution:
        return Solution.of("Long cheats saving at least 100 ps", self.count_cheats(20, MIN_SAVING))
