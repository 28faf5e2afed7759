"""Day 8: Resonant Collinearity"""
from __future__ import annotations
from collections import defaultdict
from itertools import permutations
from typing import Dict, List, Set

import numpy as np

from ...grid import Pos, in_bounds, parse_grid
from ...types import Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        grid = parse_grid(input)
        self.shape = grid.shape
        self.antennas: Dict[str, List[Pos]] = defaultdict(list)
        for (r, c), char in np.ndenumerate(grid):
            if char != ".":
                self.antennas[str(char)].append((int(r), int(c)))

    def antinodes(self, harmonics: bool) -> Set[Pos]:
        found: Set[Pos] = set()
        for positions in self.antennas.values():
            for (r1, c1), (r2, c2) in permutations(positions, 2):
                dr, dc = r2 - r1, c2 - c1
                if not harmonics:
                    node = (r2 + dr, c2 + dc)
                    if in_bounds(node, self.shape):
                        found.add(node)
                    continue
                node = (r2, c2)
                while in_bounds(node, self.shape):
                    found.add(node)
                    node = (node[0] + dr, node[1] + dc)
        return found

    def solve_part_1(self) -> Solution:
        return Solution.of("Unique antinode locations", len(self.antinodes(harmonics=False)))

    def solve_part_2(self) -> Solution:
        return Solution.of("Unique antinode locations with harmonics", len(self.antinodes(harmonics=True)))
