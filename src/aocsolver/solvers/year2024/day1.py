"""Day 1: Historian Hysteria"""
from __future__ import annotations
from collections import Counter

import numpy as np

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        try:
            pairs = np.array([line.split() for line in input.splitlines() if line.strip()], dtype=np.int64)
        except ValueError as e:
            raise InputParseError("expected two numbers per line") from e
        if pairs.ndim != 2 or pairs.shape[1] != 2:
            raise InputParseError("expected two numbers per line")
        self.left = pairs[:, 0]
        self.right = pairs[:, 1]

    def solve_part_1(self) -> Solution:
        distance = int(np.abs(np.sort(self.left) - np.sort(self.right)).sum())
        return Solution.of("Total distance", distance)

    def solve_part_2(self) -> Solution:
        counts = Counter(self.right.tolist())
        similarity = sum(value * counts[value] for value in self.left.tolist())
        return Solution.of("Similarity score", similarity)
