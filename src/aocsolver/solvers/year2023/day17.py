"""Day 17: Clumsy Crucible"""
from __future__ import annotations
import heapq

import numpy as np

from ...grid import parse_digit_grid
from ...types import Solution
from .. import Solver

HORIZONTAL = 0
VERTICAL = 1


def find_min_heatloss(city: np.ndarray, min_run: int, max_run: int) -> int:
    """Dijkstra over (position, axis of the last run).

    Every move turns and then travels ``min_run..max_run`` blocks straight,
    so run lengths never need to be part of the state.
    """
    height, width = city.shape
    costs = city.tolist()
    target = (height - 1, width - 1)
    best = {((0, 0), HORIZONTAL): 0, ((0, 0), VERTICAL): 0}
    queue = [(0, 0, 0, HORIZONTAL), (0, 0, 0, VERTICAL)]
    while queue:
        loss, r, c, axis = heapq.heappop(queue)
        if (r, c) == target:
            return loss
        if loss > best.get(((r, c), axis), loss):
            continue
        next_axis = VERTICAL if axis == HORIZONTAL else HORIZONTAL
        steps = ((1, 0), (-1, 0)) if next_axis == VERTICAL else ((0, 1), (0, -1))
        for dr, dc in steps:
            total = loss
            for n in range(1, max_run + 1):
                nr, nc = r + n * dr, c + n * dc
                if not (0 <= nr < height and 0 <= nc < width):
                    break
                total += costs[nr][nc]
                if n < min_run:
                    continue
                key = ((nr, nc), next_axis)
                if total < best.get(key, total + 1):
                    best[key] = total
                    heapq.heappush(queue, (total, nr, nc, next_axis))
    raise ValueError("factory is unreachable")


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.city = parse_digit_grid(input)

    def solve_part_1(self) -> Solution:
        return Solution.of("Minimal heat loss", find_min_heatloss(self.city, 1, 3))

    def solve_part_2(self) -> Solution:
        return Solution.of(
            "Minimal heat loss with ultra crucible", find_min_heatloss(self.city, 4, 10)
        )
