"""Day 9: Movie Theater"""
from __future__ import annotations
from itertools import combinations
from typing import List, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

Tile = Tuple[int, int]


def area(a: Tile, b: Tile) -> int:
    return (abs(a[0] - b[0]) + 1) * (abs(a[1] - b[1]) + 1)


def edge_cuts_rectangle(a: Tile, b: Tile, p: Tile, q: Tile) -> bool:
    """Whether the axis-parallel edge p-q passes through the rectangle's interior."""
    x_lo, x_hi = sorted((a[0], b[0]))
    y_lo, y_hi = sorted((a[1], b[1]))
    if p[0] == q[0]:
        lo, hi = sorted((p[1], q[1]))
        return x_lo < p[0] < x_hi and lo < y_hi and hi > y_lo
    lo, hi = sorted((p[0], q[0]))
    return y_lo < p[1] < y_hi and lo < x_hi and hi > x_lo


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.red_tiles: List[Tile] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            x, sep, y = line.partition(",")
            if not sep:
                raise InputParseError(f"invalid tile: {line!r}")
            self.red_tiles.append((int(x), int(y)))
        for p, q in self.edges():
            if p[0] != q[0] and p[1] != q[1]:
                raise InputParseError(f"consecutive red tiles {p} and {q} are not aligned")

    def edges(self) -> List[Tuple[Tile, Tile]]:
        return list(zip(self.red_tiles, self.red_tiles[1:] + self.red_tiles[:1]))

    def solve_part_1(self) -> Solution:
        largest = max(area(a, b) for a, b in combinations(self.red_tiles, 2))
        return Solution.of("Largest area", largest)

    def solve_part_2(self) -> Solution:
        edges = self.edges()
        largest = 0
        for a, b in combinations(self.red_tiles, 2):
            candidate = area(a, b)
            if candidate <= largest:
                continue
            if not any(edge_cuts_rectangle(a, b, p, q) for p, q in edges):
                largest = candidate
        return Solution.of("Largest area with only red and green tiles", largest)
