"""Day 24: Never Tell Me The Odds

Coordinates are around 1e14, so both parts use exact rational arithmetic
instead of floating point.
"""
from __future__ import annotations
import re
from fractions import Fraction
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

Vec = Tuple[int, int, int]
Hailstone = Tuple[Vec, Vec]

TEST_AREA = (200000000000000, 400000000000000)
NUMBER = re.compile(r"-?\d+")


def _cross(a: Sequence[int], b: Sequence[int]) -> Vec:
    return (a[1] * b[2] - a[2] * b[1], a[2] * b[0] - a[0] * b[2], a[0] * b[1] - a[1] * b[0])


def _sub(a: Sequence[int], b: Sequence[int]) -> Vec:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _skew(v: Sequence[int]) -> List[List[int]]:
    """Matrix M with M @ x == v x x."""
    return [[0, -v[2], v[1]], [v[2], 0, -v[0]], [-v[1], v[0], 0]]


def solve_exact(matrix: List[List[int]], rhs: List[int]) -> Optional[List[Fraction]]:
    """Gauss-Jordan elimination over the rationals; None if singular."""
    n = len(matrix)
    rows = [[Fraction(v) for v in row] + [Fraction(b)] for row, b in zip(matrix, rhs)]
    for col in range(n):
        pivot = next((r for r in range(col, n) if rows[r][col] != 0), None)
        if pivot is None:
            return None
        rows[col], rows[pivot] = rows[pivot], rows[col]
        lead = rows[col][col]
        rows[col] = [v / lead for v in rows[col]]
        for r in range(n):
            if r != col and rows[r][col] != 0:
                factor = rows[r][col]
                rows[r] = [a - factor * b for a, b in zip(rows[r], rows[col])]
    return [row[n] for row in rows]


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.hailstones: List[Hailstone] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            values = [int(v) for v in NUMBER.findall(line)]
            if len(values) != 6:
                raise InputParseError(f"invalid hailstone: {line!r}")
            self.hailstones.append((tuple(values[:3]), tuple(values[3:])))

    def count_intersections(self, lo: int, hi: int) -> int:
        """Future crossings of XY paths inside the square [lo, hi]^2."""
        count = 0
        for (p1, v1), (p2, v2) in combinations(self.hailstones, 2):
            denom = v1[0] * v2[1] - v1[1] * v2[0]
            if denom == 0:
                continue
            dx, dy = p2[0] - p1[0], p2[1] - p1[1]
            t = Fraction(dx * v2[1] - dy * v2[0], denom)
            s = Fraction(dx * v1[1] - dy * v1[0], denom)
            if t < 0 or s < 0:
                continue
            x, y = p1[0] + t * v1[0], p1[1] + t * v1[1]
            if lo <= x <= hi and lo <= y <= hi:
                count += 1
        return count

    def throw_position(self) -> Vec:
        """Starting position of a rock that hits every hailstone.

        For each hailstone (P - p_i) x (V - v_i) = 0; subtracting two such
        equations cancels the P x V term and leaves a linear system.
        """
        for (p0, v0), (p1, v1), (p2, v2) in combinations(self.hailstones, 3):
            matrix: List[List[int]] = []
            rhs: List[int] = []
            for pj, vj in ((p1, v1), (p2, v2)):
                dv = _skew(_sub(vj, v0))
                dp = _skew(_sub(pj, p0))
                for row in range(3):
                    matrix.append([-x for x in dv[row]] + dp[row])
                rhs.extend(_sub(_cross(pj, vj), _cross(p0, v0)))
            solution = solve_exact(matrix, rhs)
            if solution is not None:
                return tuple(int(v) for v in solution[:3])
        raise ValueError("hailstone paths do not determine a unique throw")

    def solve_part_1(self) -> Solution:
        return Solution.of("Intersections in test area", self.count_intersections(*TEST_AREA))

    def solve_part_2(self) -> Solution:
        return Solution.of("Sum of rock start coordinates", sum(self.throw_position()))
