"""Day 13: Claw Contraption"""
from __future__ import annotations
import re
from typing import List, Optional, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

NUMBER = re.compile(r"\d+")
PRIZE_OFFSET = 10_000_000_000_000

Machine = Tuple[int, int, int, int, int, int]  # ax, ay, bx, by, px, py


def min_tokens(machine: Machine, offset: int = 0) -> Optional[int]:
    """Cheapest way to win via Cramer's rule, or None if impossible."""
    ax, ay, bx, by, px, py = machine
    px, py = px + offset, py + offset
    det = ax * by - ay * bx
    if det == 0:
        raise InputParseError("button movements are collinear")
    a, a_rem = divmod(px * by - py * bx, det)
    b, b_rem = divmod(ax * py - ay * px, det)
    if a_rem or b_rem or a < 0 or b < 0:
        return None
    return 3 * a + b


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.machines: List[Machine] = []
        for block in input.strip().split("\n\n"):
            values = [int(v) for v in NUMBER.findall(block)]
            if len(values) != 6:
                raise InputParseError(f"invalid claw machine: {block!r}")
            self.machines.append(tuple(values))

    def total_tokens(self, offset: int) -> int:
        costs = (min_tokens(m, offset) for m in self.machines)
        return sum(c for c in costs if c is not None)

    def solve_part_1(self) -> Solution:
        return Solution.of("Fewest tokens to win all possible prizes", self.total_tokens(0))

    def solve_part_2(self) -> Solution:
        return Solution.of("Fewest tokens with corrected prize positions", self.total_tokens(PRIZE_OFFSET))
