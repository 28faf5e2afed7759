"""Day 21: Keypad Conundrum"""
from __future__ import annotations
from functools import lru_cache
from typing import Dict, List, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

NUMERIC_PAD = ("789", "456", "123", " 0A")
DIRECTIONAL_PAD = (" ^A", "<v>")


def _layout(rows: Tuple[str, ...]) -> Dict[str, Tuple[int, int]]:
    return {key: (r, c) for r, row in enumerate(rows) for c, key in enumerate(row)}


NUMERIC = _layout(NUMERIC_PAD)
DIRECTIONAL = _layout(DIRECTIONAL_PAD)


def key_paths(pad: Dict[str, Tuple[int, int]], start: str, end: str) -> List[str]:
    """Straight-line move orders from ``start`` to ``end`` that avoid the gap."""
    (r1, c1), (r2, c2) = pad[start], pad[end]
    gap = pad[" "]
    vertical = ("v" if r2 > r1 else "^") * abs(r2 - r1)
    horizontal = (">" if c2 > c1 else "<") * abs(c2 - c1)
    paths = []
    if (r1, c2) != gap:
        paths.append(horizontal + vertical + "A")
    if (r2, c1) != gap:
        paths.append(vertical + horizontal + "A")
    return list(dict.fromkeys(paths))


@lru_cache(maxsize=None)
def presses(sequence: str, robots: int) -> int:
    """Human presses needed for ``sequence`` typed through ``robots`` directional pads."""
    if robots == 0:
        return len(sequence)
    total = 0
    prev = "A"
    for key in sequence:
        total += min(presses(p, robots - 1) for p in key_paths(DIRECTIONAL, prev, key))
        prev = key
    return total


def code_presses(code: str, robots: int) -> int:
    total = 0
    prev = "A"
    for key in code:
        total += min(presses(p, robots) for p in key_paths(NUMERIC, prev, key))
        prev = key
    return total


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.codes = [line.strip() for line in input.splitlines() if line.strip()]
        for code in self.codes:
            if not code.endswith("A") or not all(ch in NUMERIC for ch in code) or " " in code:
                raise InputParseError(f"invalid door code: {code!r}")

    def complexity(self, robots: int) -> int:
        return sum(code_presses(code, robots) * int(code[:-1]) for code in self.codes)

    def solve_part_1(self) -> Solution:
        return Solution.of("Sum of complexities with 2 robots", self.complexity(2))

    def solve_part_2(self) -> Solution:
        return Solution.of("Sum of complexities with 25 robots", self.complexity(25))
