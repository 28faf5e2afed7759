"""Day 2: Gift Shop"""
from __future__ import annotations
from typing import Iterator, List, Set, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


def repeated_ids(lo: int, hi: int, min_repeats: int, max_repeats: int) -> Set[int]:
    """IDs in [lo, hi] made of a digit block repeated a number of times."""
    found: Set[int] = set()
    for length in range(len(str(lo)), len(str(hi)) + 1):
        for repeats in range(min_repeats, min(max_repeats, length) + 1):
            if length % repeats:
                continue
            block = length // repeats
            # e.g. block 2, repeats 3: 10101 * 12 == 121212
            multiplier = sum(10 ** (block * i) for i in range(repeats))
            first = max(10 ** (block - 1), -(-lo // multiplier))
            last = min(10 ** block - 1, hi // multiplier)
            found.update(prefix * multiplier for prefix in range(first, last + 1))
    return found


def _ranges(text: str) -> Iterator[Tuple[int, int]]:
    for part in text.strip().split(","):
        lo, sep, hi = part.strip().partition("-")
        if not sep:
            raise InputParseError(f"invalid range: {part!r}")
        yield int(lo), int(hi)


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.ranges: List[Tuple[int, int]] = list(_ranges(input))

    def solve_part_1(self) -> Solution:
        total = sum(sum(repeated_ids(lo, hi, 2, 2)) for lo, hi in self.ranges)
        return Solution.of("Sum of invalid IDs", total)

    def solve_part_2(self) -> Solution:
        total = sum(sum(repeated_ids(lo, hi, 2, len(str(hi)))) for lo, hi in self.ranges)
        return Solution.of("Sum of invalid IDs with any repetition", total)
