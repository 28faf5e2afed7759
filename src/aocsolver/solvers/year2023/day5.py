"""Day 5: If You Give A Seed A Fertilizer"""
from __future__ import annotations
import re
from typing import List, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

MAP_DECLARATION = re.compile(r"^\w+-to-\w+ map:$")

# Half-open interval [start, end)
Range = Tuple[int, int]


class RangeMap:
    """Piecewise shift of source ranges; unmapped values map to themselves."""

    def __init__(self):
        # (source start, source end, destination start), kept sorted
        self.entries: List[Tuple[int, int, int]] = []

    def insert(self, source: Range, dest_start: int) -> None:
        self.entries.append((source[0], source[1], dest_start))
        self.entries.sort()

    def get(self, key: int) -> int:
        for start, end, dest in self.entries:
            if start <= key < end:
                return dest + (key - start)
        return key

    def get_range(self, key: Range) -> List[Range]:
        """Map a whole range, splitting it where mapping entries begin/end."""
        mapped: List[Range] = []
        unmapped: List[Range] = [key]
        for start, end, dest in self.entries:
            intersection = _intersect(key, (start, end))
            if intersection is not None:
                mapped.append((dest + intersection[0] - start, dest + intersection[1] - start))
            unmapped = [piece for r in unmapped for piece in _subtract(r, (start, end))]
        return mapped + unmapped


def _subtract(minuend: Range, subtrahend: Range) -> List[Range]:
    difference = []
    if minuend[0] < subtrahend[0]:
        difference.append((minuend[0], min(minuend[1], subtrahend[0])))
    if minuend[1] > subtrahend[1]:
        difference.append((max(minuend[0], subtrahend[1]), minuend[1]))
    return [r for r in difference if r[0] < r[1]]


def _intersect(a: Range, b: Range):
    start, end = max(a[0], b[0]), min(a[1], b[1])
    if start >= end:
        return None
    return start, end


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        lines = input.splitlines()
        if not lines or ":" not in lines[0]:
            raise InputParseError("must define seeds")
        self.seeds = [int(v) for v in lines[0].split(":", 1)[1].split()]

        self.range_maps: List[RangeMap] = []
        for line in lines[1:]:
            line = line.strip()
            if not line:
                continue
            if MAP_DECLARATION.match(line):
                self.range_maps.append(RangeMap())
                continue
            values = [int(v) for v in line.split()]
            if len(values) != 3 or not self.range_maps:
                continue
            dest_start, source_start, length = values
            self.range_maps[-1].insert((source_start, source_start + length), dest_start)

    def solve_part_1(self) -> Solution:
        locations = []
        for seed in self.seeds:
            value = seed
            for mapping in self.range_maps:
                value = mapping.get(value)
            locations.append(value)
        return Solution.of("Lowest location (part 1)", min(locations))

    def solve_part_2(self) -> Solution:
        ranges: List[Range] = [
            (self.seeds[i], self.seeds[i] + self.seeds[i + 1])
            for i in range(0, len(self.seeds) - 1, 2)
        ]
        for mapping in self.range_maps:
            ranges = [mapped for r in ranges for mapped in mapping.get_range(r)]
        return Solution.of("Lowest location (part 2)", min(start for start, _ in ranges))
