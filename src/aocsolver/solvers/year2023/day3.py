"""Day 3: Gear Ratios"""
from __future__ import annotations
from typing import List, Optional, Set, Tuple

from ...grid import parse_grid, surround_2d
from ...types import Solution
from .. import Solver

# (row, start column, end column)
NumberLoc = Tuple[int, int, int]


def part_number_loc(rows: List[str], pos: Tuple[int, int]) -> Optional[NumberLoc]:
    """Expand a digit at ``pos`` to the span of the whole number."""
    r, c = pos
    row = rows[r]
    if not row[c].isdigit():
        return None
    start = c
    while start > 0 and row[start - 1].isdigit():
        start -= 1
    end = c
    while end < len(row) and row[end].isdigit():
        end += 1
    return r, start, end


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        schematic = parse_grid(input)
        rows = ["".join(row) for row in schematic]
        self.part_number_sum = 0
        self.gear_ratio_sum = 0

        for i, row in enumerate(rows):
            for j, item in enumerate(row):
                if item == "." or item.isdigit():
                    continue
                locs: Set[NumberLoc] = set()
                for neighbor in surround_2d((i, j), schematic.shape):
                    loc = part_number_loc(rows, neighbor)
                    if loc is not None:
                        locs.add(loc)
                numbers = [int(rows[r][start:end]) for r, start, end in sorted(locs)]
                self.part_number_sum += sum(numbers)
                if item == "*" and len(numbers) == 2:
                    self.gear_ratio_sum += numbers[0] * numbers[1]

    def solve_part_1(self) -> Solution:
        return Solution.of("Sum of part numbers", self.part_number_sum)

    def solve_part_2(self) -> Solution:
        return Solution.of("Sum of gear ratios", self.gear_ratio_sum)
