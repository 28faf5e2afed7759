"""Day 12: Christmas Tree Farm

Most regions are settled by counting: too few cells means no fit, enough
whole 3x3 blocks for every present means a trivial fit. Anything else falls
back to an exact search.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from ...errors import InputParseError
from ...types import NOT_IMPLEMENTED, MaybeSolution, Solution
from .. import Solver

REGION_PATTERN = re.compile(r"^(\d+)x(\d+):((?: \d+)+)$")
SHAPE_SIZE = 3

Cells = FrozenSet[Tuple[int, int]]


def orientations(shape: Cells) -> List[List[Tuple[int, int]]]:
    """Distinct rotations/flips, as offsets from the first cell in raster order."""
    variants = set()
    cells = shape
    for _ in range(4):
        cells = frozenset((c, -r) for r, c in cells)
        for candidate in (cells, frozenset((r, -c) for r, c in cells)):
            top, left = min(candidate)
            variants.add(frozenset((r - top, c - left) for r, c in candidate))
    return [sorted(v) for v in sorted(variants, key=sorted)]


@dataclass(frozen=True)
class Region:
    width: int
    height: int
    counts: Tuple[int, ...]


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.shapes: List[Cells] = []
        self.regions: List[Region] = []
        for block in input.strip().split("\n\n"):
            lines = block.splitlines()
            if REGION_PATTERN.match(lines[0]):
                for line in lines:
                    match = REGION_PATTERN.match(line.strip())
                    if match is None:
                        raise InputParseError(f"invalid region: {line!r}")
                    counts = tuple(int(v) for v in match.group(3).split())
                    self.regions.append(Region(int(match.group(1)), int(match.group(2)), counts))
            elif lines[0].rstrip(":").isdigit():
                self.shapes.append(frozenset(
                    (r, c) for r, row in enumerate(lines[1:]) for c, ch in enumerate(row) if ch == "#"
                ))
            else:
                raise InputParseError(f"unrecognised block starting {lines[0]!r}")
        for region in self.regions:
            if len(region.counts) != len(self.shapes):
                raise InputParseError("region lists a count for an unknown shape")
        self.orientations = [orientations(shape) for shape in self.shapes]

    def fits(self, region: Region) -> bool:
        area = region.width * region.height
        needed = sum(len(shape) * n for shape, n in zip(self.shapes, region.counts))
        if needed > area:
            return False
        blocks = (region.width // SHAPE_SIZE) * (region.height // SHAPE_SIZE)
        if sum(region.counts) <= blocks:
            return True
        return self._search(region, area - needed)

    def _search(self, region: Region, spare: int) -> bool:
        """Exact cover of the region by the presents, with ``spare`` cells left empty.

        Cells are filled in raster order; the first free cell is either the
        first cell of a placed present or left empty. The grid is a bitmask
        and failed states are remembered.
        """
        width, height = region.width, region.height
        cells = width * height
        placements: List[List[Tuple[int, int]]] = [[] for _ in range(cells)]
        for index in range(cells):
            r, c = divmod(index, width)
            for shape_id, variants in enumerate(self.orientations):
                for offsets in variants:
                    mask = 0
                    for dr, dc in offsets:
                        y, x = r + dr, c + dc
                        if not (0 <= y < height and 0 <= x < width):
                            break
                        mask |= 1 << (y * width + x)
                    else:
                        placements[index].append((shape_id, mask))

        dead = set()

        def place(filled: int, index: int, remaining: Tuple[int, ...], spare: int) -> bool:
            if not any(remaining):
                return True
            while index < cells and filled >> index & 1:
                index += 1
            if index == cells:
                return False
            # everything before index is filled, so the state is the tail
            key = (index, filled >> index, remaining, spare)
            if key in dead:
                return False
            for shape_id, mask in placements[index]:
                if remaining[shape_id] and not filled & mask:
                    left = remaining[:shape_id] + (remaining[shape_id] - 1,) + remaining[shape_id + 1:]
                    if place(filled | mask, index + 1, left, spare):
                        return True
            if spare and place(filled | 1 << index, index + 1, remaining, spare - 1):
                return True
            dead.add(key)
            return False

        return place(0, 0, region.counts, spare)

    def solve_part_1(self) -> Solution:
        return Solution.of("Regions fitting all presents", sum(1 for r in self.regions if self.fits(r)))

    def solve_part_2(self) -> MaybeSolution:
        return NOT_IMPLEMENTED
