"""Day 10: Pipe Maze

The loop is traced from S; the enclosed tile count follows from the
shoelace area of the loop polygon and Pick's theorem.
"""
from __future__ import annotations
from typing import Dict, List, Tuple

from ...errors import InputParseError
from ...grid import Direction, find, in_bounds, parse_grid
from ...types import Solution
from .. import Solver

PIPES: Dict[str, Tuple[Direction, Direction]] = {
    "|": (Direction.UP, Direction.DOWN),
    "-": (Direction.LEFT, Direction.RIGHT),
    "L": (Direction.UP, Direction.RIGHT),
    "J": (Direction.UP, Direction.LEFT),
    "7": (Direction.DOWN, Direction.LEFT),
    "F": (Direction.DOWN, Direction.RIGHT),
}


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        grid = parse_grid(input)
        start = find(grid, "S")
        self.loop = trace_loop(grid, start)

    def solve_part_1(self) -> Solution:
        return Solution.of("Distance of farthest point from starting position", len(self.loop) // 2)

    def solve_part_2(self) -> Solution:
        return Solution.of("Tiles inside the loop", enclosed_tiles(self.loop))


def start_directions(grid, start) -> List[Direction]:
    """Directions out of S that lead into a pipe connecting back to S."""
    connected = []
    for direction in Direction:
        neighbor = direction.step(start)
        if not in_bounds(neighbor, grid.shape):
            continue
        ends = PIPES.get(str(grid[neighbor]))
        if ends is not None and direction.opposite() in ends:
            connected.append(direction)
    return connected


def trace_loop(grid, start) -> List[Tuple[int, int]]:
    """Return the loop tiles in walking order, starting at S."""
    directions = start_directions(grid, start)
    if len(directions) < 2:
        raise InputParseError("start tile is not part of a loop")
    # A pipe may point at S without belonging to the loop; try each exit
    for heading in directions:
        loop = _walk(grid, start, heading)
        if loop is not None:
            return loop
    raise InputParseError("no closed loop through the start tile")


def _walk(grid, start, heading):
    pos = start
    loop = [start]
    while True:
        pos = heading.step(pos)
        if pos == start:
            return loop
        if not in_bounds(pos, grid.shape):
            return None
        ends = PIPES.get(str(grid[pos]))
        if ends is None or heading.opposite() not in ends:
            return None
        loop.append(pos)
        heading = ends[0] if ends[1] == heading.opposite() else ends[1]


def enclosed_tiles(loop: List[Tuple[int, int]]) -> int:
    twice_area = 0
    for (r1, c1), (r2, c2) in zip(loop, loop[1:] + loop[:1]):
        twice_area += r1 * c2 - r2 * c1
    area = abs(twice_area) // 2
    # Pick's theorem: A = i + b/2 - 1
    return area - len(loop) // 2 + 1
