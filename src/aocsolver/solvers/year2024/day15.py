"""Day 15: Warehouse Woes"""
from __future__ import annotations
from typing import Dict, List

from ...errors import InputParseError
from ...grid import Direction, Pos
from ...types import Solution
from .. import Solver

WIDEN = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def try_move(tiles: Dict[Pos, str], robot: Pos, direction: Direction) -> Pos:
    """Move the robot, pushing boxes when possible, and return its position."""
    to_move: List[Pos] = []
    frontier = [robot]
    seen = {robot}
    while frontier:
        pos = frontier.pop()
        to_move.append(pos)
        nxt = direction.step(pos)
        tile = tiles[nxt]
        if tile == "#":
            return robot
        if tile == ".":
            continue
        # pushing a wide box vertically drags its other half along
        group = [nxt]
        if tile == "[" and direction in (Direction.UP, Direction.DOWN):
            group.append(Direction.RIGHT.step(nxt))
        elif tile == "]" and direction in (Direction.UP, Direction.DOWN):
            group.append(Direction.LEFT.step(nxt))
        for part in group:
            if part not in seen:
                seen.add(part)
                frontier.append(part)
    moved = {pos: tiles[pos] for pos in to_move}
    for pos in to_move:
        tiles[pos] = "."
    for pos, tile in moved.items():
        tiles[direction.step(pos)] = tile
    return direction.step(robot)


def gps_sum(rows: List[str], moves: List[Direction]) -> int:
    tiles = {(r, c): ch for r, row in enumerate(rows) for c, ch in enumerate(row)}
    robot = next(pos for pos, ch in tiles.items() if ch == "@")
    for direction in moves:
        robot = try_move(tiles, robot, direction)
    return sum(100 * r + c for (r, c), ch in tiles.items() if ch in "O[")


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        blocks = input.strip().split("\n\n")
        if len(blocks) != 2:
            raise InputParseError("expected warehouse map and moves separated by a blank line")
        self.rows = blocks[0].splitlines()
        self.moves = [Direction.from_char(ch) for ch in blocks[1] if not ch.isspace()]

    def solve_part_1(self) -> Solution:
        return Solution.of("Sum of box GPS coordinates", gps_sum(self.rows, self.moves))

    def solve_part_2(self) -> Solution:
        wide = ["".join(WIDEN[ch] for ch in row) for row in self.rows]
        return Solution.of("Sum of wide box GPS coordinates", gps_sum(wide, self.moves))
