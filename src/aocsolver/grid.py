"""grid.py - Character grids and neighbourhood iteration.

Most puzzles come as rectangular character maps. They are parsed into 2D
numpy arrays (one character per cell) so that solvers can use vectorised
operations where they help, with plain (row, col) tuples as positions.

Neighbour orders are fixed:
- neighbors_4: up, right, down, left
- surround_2d: raster order over the 3x3 block, centre excluded
"""
from __future__ import annotations
from enum import Enum
from typing import Iterator, Tuple

import numpy as np

from .errors import InputParseError

Pos = Tuple[int, int]
Shape = Tuple[int, int]


# ============================================================================
# Parsing
# ============================================================================
def parse_grid(text: str) -> np.ndarray:
    """Parse a rectangular character map.

    Args:
        text: Lines of equal length (trailing newline tolerated)

    Returns:
        Array of shape (H, W) with dtype '<U1'

    Raises:
        InputParseError: If the grid is empty or rows differ in length
    """
    lines = [line for line in text.strip("\n").split("\n")]
    if not lines or not lines[0]:
        raise InputParseError("empty grid")
    width = len(lines[0])
    for i, line in enumerate(lines):
        if len(line) != width:
            raise InputParseError(
                f"ragged grid: row {i} has length {len(line)}, expected {width}"
            )
    return np.array([list(line) for line in lines], dtype="<U1")


def parse_digit_grid(text: str) -> np.ndarray:
    """Parse a grid of decimal digits into an int64 array."""
    chars = parse_grid(text)
    if not np.all(np.char.isdigit(chars)):
        raise InputParseError("grid contains non-digit characters")
    return chars.astype(np.int64)


def find(grid: np.ndarray, value: str) -> Pos:
    """Return the first position holding ``value`` in raster order.

    Raises:
        InputParseError: If the value does not occur
    """
    hits = np.argwhere(grid == value)
    if len(hits) == 0:
        raise InputParseError(f"{value!r} not found in grid")
    return int(hits[0][0]), int(hits[0][1])


# ============================================================================
# Neighbourhoods
# ============================================================================
def in_bounds(pos: Pos, shape: Shape) -> bool:
    """Whether ``pos`` lies inside a grid of ``shape``."""
    return 0 <= pos[0] < shape[0] and 0 <= pos[1] < shape[1]


def neighbors_4(pos: Pos, shape: Shape) -> Iterator[Pos]:
    """Yield the orthogonal neighbours of ``pos`` (up, right, down, left)."""
    r, c = pos
    for dr, dc in ((-1, 0), (0, 1), (1, 0), (0, -1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < shape[0] and 0 <= nc < shape[1]:
            yield nr, nc


def surround_2d(pos: Pos, shape: Shape) -> Iterator[Pos]:
    """Yield the up to eight cells surrounding ``pos`` in raster order."""
    r, c = pos
    for nr in range(max(r - 1, 0), min(r + 2, shape[0])):
        for nc in range(max(c - 1, 0), min(c + 2, shape[1])):
            if (nr, nc) != (r, c):
                yield nr, nc


class Direction(Enum):
    """Compass direction on a grid with rows growing downwards."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def delta(self) -> Pos:
        return self.value

    def turn_right(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def turn_left(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 3) % 4]

    def opposite(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]

    def step(self, pos: Pos, n: int = 1) -> Pos:
        """Move ``n`` cells from ``pos`` in this direction."""
        return pos[0] + n * self.value[0], pos[1] + n * self.value[1]

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        """Parse '^>v<' or 'URDL'."""
        try:
            return _FROM_CHAR[char]
        except KeyError:
            raise InputParseError(f"invalid direction {char!r}") from None


_CLOCKWISE = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
_FROM_CHAR = {
    "^": Direction.UP, ">": Direction.RIGHT, "v": Direction.DOWN, "<": Direction.LEFT,
    "U": Direction.UP, "R": Direction.RIGHT, "D": Direction.DOWN, "L": Direction.LEFT,
}
