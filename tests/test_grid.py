"""Tests for grid parsing and neighbourhoods."""
from __future__ import annotations

import numpy as np
import pytest

from aocsolver.errors import InputParseError
from aocsolver.grid import (
    Direction,
    find,
    in_bounds,
    neighbors_4,
    parse_digit_grid,
    parse_grid,
    surround_2d,
)


def test_parse_grid_shape_and_cells():
    grid = parse_grid("#.\n.S\n")
    assert grid.shape == (2, 2)
    assert grid[1, 1] == "S"
    assert find(grid, "S") == (1, 1)


def test_parse_grid_rejects_ragged_rows():
    with pytest.raises(InputParseError):
        parse_grid("###\n##\n")


def test_parse_grid_rejects_empty_input():
    with pytest.raises(InputParseError):
        parse_grid("\n")


def test_parse_digit_grid():
    grid = parse_digit_grid("12\n90")
    assert grid.dtype == np.int64
    assert grid.tolist() == [[1, 2], [9, 0]]
    with pytest.raises(InputParseError):
        parse_digit_grid("1.\n23")


def test_find_missing_value():
    with pytest.raises(InputParseError):
        find(parse_grid("..\n.."), "S")


def test_neighbors_4_order_and_bounds():
    assert list(neighbors_4((1, 1), (3, 3))) == [(0, 1), (1, 2), (2, 1), (1, 0)]
    assert list(neighbors_4((0, 0), (3, 3))) == [(0, 1), (1, 0)]


def test_surround_2d_raster_order():
    assert list(surround_2d((1, 1), (3, 3))) == [
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 2),
        (2, 0), (2, 1), (2, 2),
    ]
    assert list(surround_2d((0, 2), (2, 3))) == [(0, 1), (1, 1), (1, 2)]


def test_in_bounds():
    assert in_bounds((0, 0), (1, 1))
    assert not in_bounds((-1, 0), (5, 5))
    assert not in_bounds((0, 5), (5, 5))


def test_direction_turns():
    assert Direction.UP.turn_right() is Direction.RIGHT
    assert Direction.UP.turn_left() is Direction.LEFT
    assert Direction.LEFT.opposite() is Direction.RIGHT
    assert Direction.DOWN.step((2, 3), 2) == (4, 3)


def test_direction_from_char():
    assert Direction.from_char("v") is Direction.DOWN
    assert Direction.from_char("L") is Direction.LEFT
    with pytest.raises(InputParseError):
        Direction.from_char("x")
