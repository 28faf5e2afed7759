"""Day 23: A Long Walk

The trail map is contracted to a graph of junctions before searching for
the longest simple path.
"""
from __future__ import annotations
from typing import Dict, List, Tuple

import numpy as np

from ...grid import Direction, Pos, in_bounds, parse_grid
from ...types import Solution
from .. import Solver

SLOPES = {"^": Direction.UP, ">": Direction.RIGHT, "v": Direction.DOWN, "<": Direction.LEFT}

Graph = Dict[Pos, List[Tuple[Pos, int]]]


def _moves(grid: np.ndarray, pos: Pos, slippery: bool) -> List[Pos]:
    tile = str(grid[pos])
    if slippery and tile in SLOPES:
        directions = [SLOPES[tile]]
    else:
        directions = list(Direction)
    moves = []
    for direction in directions:
        nxt = direction.step(pos)
        if in_bounds(nxt, grid.shape) and grid[nxt] != "#":
            moves.append(nxt)
    return moves


def build_graph(grid: np.ndarray, start: Pos, end: Pos, slippery: bool) -> Graph:
    junctions = {start, end}
    for r, c in np.argwhere(grid != "#"):
        pos = (int(r), int(c))
        if len(_moves(grid, pos, False)) > 2:
            junctions.add(pos)
    graph: Graph = {junction: [] for junction in junctions}
    for junction in junctions:
        for first in _moves(grid, junction, slippery):
            prev, pos, length = junction, first, 1
            while pos not in junctions:
                onward = [n for n in _moves(grid, pos, slippery) if n != prev]
                if not onward:
                    break
                prev, pos = pos, onward[0]
                length += 1
            else:
                graph[junction].append((pos, length))
    return graph


def longest_hike(graph: Graph, start: Pos, end: Pos) -> int:
    best = -1
    visited = {start}

    def walk(pos: Pos, length: int) -> None:
        nonlocal best
        if pos == end:
            best = max(best, length)
            return
        for nxt, edge in graph[pos]:
            if nxt not in visited:
                visited.add(nxt)
                walk(nxt, length + edge)
                visited.remove(nxt)

    walk(start, 0)
    if best < 0:
        raise ValueError("no path to the end tile")
    return best


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.grid = parse_grid(input)
        height = self.grid.shape[0]
        self.start = (0, int(np.flatnonzero(self.grid[0] == ".")[0]))
        self.end = (height - 1, int(np.flatnonzero(self.grid[-1] == ".")[0]))

    def solve_part_1(self) -> Solution:
        graph = build_graph(self.grid, self.start, self.end, slippery=True)
        return Solution.of("Longest hike", longest_hike(graph, self.start, self.end))

    def solve_part_2(self) -> Solution:
        graph = build_graph(self.grid, self.start, self.end, slippery=False)
        return Solution.of("Longest hike on dry slopes", longest_hike(graph, self.start, self.end))
