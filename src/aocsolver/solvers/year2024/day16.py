"""Day 16: Reindeer Maze"""
from __future__ import annotations
import heapq
from itertools import count
from typing import Dict, Iterable, Tuple

from ...grid import Direction, Pos, find, parse_grid
from ...types import Solution
from .. import Solver

State = Tuple[Pos, Direction]

STEP_COST = 1
TURN_COST = 1000


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        grid = parse_grid(input)
        self.walls = grid == "#"
        self.start = find(grid, "S")
        self.end = find(grid, "E")

    def _dijkstra(self, sources: Iterable[State], reverse: bool) -> Dict[State, int]:
        dist: Dict[State, int] = {}
        tie = count()
        queue = [(0, next(tie), state) for state in sources]
        while queue:
            cost, _, state = heapq.heappop(queue)
            if state in dist:
                continue
            dist[state] = cost
            pos, heading = state
            ahead = heading.opposite().step(pos) if reverse else heading.step(pos)
            moves = [(cost + TURN_COST, (pos, heading.turn_left())),
                     (cost + TURN_COST, (pos, heading.turn_right()))]
            if not self.walls[ahead]:
                moves.append((cost + STEP_COST, (ahead, heading)))
            for new_cost, new_state in moves:
                if new_state not in dist:
                    heapq.heappush(queue, (new_cost, next(tie), new_state))
        return dist

    def solve(self) -> Tuple[int, int]:
        forward = self._dijkstra([(self.start, Direction.RIGHT)], reverse=False)
        best = min(forward[(self.end, d)] for d in Direction if (self.end, d) in forward)
        backward = self._dijkstra([(self.end, d) for d in Direction], reverse=True)
        tiles = {
            pos
            for (pos, heading), cost in forward.items()
            if cost + backward.get((pos, heading), best + 1) == best
        }
        return best, len(tiles)

    def solve_part_1(self) -> Solution:
        return Solution.of("Lowest score", self.solve()[0])

    def solve_part_2(self) -> Solution:
        return Solution.of("Tiles on a best path", self.solve()[1])
