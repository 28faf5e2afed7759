"""Day 18: RAM Run"""
from __future__ import annotations
from collections import deque
from typing import List, Optional

from ...errors import InputParseError
from ...grid import Pos, neighbors_4
from ...types import Solution
from .. import Solver

SIZE = 71
FALLEN_BYTES = 1024


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.bytes: List[Pos] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            x, sep, y = line.partition(",")
            if not sep:
                raise InputParseError(f"invalid byte position: {line!r}")
            self.bytes.append((int(x), int(y)))

    def shortest_path(self, size: int = SIZE, fallen: int = FALLEN_BYTES) -> Optional[int]:
        """Steps from (0, 0) to the exit after ``fallen`` bytes, or None."""
        corrupted = set(self.bytes[:fallen])
        target = (size - 1, size - 1)
        queue = deque([((0, 0), 0)])
        seen = {(0, 0)}
        while queue:
            pos, steps = queue.popleft()
            if pos == target:
                return steps
            for nxt in neighbors_4(pos, (size, size)):
                if nxt not in seen and nxt not in corrupted:
                    seen.add(nxt)
                    queue.append((nxt, steps + 1))
        return None

    def first_blocking_byte(self, size: int = SIZE) -> str:
        lo, hi = 0, len(self.bytes)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.shortest_path(size, mid + 1) is None:
                hi = mid
            else:
                lo = mid + 1
        if lo == len(self.bytes):
            raise ValueError("the exit stays reachable")
        x, y = self.bytes[lo]
        return f"{x},{y}"

    def solve_part_1(self) -> Solution:
        steps = self.shortest_path()
        if steps is None:
            raise ValueError("the exit is unreachable")
        return Solution.of("Minimum steps to the exit", steps)

    def solve_part_2(self) -> Solution:
        return Solution.of("First byte cutting off the exit", self.first_blocking_byte())
