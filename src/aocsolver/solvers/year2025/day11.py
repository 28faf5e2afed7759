"""Day 11: Reactor"""
from __future__ import annotations
from functools import lru_cache
from typing import Dict, List

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.outputs: Dict[str, List[str]] = {}
        for line in input.splitlines():
            if not line.strip():
                continue
            device, sep, targets = line.partition(":")
            if not sep:
                raise InputParseError(f"invalid device line: {line!r}")
            self.outputs[device.strip()] = targets.split()

    def count_paths(self, source: str, target: str) -> int:
        @lru_cache(maxsize=None)
        def count(node: str) -> int:
            if node == target:
                return 1
            return sum(count(n) for n in self.outputs.get(node, ()))

        return count(source)

    def solve_part_1(self) -> Solution:
        return Solution.of("Paths from you to out", self.count_paths("you", "out"))

    def solve_part_2(self) -> Solution:
        # the graph is acyclic so only one of the two orders can have paths
        via_dac_first = (
            self.count_paths("svr", "dac") * self.count_paths("dac", "fft") * self.count_paths("fft", "out")
        )
        via_fft_first = (
            self.count_paths("svr", "fft") * self.count_paths("fft", "dac") * self.count_paths("dac", "out")
        )
        return Solution.of("Paths through dac and fft", via_dac_first + via_fft_first)
