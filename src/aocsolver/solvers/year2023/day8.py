"""Day 8: Haunted Wasteland"""
from __future__ import annotations
import math
import re
from typing import Callable, Dict, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

NODE_PATTERN = re.compile(r"^(\w+)\s*=\s*\((\w+),\s*(\w+)\)$")


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        lines = [line.strip() for line in input.splitlines() if line.strip()]
        if not lines or set(lines[0]) - {"L", "R"}:
            raise InputParseError("first line must be the L/R instructions")
        self.instructions = lines[0]
        self.network: Dict[str, Tuple[str, str]] = {}
        for line in lines[1:]:
            match = NODE_PATTERN.match(line)
            if match is None:
                raise InputParseError(f"invalid node: {line!r}")
            self.network[match.group(1)] = (match.group(2), match.group(3))

    def steps_until(self, start: str, is_goal: Callable[[str], bool]) -> int:
        node = start
        steps = 0
        while not is_goal(node):
            turn = self.instructions[steps % len(self.instructions)]
            node = self.network[node][0 if turn == "L" else 1]
            steps += 1
        return steps

    def solve_part_1(self) -> Solution:
        steps = self.steps_until("AAA", lambda node: node == "ZZZ")
        return Solution.of("Steps to reach ZZZ", steps)

    def solve_part_2(self) -> Solution:
        # Every ghost runs into a cycle whose length equals its first arrival
        # at a Z node, so the answer is the LCM of the arrival times.
        starts = [node for node in self.network if node.endswith("A")]
        steps = 1
        for start in starts:
            steps = math.lcm(steps, self.steps_until(start, lambda node: node.endswith("Z")))
        return Solution.of("Steps to be only on nodes ending with Z", steps)
