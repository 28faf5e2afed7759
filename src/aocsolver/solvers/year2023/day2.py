"""Day 2: Cube Conundrum"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

GAME_PATTERN = re.compile(r"^Game\s+(\d+):(.*)$")


@dataclass(frozen=True)
class Reveal:
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def parse(cls, expr: str) -> "Reveal":
        counts = {"red": 0, "green": 0, "blue": 0}
        for color_count in expr.split(","):
            parts = color_count.split()
            if len(parts) != 2:
                raise InputParseError(f"expected '<count> <color>', got {color_count!r}")
            count, color = parts
            if color not in counts:
                raise InputParseError(f"invalid color {color}")
            counts[color] += int(count)
        return cls(**counts)

    def is_possible_to_draw_from(self, bag: "Reveal") -> bool:
        return self.red <= bag.red and self.green <= bag.green and self.blue <= bag.blue

    def max_over_colors(self, other: "Reveal") -> "Reveal":
        return Reveal(
            max(self.red, other.red), max(self.green, other.green), max(self.blue, other.blue)
        )

    def power(self) -> int:
        return self.red * self.green * self.blue


REFERENCE_BAG = Reveal(red=12, green=13, blue=14)


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.part1 = 0
        self.part2 = 0
        for line in input.splitlines():
            match = GAME_PATTERN.match(line.strip())
            if match is None:
                raise InputParseError(f"invalid game syntax: {line!r}")
            game_id = int(match.group(1))
            reveals: List[Reveal] = [Reveal.parse(expr) for expr in match.group(2).split(";")]
            if all(r.is_possible_to_draw_from(REFERENCE_BAG) for r in reveals):
                self.part1 += game_id
            minimal = Reveal()
            for reveal in reveals:
                minimal = minimal.max_over_colors(reveal)
            self.part2 += minimal.power()

    def solve_part_1(self) -> Solution:
        return Solution.of("Sum of IDs of possible games", self.part1)

    def solve_part_2(self) -> Solution:
        return Solution.of("Sum of the power", self.part2)
