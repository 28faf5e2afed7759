"""Day 19: Aplenty"""
from __future__ import annotations
import re
from dataclasses import dataclass
from math import prod
from typing import Dict, List, Optional, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

WORKFLOW_PATTERN = re.compile(r"^([a-z]+)\{(.*)\}$")
RULE_PATTERN = re.compile(r"^([xmas])([<>])(\d+):([a-zA-Z]+)$")
RATING_PATTERN = re.compile(r"([xmas])=(\d+)")

Ranges = Dict[str, Tuple[int, int]]


@dataclass(frozen=True)
class Rule:
    category: Optional[str]
    op: Optional[str]
    value: int
    target: str

    def matches(self, part: Dict[str, int]) -> bool:
        if self.category is None:
            return True
        rating = part[self.category]
        return rating < self.value if self.op == "<" else rating > self.value

    def split(self, ranges: Ranges) -> Tuple[Optional[Ranges], Optional[Ranges]]:
        """Split inclusive ``ranges`` into the matching and the remaining part."""
        if self.category is None:
            return ranges, None
        lo, hi = ranges[self.category]
        if self.op == "<":
            taken, rest = (lo, min(hi, self.value - 1)), (max(lo, self.value), hi)
        else:
            taken, rest = (max(lo, self.value + 1), hi), (lo, min(hi, self.value))
        matched = {**ranges, self.category: taken} if taken[0] <= taken[1] else None
        remaining = {**ranges, self.category: rest} if rest[0] <= rest[1] else None
        return matched, remaining


def parse_rule(text: str) -> Rule:
    match = RULE_PATTERN.match(text)
    if match is not None:
        return Rule(match.group(1), match.group(2), int(match.group(3)), match.group(4))
    if not text.isalpha():
        raise InputParseError(f"invalid rule: {text!r}")
    return Rule(None, None, 0, text)


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        blocks = input.strip().split("\n\n")
        if len(blocks) != 2:
            raise InputParseError("expected workflows and parts separated by a blank line")
        self.workflows: Dict[str, List[Rule]] = {}
        for line in blocks[0].splitlines():
            match = WORKFLOW_PATTERN.match(line.strip())
            if match is None:
                raise InputParseError(f"invalid workflow: {line!r}")
            self.workflows[match.group(1)] = [parse_rule(r) for r in match.group(2).split(",")]
        self.parts = [
            {k: int(v) for k, v in RATING_PATTERN.findall(line)}
            for line in blocks[1].splitlines()
            if line.strip()
        ]

    def accepts(self, part: Dict[str, int]) -> bool:
        name = "in"
        while name not in ("A", "R"):
            name = next(rule.target for rule in self.workflows[name] if rule.matches(part))
        return name == "A"

    def count_accepted(self, name: str, ranges: Ranges) -> int:
        if name == "R":
            return 0
        if name == "A":
            return prod(hi - lo + 1 for lo, hi in ranges.values())
        total = 0
        remaining: Optional[Ranges] = ranges
        for rule in self.workflows[name]:
            if remaining is None:
                break
            matched, remaining = rule.split(remaining)
            if matched is not None:
                total += self.count_accepted(rule.target, matched)
        return total

    def solve_part_1(self) -> Solution:
        total = sum(sum(part.values()) for part in self.parts if self.accepts(part))
        return Solution.of("Sum of accepted part ratings", total)

    def solve_part_2(self) -> Solution:
        ranges = {category: (1, 4000) for category in "xmas"}
        return Solution.of("Accepted rating combinations", self.count_accepted("in", ranges))
