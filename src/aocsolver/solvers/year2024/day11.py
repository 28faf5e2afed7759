"""Day 11: Plutonian Pebbles"""
from __future__ import annotations
from collections import Counter
from typing import Dict, List

from ...types import Solution
from .. import Solver


def blink(stones: Dict[int, int]) -> Dict[int, int]:
    result: Counter = Counter()
    for stone, count in stones.items():
        if stone == 0:
            result[1] += count
            continue
        digits = str(stone)
        if len(digits) % 2 == 0:
            half = len(digits) // 2
            result[int(digits[:half])] += count
            result[int(digits[half:])] += count
        else:
            result[stone * 2024] += count
    return result


def count_stones(stones: List[int], blinks: int) -> int:
    counts: Dict[int, int] = Counter(stones)
    for _ in range(blinks):
        counts = blink(counts)
    return sum(counts.values())


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.stones = [int(v) for v in input.split()]

    def solve_part_1(self) -> Solution:
        return Solution.of("Stones after 25 blinks", count_stones(self.stones, 25))

    def solve_part_2(self) -> Solution:
        return Solution.of("Stones after 75 blinks", count_stones(self.stones, 75))
