"""Day 22: Monkey Market"""
from __future__ import annotations

import numpy as np

from ...types import Solution
from .. import Solver

PRUNE = 16777216  # 2**24
ROUNDS = 2000


def evolve(secrets: np.ndarray) -> np.ndarray:
    secrets = ((secrets * 64) ^ secrets) % PRUNE
    secrets = ((secrets // 32) ^ secrets) % PRUNE
    return ((secrets * 2048) ^ secrets) % PRUNE


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        secrets = np.array([int(v) for v in input.split()], dtype=np.int64)
        history = [secrets]
        for _ in range(ROUNDS):
            history.append(evolve(history[-1]))
        # shape (buyers, ROUNDS + 1)
        self.history = np.stack(history, axis=1)

    def solve_part_1(self) -> Solution:
        return Solution.of("Sum of 2000th secret numbers", int(self.history[:, -1].sum()))

    def solve_part_2(self) -> Solution:
        prices = self.history % 10
        changes = np.diff(prices, axis=1) + 9  # 0..18
        # encode each window of four changes as one base-19 number
        keys = (
            changes[:, :-3] * 19**3
            + changes[:, 1:-2] * 19**2
            + changes[:, 2:-1] * 19
            + changes[:, 3:]
        )
        sell_prices = prices[:, 4:]
        bananas = np.zeros(19**4, dtype=np.int64)
        for buyer_keys, buyer_prices in zip(keys, sell_prices):
            # only the first occurrence of a sequence sells
            unique_keys, first = np.unique(buyer_keys, return_index=True)
            bananas[unique_keys] += buyer_prices[first]
        return Solution.of("Most bananas", int(bananas.max()))
