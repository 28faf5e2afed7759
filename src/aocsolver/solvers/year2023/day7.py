"""Day 7: Camel Cards"""
from __future__ import annotations
from collections import Counter
from typing import List, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

CARD_ORDER = "23456789TJQKA"
JOKER_ORDER = "J23456789TQKA"


def hand_type(cards: str, jokers: bool = False) -> Tuple[int, ...]:
    """Return the sorted multiplicities of a hand (larger tuples rank higher).

    With jokers, every J joins the most frequent other card.
    """
    counts = Counter(cards)
    num_jokers = 0
    if jokers:
        num_jokers = counts.pop("J", 0)
    shape = sorted(counts.values(), reverse=True) or [0]
    shape[0] += num_jokers
    return tuple(shape)


def hand_key(cards: str, jokers: bool = False):
    order = JOKER_ORDER if jokers else CARD_ORDER
    return hand_type(cards, jokers), tuple(order.index(c) for c in cards)


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.hands: List[Tuple[str, int]] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            parts = line.split()
            if len(parts) != 2 or len(parts[0]) != 5 or any(c not in CARD_ORDER for c in parts[0]):
                raise InputParseError(f"invalid hand: {line!r}")
            self.hands.append((parts[0], int(parts[1])))

    def total_winnings(self, jokers: bool) -> int:
        ranked = sorted(self.hands, key=lambda hand: hand_key(hand[0], jokers))
        return sum(rank * bid for rank, (_, bid) in enumerate(ranked, start=1))

    def solve_part_1(self) -> Solution:
        return Solution.of("Total winnings", self.total_winnings(jokers=False))

    def solve_part_2(self) -> Solution:
        return Solution.of("Total winnings with jokers", self.total_winnings(jokers=True))
