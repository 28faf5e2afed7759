"""Day 23: LAN Party"""
from __future__ import annotations
from collections import defaultdict
from typing import Dict, Set

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


def bron_kerbosch(r: Set[str], p: Set[str], x: Set[str], graph: Dict[str, Set[str]], best: Set[str]) -> Set[str]:
    if not p and not x:
        return r if len(r) > len(best) else best
    pivot = max(p | x, key=lambda v: len(graph[v]))
    for v in list(p - graph[pivot]):
        best = bron_kerbosch(r | {v}, p & graph[v], x & graph[v], graph, best)
        p = p - {v}
        x = x | {v}
    return best


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.graph: Dict[str, Set[str]] = defaultdict(set)
        for line in input.splitlines():
            if not line.strip():
                continue
            a, sep, b = line.strip().partition("-")
            if not sep:
                raise InputParseError(f"invalid connection: {line!r}")
            self.graph[a].add(b)
            self.graph[b].add(a)

    def solve_part_1(self) -> Solution:
        triangles = set()
        for a, neighbors in self.graph.items():
            if not a.startswith("t"):
                continue
            for b in neighbors:
                for c in neighbors & self.graph[b]:
                    triangles.add(frozenset((a, b, c)))
        return Solution.of("Sets of three with a t-computer", len(triangles))

    def solve_part_2(self) -> Solution:
        clique = bron_kerbosch(set(), set(self.graph), set(), self.graph, set())
        return Solution.of("LAN party password", ",".join(sorted(clique)))
