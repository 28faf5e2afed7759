"""Day 8: Playground"""
from __future__ import annotations
from math import prod
from typing import List

import numpy as np
from scipy.spatial.distance import pdist

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

CONNECTIONS = 1000


class DisjointSets:
    def __init__(self, size: int):
        self.parent = list(range(size))
        self.size = [1] * size
        self.groups = size

    def find(self, x: int) -> int:
        while self.parent[x] != x:
            self.parent[x] = self.parent[self.parent[x]]
            x = self.parent[x]
        return x

    def union(self, a: int, b: int) -> None:
        a, b = self.find(a), self.find(b)
        if a == b:
            return
        if self.size[a] < self.size[b]:
            a, b = b, a
        self.parent[b] = a
        self.size[a] += self.size[b]
        self.groups -= 1


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        try:
            boxes = np.array(
                [[int(v) for v in line.split(",")] for line in input.splitlines() if line.strip()],
                dtype=np.int64,
            )
        except ValueError as e:
            raise InputParseError("expected X,Y,Z per line") from e
        if boxes.ndim != 2 or boxes.shape[1] != 3:
            raise InputParseError("expected X,Y,Z per line")
        self.boxes = boxes
        # pdist orders pairs like the upper triangle of the distance matrix
        first, second = np.triu_indices(len(boxes), k=1)
        order = np.argsort(pdist(boxes, "sqeuclidean"), kind="stable")
        self.pairs = list(zip(first[order].tolist(), second[order].tolist()))

    def make_connections(self, n: int) -> int:
        """Product of the three largest circuits after the ``n`` shortest links."""
        circuits = DisjointSets(len(self.boxes))
        for a, b in self.pairs[:n]:
            circuits.union(a, b)
        sizes: List[int] = sorted(
            (circuits.size[i] for i in range(len(self.boxes)) if circuits.find(i) == i),
            reverse=True,
        )
        return prod(sizes[:3])

    def last_connection(self) -> int:
        """Product of the X coordinates of the link that joins everything."""
        circuits = DisjointSets(len(self.boxes))
        for a, b in self.pairs:
            circuits.union(a, b)
            if circuits.groups == 1:
                return int(self.boxes[a][0] * self.boxes[b][0])
        raise ValueError("junction boxes never form a single circuit")

    def solve_part_1(self) -> Solution:
        return Solution.of("Product of the three largest circuits", self.make_connections(CONNECTIONS))

    def solve_part_2(self) -> Solution:
        return Solution.of("Product of X coordinates of the last link", self.last_connection())
