"""Day 25: Snowverload"""
from __future__ import annotations
from typing import Dict, List, Tuple

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import breadth_first_order, maximum_flow

from ...errors import InputParseError
from ...types import NOT_IMPLEMENTED, MaybeSolution, Solution
from .. import Solver

CUT_SIZE = 3


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        index: Dict[str, int] = {}
        edges: List[Tuple[int, int]] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            name, sep, others = line.partition(":")
            if not sep:
                raise InputParseError(f"invalid wiring line: {line!r}")
            u = index.setdefault(name.strip(), len(index))
            for other in others.split():
                edges.append((u, index.setdefault(other, len(index))))
        self.num_nodes = len(index)
        rows = [u for u, v in edges] + [v for u, v in edges]
        cols = [v for u, v in edges] + [u for u, v in edges]
        self.capacity = csr_matrix(
            (np.ones(len(rows), dtype=np.int32), (rows, cols)),
            shape=(self.num_nodes, self.num_nodes),
        )

    def split_groups(self) -> Tuple[int, int]:
        """Sizes of the two groups left after cutting three wires.

        Max-flow from node 0 to each other node finds one on the far side of
        the cut; the residual graph then gives node 0's side.
        """
        for sink in range(1, self.num_nodes):
            result = maximum_flow(self.capacity, 0, sink)
            if result.flow_value != CUT_SIZE:
                continue
            residual = (self.capacity - result.flow).tocsr()
            residual.data[residual.data < 0] = 0
            residual.eliminate_zeros()
            reachable = breadth_first_order(residual, 0, directed=True, return_predecessors=False)
            size = len(reachable)
            return size, self.num_nodes - size
        raise ValueError(f"no cut of {CUT_SIZE} wires splits the graph")

    def solve_part_1(self) -> Solution:
        a, b = self.split_groups()
        return Solution.of("Product of group sizes", a * b)

    def solve_part_2(self) -> MaybeSolution:
        return NOT_IMPLEMENTED
