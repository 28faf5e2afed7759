"""Puzzle solvers, one module per day.

Layout:
    aocsolver/solvers/year<YYYY>/day<D>.py

Each day module defines ``SolverImpl``, a ``Solver`` subclass that parses the
input in its constructor and answers both parts on demand.
"""
from __future__ import annotations
from abc import ABC, abstractmethod

from ..types import MaybeSolution, Solution


class Solver(ABC):
    """Base class for the solver of one puzzle."""

    def __init__(self, input: str):
        self.input = input

    @abstractmethod
    def solve_part_1(self) -> Solution:
        """Answer the first part of the puzzle."""

    @abstractmethod
    def solve_part_2(self) -> MaybeSolution:
        """Answer the second part, or return NOT_IMPLEMENTED."""
