"""Tests for solver discovery."""
from __future__ import annotations

import pytest

from aocsolver.dispatch import available_solvers, solver_class, solver_for
from aocsolver.errors import NoSolverError
from aocsolver.solvers import Solver


def test_discovers_every_day():
    solvers = available_solvers()
    assert len(solvers) == 25 + 25 + 12
    assert list(solvers)[0] == (2023, 1)
    assert list(solvers)[-1] == (2025, 12)
    assert solvers[(2024, 17)] == "aocsolver.solvers.year2024.day17"


def test_discovery_by_year_is_ordered():
    assert list(available_solvers(2025)) == [(2025, day) for day in range(1, 13)]
    assert available_solvers(1999) == {}


def test_solver_class_is_a_solver():
    assert issubclass(solver_class(2023, 1), Solver)


@pytest.mark.parametrize("year, day", [(2025, 13), (2022, 1)])
def test_missing_day_raises(year, day):
    with pytest.raises(NoSolverError) as excinfo:
        solver_for("", year, day)
    assert (excinfo.value.year, excinfo.value.day) == (year, day)
