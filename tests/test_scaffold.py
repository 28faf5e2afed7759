"""Tests for solver module creation."""
from __future__ import annotations

import pytest

from aocsolver.errors import ScaffoldError
from aocsolver.scaffold import EXAMPLES_DIR, SOLVERS_DIR, create_days, write_if_non_existent


def test_creates_module_example_and_year_package(tmp_path):
    written = create_days(tmp_path, 2030, [1, 2])

    year_dir = tmp_path / SOLVERS_DIR / "year2030"
    assert set(written) == {
        year_dir / "__init__.py",
        year_dir / "day1.py",
        year_dir / "day2.py",
        tmp_path / EXAMPLES_DIR / "year2030" / "day1-1.example",
        tmp_path / EXAMPLES_DIR / "year2030" / "day2-1.example",
    }
    module = (year_dir / "day2.py").read_text(encoding="utf-8")
    assert module.startswith('"""Day 2"""')
    assert "class SolverImpl(Solver):" in module


def test_never_overwrites(tmp_path):
    create_days(tmp_path, 2030, [1])
    solver = tmp_path / SOLVERS_DIR / "year2030" / "day1.py"
    solver.write_text("# work in progress\n", encoding="utf-8")

    assert create_days(tmp_path, 2030, [1, 3]) == [tmp_path / SOLVERS_DIR / "year2030" / "day3.py",
                                                   tmp_path / EXAMPLES_DIR / "year2030" / "day3-1.example"]
    assert solver.read_text(encoding="utf-8") == "# work in progress\n"


def test_write_if_non_existent(tmp_path):
    path = tmp_path / "file.txt"
    assert write_if_non_existent(path, "first")
    assert not write_if_non_existent(path, "second")
    assert path.read_text(encoding="utf-8") == "first"


@pytest.mark.parametrize("day", [0, 26])
def test_rejects_day_outside_calendar(tmp_path, day):
    with pytest.raises(ScaffoldError):
        create_days(tmp_path, 2030, [1, day])
    assert list(tmp_path.iterdir()) == []
