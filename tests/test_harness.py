"""Tests for the command-line runner."""
from __future__ import annotations
import logging

import pytest

from aocsolver import harness
from aocsolver.errors import NoSolverError
from aocsolver.session_store import SessionIdStore
from aocsolver.types import RequestedDays


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("aocsolver")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_parser_top_level_days():
    args = harness.build_parser().parse_args(["-y", "2023", "-d", "1", "2"])
    assert args.command is None
    assert args.handler is harness.cmd_solve
    assert (args.top_year, args.top_days) == (2023, [1, 2])


def test_parser_solve_command():
    args = harness.build_parser().parse_args(["solve", "-d", "5", "-d", "6", "-j", "4"])
    assert args.handler is harness.cmd_solve
    assert args.days == [5, 6]
    assert args.year is None
    assert args.jobs == 4


def test_parser_cache_command():
    args = harness.build_parser().parse_args(["cache", "clear", "-y", "2024", "-d", "3"])
    assert args.handler is harness.cmd_cache
    assert (args.action, args.year, args.days) == ("clear", 2024, [3])


def test_format_day():
    assert harness.format_day(2024, 3, ["A: 1", "B: 2"]) == "\n📆 2024, day 3\n⭐ A: 1\n⭐ B: 2"


def test_run_solve_reads_cached_inputs(tmp_path, fake_keyring, example):
    (tmp_path / "2023-01").write_text(example(2023, 1, 1), encoding="utf-8")
    (tmp_path / "2024-01").write_text(example(2024, 1), encoding="utf-8")
    store = SessionIdStore(backend=fake_keyring, read_secret=pytest.fail)
    lines = []

    harness.run_solve(RequestedDays(2023, [1]), store=store, cache_directory=tmp_path, out=lines.append)
    harness.run_solve(RequestedDays(2024, [1]), store=store, cache_directory=tmp_path, out=lines.append)

    assert lines[0].startswith("\n📆 2023, day 1\n⭐ ")
    assert "142" in lines[0]
    assert lines[1].splitlines()[2].endswith(": 11")
    assert lines[1].splitlines()[3].endswith(": 31")


def test_run_solve_in_worker_processes_keeps_requested_order(tmp_path, fake_keyring, example):
    for day in (4, 1, 2):
        (tmp_path / f"2024-{day:02d}").write_text(example(2024, day), encoding="utf-8")
    store = SessionIdStore(backend=fake_keyring, read_secret=pytest.fail)
    lines = []

    harness.run_solve(
        RequestedDays(2024, [4, 1, 2]), store=store, cache_directory=tmp_path, jobs=3, out=lines.append
    )

    blocks = [line.splitlines() for line in lines]
    assert [b[1] for b in blocks] == ["📆 2024, day 4", "📆 2024, day 1", "📆 2024, day 2"]
    assert [b[2].rsplit(": ", 1)[1] for b in blocks] == ["18", "11", "2"]
    assert [b[3].rsplit(": ", 1)[1] for b in blocks] == ["9", "31", "4"]


def test_run_solve_checks_solvers_before_fetching(tmp_path, fake_keyring):
    store = SessionIdStore(backend=fake_keyring, read_secret=pytest.fail)
    with pytest.raises(NoSolverError):
        harness.run_solve(RequestedDays(2025, [1, 20]), store=store, cache_directory=tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_main_reports_missing_solver(tmp_path, monkeypatch):
    monkeypatch.setenv("AOC_CACHE_DIR", str(tmp_path))
    assert harness.main(["-q", "solve", "-y", "2022", "-d", "1"]) == 1


def test_main_lists_solvers(capsys):
    assert harness.main(["list", "-y", "2025"]) == 0
    assert capsys.readouterr().out.strip() == "2025: " + " ".join(str(d) for d in range(1, 13))


def test_main_cache_stats(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("AOC_CACHE_DIR", str(tmp_path))
    (tmp_path / "2024-01").write_text("1 2\n", encoding="utf-8")
    assert harness.main(["cache", "stats"]) == 0
    assert capsys.readouterr().out.strip() == f"{tmp_path}: 1 inputs, 4 bytes"


def test_main_rejects_day_out_of_range(tmp_path, monkeypatch):
    monkeypatch.setenv("AOC_CACHE_DIR", str(tmp_path))
    (tmp_path / "2024-01").write_text("1 2\n", encoding="utf-8")
    assert harness.main(["-q", "cache", "clear", "-y", "2024", "-d", "30"]) == 1
    assert (tmp_path / "2024-01").exists()


def test_main_reports_undecodable_cached_input(tmp_path, monkeypatch):
    monkeypatch.setenv("AOC_CACHE_DIR", str(tmp_path))
    (tmp_path / "2024-01").write_bytes(b"\xff\xfe")
    assert harness.main(["-q", "solve", "-y", "2024", "-d", "1"]) == 1
