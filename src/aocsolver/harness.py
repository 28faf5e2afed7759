"""harness.py - CLI runner for the puzzle collection.

Provides a command-line interface to fetch inputs and run the solvers.

Usage:
    aoc                          # solve today's puzzle
    aoc -y 2023 -d 1 2 3         # solve days 1-3 of 2023
    aoc solve -y 2024 -d 5 -j 4  # solve in worker processes
    aoc set-session-id           # store the session cookie in the keyring
    aoc create -y 2025 -d 13     # scaffold a solver module
    aoc list -y 2024             # list implemented days
    aoc cache stats | clear      # inspect or empty the input cache

Commands:
    solve: Default when no command is given
    set-session-id: Prompt for the session id and store it
    create: Create solver module and example file from the template
    list: Show available solvers
    cache: Input cache maintenance
"""
from __future__ import annotations
import argparse
import asyncio
import logging
import sys
import time
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import httpx

from . import config
from . import dispatch
from . import scaffold
from .cache import InputCache
from .client import AocClient
from .errors import AocError, NoSolverError
from .logging_config import setup_logging
from .session_store import SessionIdStore
from .types import InputKey, RequestedDays

logger = logging.getLogger(__name__)


# ============================================================================
# Solving
# ============================================================================
def solve_day(year: int, day: int, input: str) -> List[str]:
    """Run both parts of one day and render the answers.

    Module-level so it can be shipped to worker processes.

    Returns:
        Rendered part 1 and part 2 solutions
    """
    started = time.perf_counter()
    solver = dispatch.solver_for(input, year, day)
    rendered = [str(solver.solve_part_1()), str(solver.solve_part_2())]
    logger.debug("Solved %d day %d in %.3fs", year, day, time.perf_counter() - started)
    return rendered


def format_day(year: int, day: int, rendered: Sequence[str]) -> str:
    """Format the report block printed for one day."""
    lines = ["", f"📆 {year}, day {day}"]
    lines.extend(f"⭐ {solution}" for solution in rendered)
    return "\n".join(lines)


class _LazyClient:
    """Create the AocClient (and read the session id) on first use only."""

    def __init__(self, store: SessionIdStore, base_url: str):
        self._store = store
        self._base_url = base_url
        self._client: Optional[AocClient] = None

    def get(self) -> AocClient:
        if self._client is None:
            self._client = AocClient(self._base_url, self._store.session_id())
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()


async def load_inputs(
    keys: List[InputKey], cache_directory: Path, store: SessionIdStore, base_url: str
) -> Dict[InputKey, str]:
    """Read inputs from the cache, downloading missing ones concurrently."""
    client = _LazyClient(store, base_url)

    def fetch(key: InputKey):
        return client.get().get_input(key.year, key.day)

    cache = InputCache(cache_directory, fetch)
    try:
        return await cache.get_many(keys)
    finally:
        await client.aclose()


def run_solve(
    requested: RequestedDays,
    *,
    store: SessionIdStore,
    cache_directory: Path,
    base_url: str = config.BASE_URL,
    jobs: int = 1,
    out: Callable[[str], None] = print,
) -> None:
    """Fetch inputs for the requested days and print their solutions."""
    available = dispatch.available_solvers(requested.year)
    for day in requested.days:
        if (requested.year, day) not in available:
            raise NoSolverError(requested.year, day)

    keys = requested.keys()
    inputs = asyncio.run(load_inputs(keys, cache_directory, store, base_url))

    if jobs > 1 and len(keys) > 1:
        logger.info("Solving %d days with %d worker processes", len(keys), jobs)
        with ProcessPoolExecutor(max_workers=jobs) as executor:
            results = executor.map(
                solve_day,
                [k.year for k in keys],
                [k.day for k in keys],
                [inputs[k] for k in keys],
            )
            for key, rendered in zip(keys, results):
                out(format_day(key.year, key.day, rendered))
    else:
        for key in keys:
            out(format_day(key.year, key.day, solve_day(key.year, key.day, inputs[key])))


# ============================================================================
# Command handlers
# ============================================================================
def _requested(args: argparse.Namespace) -> RequestedDays:
    year = getattr(args, "year", None)
    days = getattr(args, "days", None)
    if year is None:
        year = args.top_year
    if days is None:
        days = args.top_days
    return RequestedDays.from_args(year, days)


def cmd_solve(args: argparse.Namespace) -> None:
    run_solve(
        _requested(args),
        store=SessionIdStore(),
        cache_directory=config.cache_dir(),
        base_url=config.BASE_URL,
        jobs=getattr(args, "jobs", 1),
    )


def cmd_set_session_id(args: argparse.Namespace) -> None:
    SessionIdStore().prompt()


def cmd_create(args: argparse.Namespace) -> None:
    requested = _requested(args)
    written = scaffold.create_days(args.root, requested.year, requested.days)
    for path in written:
        print(path)


def cmd_list(args: argparse.Namespace) -> None:
    year = getattr(args, "year", None) or args.top_year
    by_year: Dict[int, List[int]] = {}
    for (solver_year, day) in dispatch.available_solvers(year):
        by_year.setdefault(solver_year, []).append(day)
    for solver_year, days in by_year.items():
        print(f"{solver_year}: {' '.join(str(d) for d in days)}")


def cmd_cache(args: argparse.Namespace) -> None:
    cache = InputCache(config.cache_dir(), _no_fetch)
    if args.action == "stats":
        stats = cache.stats()
        print(f"{stats['directory']}: {stats['num_inputs']} inputs, {stats['total_size_bytes']} bytes")
    elif args.action == "clear":
        if args.days or args.top_days:
            requested = _requested(args)
            removed = sum(cache.invalidate(key) for key in requested.keys())
        else:
            removed = cache.invalidate()
        print(f"Removed {removed} cached inputs")


def _no_fetch(key: InputKey):
    raise AocError(f"cache maintenance does not download inputs ({key.serialize()})")


# ============================================================================
# Argument parsing
# ============================================================================
def _add_day_args(parser: argparse.ArgumentParser, year_dest: str, days_dest: str) -> None:
    parser.add_argument(
        "-d",
        "--days",
        dest=days_dest,
        type=int,
        nargs="+",
        action="extend",
        default=None,
        help="Days of the advent calendar. Defaults to the current day "
        "(UTC-5, the timezone in which puzzles are published at midnight).",
    )
    parser.add_argument(
        "-y",
        "--year",
        dest=year_dest,
        type=int,
        default=None,
        help="Year of the advent calendar. Defaults to the current year.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc",
        description="Advent of Code puzzle runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve today's puzzle
  aoc
  # Solve several days of a past year
  aoc solve -y 2023 -d 1 2 3
        """,
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    _add_day_args(parser, "top_year", "top_days")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    solve = subparsers.add_parser("solve", help="Solve puzzles (default)")
    _add_day_args(solve, "year", "days")
    solve.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help="Solve days in this many worker processes (default: 1)",
    )
    solve.set_defaults(handler=cmd_solve)

    set_session = subparsers.add_parser(
        "set-session-id", help="Set the session ID for interacting with the AoC API"
    )
    set_session.set_defaults(handler=cmd_set_session_id)

    create = subparsers.add_parser("create", help="Create module for a day from template")
    _add_day_args(create, "year", "days")
    create.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Repository root to create files in (default: current directory)",
    )
    create.set_defaults(handler=cmd_create)

    list_cmd = subparsers.add_parser("list", help="List implemented days")
    list_cmd.add_argument("-y", "--year", type=int, default=None, help="Only this year")
    list_cmd.set_defaults(handler=cmd_list)

    cache = subparsers.add_parser("cache", help="Inspect or clear the input cache")
    cache.add_argument("action", choices=["stats", "clear"])
    _add_day_args(cache, "year", "days")
    cache.set_defaults(handler=cmd_cache)

    parser.set_defaults(handler=cmd_solve)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    setup_logging(level)

    try:
        args.handler(args)
    except (AocError, httpx.HTTPError, OSError, ValueError) as e:
        logger.error("%s", e)
        logger.debug("Failure details", exc_info=True)
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
