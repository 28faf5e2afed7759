"""scaffold.py - Create solver modules for new days from a template.

For each requested day, writes:
- src/aocsolver/solvers/year<YYYY>/day<D>.py (solver skeleton)
- tests/examples/year<YYYY>/day<D>-1.example (empty, paste the example here)
- src/aocsolver/solvers/year<YYYY>/__init__.py when the year is new

Existing files are never overwritten.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

from .config import FIRST_DAY, LAST_DAY
from .errors import ScaffoldError

logger = logging.getLogger(__name__)

SOLVERS_DIR = Path("src") / "aocsolver" / "solvers"
EXAMPLES_DIR = Path("tests") / "examples"

TEMPLATE = '''"""Day {day}"""
from __future__ import annotations

from ...types import Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.lines = input.splitlines()

    def solve_part_1(self) -> Solution:
        return Solution.of("Part 1", "TODO")

    def solve_part_2(self) -> Solution:
        return Solution.of("Part 2", "TODO")
'''

YEAR_INIT = '"""Solutions for Advent of Code {year}."""\n'


def write_if_non_existent(path: Path, content: str) -> bool:
    """Write ``content`` to ``path`` unless the file already exists.

    Returns:
        True if the file was written, False if it was skipped
    """
    if path.exists():
        logger.warning("file '%s' already exists, skipping", path)
        return False
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ScaffoldError(f"writing file: {path}") from e
    return True


def create_days(root: Path, year: int, days: Iterable[int]) -> List[Path]:
    """Create solver skeletons and example placeholders.

    Args:
        root: Repository root
        year: Contest year
        days: Days to create

    Returns:
        Files that were written
    """
    days = list(days)
    for day in days:
        if not (FIRST_DAY <= day <= LAST_DAY):
            raise ScaffoldError(f"day must be in {FIRST_DAY}..{LAST_DAY}, got {day}")
    year_dir = Path(root) / SOLVERS_DIR / f"year{year}"
    examples_dir = Path(root) / EXAMPLES_DIR / f"year{year}"
    try:
        year_dir.mkdir(parents=True, exist_ok=True)
        examples_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScaffoldError(f"creating directories: {year_dir}") from e

    written = []
    candidates = [(year_dir / "__init__.py", YEAR_INIT.format(year=year))]
    for day in days:
        candidates.append((year_dir / f"day{day}.py", TEMPLATE.format(day=day)))
        candidates.append((examples_dir / f"day{day}-1.example", ""))

    for path, content in candidates:
        if path.name == "__init__.py" and path.exists():
            continue
        if write_if_non_existent(path, content):
            logger.info("Created %s", path)
            written.append(path)
    return written
