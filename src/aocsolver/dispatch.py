"""dispatch.py - Map (year, day) to the solver implementing it.

Solver modules are discovered by walking the ``aocsolver.solvers`` package:
subpackages named ``year<YYYY>`` containing modules named ``day<D>``. Adding
a new day only requires dropping a module into place (see ``scaffold``).
"""
from __future__ import annotations
import importlib
import logging
import pkgutil
import re
from typing import Dict, Optional, Tuple

from . import solvers as solvers_package
from .config import FIRST_DAY, LAST_DAY
from .errors import NoSolverError
from .solvers import Solver

logger = logging.getLogger(__name__)

_YEAR_PATTERN = re.compile(r"^year(\d{4})$")
_DAY_PATTERN = re.compile(r"^day(\d{1,2})$")


def available_solvers(year: Optional[int] = None) -> Dict[Tuple[int, int], str]:
    """Discover all solver modules.

    Args:
        year: Restrict discovery to one year (default: all years)

    Returns:
        Dict mapping (year, day) to the fully qualified module name,
        ordered by year then day
    """
    found: Dict[Tuple[int, int], str] = {}
    prefix = solvers_package.__name__
    for year_info in pkgutil.iter_modules(solvers_package.__path__):
        year_match = _YEAR_PATTERN.match(year_info.name)
        if not year_info.ispkg or year_match is None:
            continue
        module_year = int(year_match.group(1))
        if year is not None and module_year != year:
            continue

        year_package = importlib.import_module(f"{prefix}.{year_info.name}")
        for day_info in pkgutil.iter_modules(year_package.__path__):
            day_match = _DAY_PATTERN.match(day_info.name)
            if day_match is None:
                continue
            day = int(day_match.group(1))
            if not (FIRST_DAY <= day <= LAST_DAY):
                continue
            found[(module_year, day)] = (
                f"{prefix}.{year_info.name}.{day_info.name}"
            )
    return dict(sorted(found.items()))


def solver_class(year: int, day: int) -> type:
    """Return the SolverImpl class for a day.

    Raises:
        NoSolverError: If no module implements the day
    """
    module_name = available_solvers(year).get((year, day))
    if module_name is None:
        raise NoSolverError(year, day)
    module = importlib.import_module(module_name)
    try:
        return module.SolverImpl
    except AttributeError as e:
        raise NoSolverError(year, day) from e


def solver_for(input: str, year: int, day: int) -> Solver:
    """Instantiate the solver for a day with its puzzle input.

    Args:
        input: Puzzle input text
        year: Contest year
        day: Day of the advent calendar

    Returns:
        Solver ready to answer both parts

    Raises:
        NoSolverError: If no module implements the day
    """
    cls = solver_class(year, day)
    logger.debug("Dispatching %d day %d to %s", year, day, cls.__module__)
    return cls(input)
