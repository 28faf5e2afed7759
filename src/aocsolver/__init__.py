"""aocsolver - Advent of Code puzzle collection with an input-fetching runner.

Covers the 2023, 2024 and 2025 contests.

Modules:
- config: Endpoints, keyring names, cache location, puzzle time zone
- types: Canonical dataclasses (InputKey, RequestedDays, Solution)
- client: HTTP client streaming personal puzzle inputs
- cache: On-disk input cache populated on demand
- session_store: Session id in the platform credential store
- dispatch: (year, day) -> solver lookup
- scaffold: Solver module creation from a template
- grid: Character grids and neighbourhood helpers
- harness: CLI runner
- solvers: One module per puzzle day
"""
from __future__ import annotations

# Version
__version__ = "0.1.0"

from .types import InputKey, RequestedDays, Solution, NOT_IMPLEMENTED
from .dispatch import available_solvers, solver_for
from . import config

__all__ = [
    "InputKey",
    "RequestedDays",
    "Solution",
    "NOT_IMPLEMENTED",
    "available_solvers",
    "solver_for",
    "config",
]
