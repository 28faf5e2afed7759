"""config.py - Endpoints, credential-store names, cache location, time zone.

Collects the constants shared by the runner:
- Advent of Code endpoint (overridable via AOC_BASE_URL)
- Keyring service/user under which the session id is stored
- Puzzle time zone (puzzles unlock at midnight UTC-5)
- Cache directory resolution (AOC_CACHE_DIR, XDG_CACHE_HOME, ~/.cache)
"""
from __future__ import annotations
import logging
import os
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


# ============================================================================
# Remote service
# ============================================================================
DEFAULT_BASE_URL = "https://adventofcode.com/"
BASE_URL = os.environ.get("AOC_BASE_URL", DEFAULT_BASE_URL)

# Seconds before an input download is abandoned
HTTP_TIMEOUT = 30.0

USER_AGENT = "aocsolver/0.1.0 (personal puzzle runner)"


# ============================================================================
# Credential store
# ============================================================================
KEYRING_SERVICE = "adventofcode"
KEYRING_USERNAME = "session_id"

# Session id taken from the environment takes precedence over the keyring
SESSION_ENV_VAR = "AOC_SESSION"


# ============================================================================
# Calendar
# ============================================================================
AOC_TZ = timezone(timedelta(hours=-5), name="EST")

FIRST_DAY = 1
LAST_DAY = 25


def current_aoc_date(now: Optional[datetime] = None) -> date:
    """Return today's date in the puzzle time zone.

    Args:
        now: Aware datetime to convert (default: current UTC time)

    Returns:
        Calendar date in UTC-5
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(AOC_TZ).date()


# ============================================================================
# Cache location
# ============================================================================
CACHE_ENV_VAR = "AOC_CACHE_DIR"
CACHE_SUBDIR = "aoc"
FALLBACK_CACHE_DIR = Path("./aoc-cache")


def cache_dir() -> Path:
    """Resolve the directory holding downloaded puzzle inputs.

    Returns:
        AOC_CACHE_DIR if set, else $XDG_CACHE_HOME/aoc, else ~/.cache/aoc.
        Falls back to ./aoc-cache when no home directory can be determined.
    """
    explicit = os.environ.get(CACHE_ENV_VAR)
    if explicit:
        return Path(explicit)

    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg) / CACHE_SUBDIR

    try:
        return Path.home() / ".cache" / CACHE_SUBDIR
    except RuntimeError:
        logger.warning("couldn't locate cache directory, using %s", FALLBACK_CACHE_DIR)
        return FALLBACK_CACHE_DIR
