"""Shared fixtures: example inputs and an in-memory credential store."""
from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Tuple

import pytest
from keyring.errors import PasswordDeleteError

EXAMPLES_DIR = Path(__file__).parent / "examples"


def load_example(year: int, day: int, n: int = 1) -> str:
    """Read tests/examples/year<YYYY>/day<D>-<n>.example."""
    return (EXAMPLES_DIR / f"year{year}" / f"day{day}-{n}.example").read_text(encoding="utf-8")


class FakeKeyring:
    """Stand-in for the ``keyring`` module backed by a dict."""

    def __init__(self):
        self.passwords: Dict[Tuple[str, str], str] = {}

    def get_password(self, service: str, username: str) -> Optional[str]:
        return self.passwords.get((service, username))

    def set_password(self, service: str, username: str, password: str) -> None:
        self.passwords[(service, username)] = password

    def delete_password(self, service: str, username: str) -> None:
        if (service, username) not in self.passwords:
            raise PasswordDeleteError("not found")
        del self.passwords[(service, username)]


@pytest.fixture
def example():
    return load_example


@pytest.fixture
def fake_keyring() -> FakeKeyring:
    return FakeKeyring()


@pytest.fixture(autouse=True)
def _no_session_env(monkeypatch):
    monkeypatch.delenv("AOC_SESSION", raising=False)
