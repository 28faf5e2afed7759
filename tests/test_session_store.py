"""Tests for session id storage."""
from __future__ import annotations

import pytest
from keyring.errors import KeyringError

from aocsolver.errors import SessionIdError
from aocsolver.session_store import SessionIdStore


def _store(backend, answer="secret-cookie"):
    prompts = []

    def read_secret(prompt: str) -> str:
        prompts.append(prompt)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    return SessionIdStore("test-service", "test-user", backend=backend, read_secret=read_secret), prompts


def test_prompts_and_stores_when_missing(fake_keyring):
    store, prompts = _store(fake_keyring, "  secret-cookie \n")
    assert store.session_id() == "secret-cookie"
    assert len(prompts) == 1
    assert fake_keyring.passwords[("test-service", "test-user")] == "secret-cookie"


def test_uses_stored_value_without_prompting(fake_keyring):
    fake_keyring.set_password("test-service", "test-user", "stored-cookie")
    store, prompts = _store(fake_keyring)
    assert store.session_id() == "stored-cookie"
    assert prompts == []


def test_environment_takes_precedence(fake_keyring, monkeypatch):
    fake_keyring.set_password("test-service", "test-user", "stored-cookie")
    monkeypatch.setenv("AOC_SESSION", "env-cookie")
    store, _ = _store(fake_keyring)
    assert store.session_id() == "env-cookie"


@pytest.mark.parametrize("answer", ["", "   ", EOFError(), KeyboardInterrupt()])
def test_prompt_rejects_empty_or_aborted_input(fake_keyring, answer):
    store, _ = _store(fake_keyring, answer)
    with pytest.raises(SessionIdError):
        store.prompt()
    assert fake_keyring.passwords == {}


def test_clear_is_idempotent(fake_keyring):
    store, _ = _store(fake_keyring)
    store.prompt()
    store.clear()
    store.clear()
    assert store.stored() is None


def test_backend_failure_is_reported(fake_keyring):
    class BrokenKeyring:
        def get_password(self, service, username):
            raise KeyringError("no backend available")

    store, _ = _store(BrokenKeyring())
    with pytest.raises(SessionIdError, match="no backend available"):
        store.stored()
