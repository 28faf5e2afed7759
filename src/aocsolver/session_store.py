"""session_store.py - Session id persistence in the platform credential store.

The Advent of Code session cookie is a long-lived secret. It is kept in the
OS keyring (Keychain, Secret Service, Windows Credential Locker) via the
``keyring`` package and prompted for when missing.
"""
from __future__ import annotations
import getpass
import logging
import os
from typing import Callable, Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from .config import KEYRING_SERVICE, KEYRING_USERNAME, SESSION_ENV_VAR
from .errors import SessionIdError

logger = logging.getLogger(__name__)

PROMPT = "Your Advent of Code session id: "


class SessionIdStore:
    """Read, prompt for and store the session id.

    Attributes:
        service: Keyring service name
        username: Keyring user name
    """

    def __init__(
        self,
        service: str = KEYRING_SERVICE,
        username: str = KEYRING_USERNAME,
        *,
        backend=keyring,
        read_secret: Callable[[str], str] = getpass.getpass,
    ):
        self.service = service
        self.username = username
        self._backend = backend
        self._read_secret = read_secret

    def prompt(self) -> str:
        """Ask for the session id (without echo) and store it.

        Returns:
            The entered session id

        Raises:
            SessionIdError: If the input is empty or cannot be stored
        """
        try:
            session_id = self._read_secret(PROMPT).strip()
        except (EOFError, KeyboardInterrupt) as e:
            raise SessionIdError("password input aborted") from e
        if not session_id:
            raise SessionIdError("session id must not be empty")
        try:
            self._backend.set_password(self.service, self.username, session_id)
        except KeyringError as e:
            raise SessionIdError(f"credential store: {e}") from e
        logger.info("Stored session id in credential store")
        return session_id

    def stored(self) -> Optional[str]:
        """Return the stored session id, or None if there is none."""
        try:
            return self._backend.get_password(self.service, self.username)
        except KeyringError as e:
            raise SessionIdError(f"credential store: {e}") from e

    def session_id(self) -> str:
        """Return the session id, prompting for it when none is stored.

        The environment variable AOC_SESSION takes precedence over the store.
        """
        from_env = os.environ.get(SESSION_ENV_VAR, "").strip()
        if from_env:
            logger.debug("Using session id from %s", SESSION_ENV_VAR)
            return from_env

        stored = self.stored()
        if stored:
            return stored
        logger.info("No session id stored yet")
        return self.prompt()

    def clear(self) -> None:
        """Remove the stored session id (a missing entry is not an error)."""
        try:
            self._backend.delete_password(self.service, self.username)
        except PasswordDeleteError:
            logger.debug("No stored session id to delete")
        except KeyringError as e:
            raise SessionIdError(f"credential store: {e}") from e
