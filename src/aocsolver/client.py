"""Advent of Code HTTP client

Overview
--------
Thin asynchronous client for downloading personal puzzle inputs. Inputs are
bound to the account, so every request carries the ``session`` cookie that
the website sets on login.

The client does not cache anything; ``InputCache`` decides when a download
is necessary and streams the chunks yielded by ``get_input`` to disk.

Errors
------
Non-2xx responses and transport failures are raised as ``AocClientError``
with the status code and response text where available.

Usage
-----
>>> async with AocClient("https://adventofcode.com/", session_id) as client:
...     async for chunk in client.get_input(2024, 1):
...         sink.write(chunk)
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

import httpx

from .config import HTTP_TIMEOUT, USER_AGENT
from .errors import AocClientError, SessionIdError

logger = logging.getLogger(__name__)


class AocClient:
    """HTTP client for the Advent of Code website.

    Responsibilities
    ----------------
    - Validate and normalise the base URL.
    - Authenticate requests with the session cookie.
    - Stream puzzle inputs and map failures to ``AocClientError``.
    """

    def __init__(
        self,
        base_url: str,
        session_id: str,
        *,
        timeout: float = HTTP_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Create a client.

        Args:
            base_url: Website root (e.g., ``https://adventofcode.com/``).
            session_id: Value of the ``session`` cookie.
            timeout: Default HTTP timeout for the internal client.
            client: Optional preconfigured ``httpx.AsyncClient`` to use. It is
                not closed by ``aclose``.
        """
        url = httpx.URL(base_url)
        if not url.scheme or not url.host:
            raise ValueError(f"base URL is not a valid base: {base_url!r}")
        if not url.path.endswith("/"):
            url = url.copy_with(path=url.path + "/")
        self.base_url = url

        self._headers = {
            "Cookie": f"session={_validate_session_id(session_id)}",
            "User-Agent": USER_AGENT,
        }
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def input_url(self, year: int, day: int) -> httpx.URL:
        """Return the URL of the puzzle input for ``year``/``day``."""
        return self.base_url.join(f"{year}/day/{day}/input")

    async def get_input(self, year: int, day: int) -> AsyncIterator[bytes]:
        """Stream the puzzle input.

        Args:
            year: Contest year.
            day: Day of the advent calendar.

        Yields:
            Chunks of the response body.

        Raises:
            AocClientError: On transport failure or non-2xx status.
        """
        url = self.input_url(year, day)
        logger.info("Downloading input for %d, day %d", year, day)
        try:
            async with self._client.stream("GET", url, headers=self._headers) as response:
                if response.is_error:
                    body = (await response.aread()).decode("utf-8", errors="replace")
                    raise AocClientError(
                        f"HTTP GET {url} failed with status {response.status_code}",
                        status_code=response.status_code,
                        details=body.strip(),
                    )
                async for chunk in response.aiter_bytes():
                    yield chunk
        except httpx.HTTPError as e:
            raise AocClientError(f"HTTP GET {url} failed: {e}") from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AocClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _validate_session_id(session_id: str) -> str:
    session_id = session_id.strip()
    if not session_id:
        raise SessionIdError("session ID is empty")
    try:
        session_id.encode("ascii")
    except UnicodeEncodeError as e:
        raise SessionIdError("invalid bytes in session ID") from e
    if any(ord(c) < 0x20 or c in ";," for c in session_id):
        raise SessionIdError("invalid bytes in session ID")
    return session_id
