"""
Input cache - Downloaded puzzle inputs stored on disk.

Inputs never change once published, so each one is downloaded at most once
and then read from the cache directory.

Cache structure:
    <cache_dir>/2023-01
    <cache_dir>/2023-02
    ...

Downloads are streamed into a temporary file next to the target and renamed
into place once complete, so an interrupted download never leaves a partial
entry behind.
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import AsyncIterator, Callable, Dict, Iterable, List, Optional

from .types import InputKey

logger = logging.getLogger(__name__)

Fetch = Callable[[InputKey], AsyncIterator[bytes]]

_PARTIAL_SUFFIX = ".part"


class InputCache:
    """File cache keyed by InputKey, populated on demand by ``fetch``."""

    def __init__(self, directory: Path, fetch: Fetch):
        """
        Args:
            directory: Directory holding cached inputs (created if missing)
            fetch: Callable returning an async iterator of input chunks
        """
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self._fetch = fetch

    def path_for(self, key: InputKey) -> Path:
        """
        Get cache file path for an input.

        Args:
            key: Puzzle identifier

        Returns:
            Path to the cache file (may not exist yet)
        """
        return self.directory / key.serialize()

    async def get(self, key: InputKey) -> str:
        """
        Load an input, downloading it first on a cache miss.

        Args:
            key: Puzzle identifier

        Returns:
            Input text
        """
        path = self.path_for(key)
        if not path.exists():
            logger.debug("Cache miss for %s", key.serialize())
            await self.populate(key, path)
        else:
            logger.debug("Cache hit for %s", key.serialize())
        return path.read_bytes().decode("utf-8")

    async def get_many(self, keys: Iterable[InputKey]) -> Dict[InputKey, str]:
        """
        Load several inputs, downloading missing ones concurrently.

        Args:
            keys: Puzzle identifiers

        Returns:
            Dict mapping each key to its input text
        """
        keys = list(dict.fromkeys(keys))
        texts = await asyncio.gather(*(self.get(key) for key in keys))
        return dict(zip(keys, texts))

    async def populate(self, key: InputKey, path: Path) -> None:
        """
        Stream the fetched input into ``path``.

        Args:
            key: Puzzle identifier
            path: Destination cache file
        """
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=_PARTIAL_SUFFIX, dir=self.directory
        )
        try:
            with os.fdopen(fd, "wb") as sink:
                async for chunk in self._fetch(key):
                    sink.write(chunk)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("Cached input %s at %s", key.serialize(), path)

    def invalidate(self, key: Optional[InputKey] = None) -> int:
        """
        Invalidate (delete) cached inputs.

        Args:
            key: Optional puzzle identifier. If None, invalidates all inputs.

        Returns:
            Number of cache files deleted
        """
        if not self.directory.exists():
            return 0

        if key is not None:
            targets = [self.path_for(key)]
        else:
            targets = self._entries()

        count = 0
        for cache_file in targets:
            if cache_file.exists():
                cache_file.unlink()
                count += 1
        return count

    def stats(self) -> Dict:
        """
        Get statistics about cache usage.

        Returns:
            Dict with directory, number of cached inputs and their total size
        """
        files = self._entries()
        return {
            "directory": str(self.directory),
            "num_inputs": len(files),
            "total_size_bytes": sum(f.stat().st_size for f in files),
        }

    def _entries(self) -> List[Path]:
        """Cached input files, excluding downloads still in progress."""
        return [
            p for p in self.directory.iterdir()
            if p.is_file() and not p.name.endswith(_PARTIAL_SUFFIX)
        ]
