"""Tests for the on-disk input cache."""
from __future__ import annotations
from collections import Counter

import pytest

from aocsolver.cache import InputCache
from aocsolver.errors import AocClientError
from aocsolver.types import InputKey


class FakeFetch:
    """Serves inputs from memory and counts downloads."""

    def __init__(self, fail_after_first_chunk: bool = False):
        self.calls = Counter()
        self.fail_after_first_chunk = fail_after_first_chunk

    async def __call__(self, key: InputKey):
        self.calls[key] += 1
        yield f"input {key.year} ".encode()
        if self.fail_after_first_chunk:
            raise AocClientError("connection dropped")
        yield f"day {key.day}\n".encode()


@pytest.mark.asyncio
async def test_miss_downloads_once(tmp_path):
    fetch = FakeFetch()
    cache = InputCache(tmp_path / "inputs", fetch)
    key = InputKey(2024, 3)

    assert await cache.get(key) == "input 2024 day 3\n"
    assert await cache.get(key) == "input 2024 day 3\n"
    assert fetch.calls[key] == 1
    assert cache.path_for(key) == tmp_path / "inputs" / "2024-03"


@pytest.mark.asyncio
async def test_get_many_deduplicates(tmp_path):
    fetch = FakeFetch()
    cache = InputCache(tmp_path, fetch)
    keys = [InputKey(2023, 1), InputKey(2023, 2), InputKey(2023, 1)]

    inputs = await cache.get_many(keys)

    assert list(inputs) == [InputKey(2023, 1), InputKey(2023, 2)]
    assert inputs[InputKey(2023, 2)] == "input 2023 day 2\n"
    assert sum(fetch.calls.values()) == 2


@pytest.mark.asyncio
async def test_failed_download_leaves_no_file(tmp_path):
    cache = InputCache(tmp_path, FakeFetch(fail_after_first_chunk=True))
    key = InputKey(2025, 1)

    with pytest.raises(AocClientError):
        await cache.get(key)

    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_invalidate_and_stats(tmp_path):
    cache = InputCache(tmp_path, FakeFetch())
    await cache.get_many([InputKey(2023, 1), InputKey(2023, 2), InputKey(2024, 1)])

    stats = cache.stats()
    assert stats["num_inputs"] == 3
    assert stats["total_size_bytes"] == 3 * len("input 2023 day 1\n")

    assert cache.invalidate(InputKey(2023, 2)) == 1
    assert cache.invalidate(InputKey(2023, 2)) == 0
    assert cache.invalidate() == 2
    assert cache.stats()["num_inputs"] == 0


def test_partial_downloads_are_not_entries(tmp_path):
    cache = InputCache(tmp_path, FakeFetch())
    (tmp_path / "2024-01").write_text("1 2\n", encoding="utf-8")
    partial = tmp_path / ".2024-02.abc123.part"
    partial.write_text("half", encoding="utf-8")

    assert cache.stats()["num_inputs"] == 1
    assert cache.invalidate() == 1
    assert partial.exists()
    assert cache.stats()["num_inputs"] == 0
