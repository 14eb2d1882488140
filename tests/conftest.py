"""Shared test fixtures and helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator

import pytest

from sentencekit.text.buffers import ScratchBufferPool


@pytest.fixture
def pool() -> ScratchBufferPool:
    return ScratchBufferPool()


async def aiter_tokens(items: list[str]) -> AsyncIterator[str]:
    for item in items:
        yield item


def squash(text: str) -> str:
    """Drop all whitespace so texts can be compared by content."""
    return "".join(text.split())


def content_counts(*parts: str) -> Counter[str]:
    return Counter(squash("".join(parts)))
