"""Reusable scratch buffers for the extractors."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterable, Iterator
from contextlib import contextmanager


class ScratchBuffer:
    """Append-only code-point accumulator that is emptied, not reallocated, on reuse.

    ``capacity_hint`` records the largest growth hint seen over the buffer's
    lifetime; the underlying list keeps its storage across :meth:`clear`.
    """

    __slots__ = ("_parts", "capacity_hint")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.capacity_hint = 0

    def append(self, text: str) -> None:
        self._parts.append(text)

    def extend(self, items: Iterable[str]) -> None:
        self._parts.extend(items)

    def clear(self) -> None:
        self._parts.clear()

    def reserve(self, size_hint: int) -> None:
        if size_hint > self.capacity_hint:
            self.capacity_hint = size_hint

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)


class ScratchBufferPool:
    """Thread-safe pool of :class:`ScratchBuffer` instances.

    A borrowed buffer is owned exclusively by the caller until released.
    Idle buffers beyond *max_idle* are dropped on release so a burst of
    concurrent sessions does not pin memory forever.

    Usage::

        with pool.borrow(size_hint=200) as buf:
            buf.append("...")
    """

    def __init__(self, max_idle: int = 64) -> None:
        self._idle: deque[ScratchBuffer] = deque()
        self._borrowed: set[int] = set()
        self._max_idle = max_idle
        self._lock = threading.Lock()

    def acquire(self, size_hint: int = 0) -> ScratchBuffer:
        """Borrow an empty buffer, reserving room for *size_hint* code points."""
        with self._lock:
            buf = self._idle.pop() if self._idle else ScratchBuffer()
            self._borrowed.add(id(buf))
        buf.clear()
        buf.reserve(size_hint)
        return buf

    def release(self, buffer: ScratchBuffer) -> None:
        """Return a borrowed buffer to the pool."""
        with self._lock:
            key = id(buffer)
            if key not in self._borrowed:
                raise ValueError("Buffer was not borrowed from this pool")
            self._borrowed.discard(key)
            buffer.clear()
            if len(self._idle) < self._max_idle:
                self._idle.append(buffer)

    @contextmanager
    def borrow(self, size_hint: int = 0) -> Iterator[ScratchBuffer]:
        """Borrow a buffer for the duration of a ``with`` block."""
        buf = self.acquire(size_hint)
        try:
            yield buf
        finally:
            self.release(buf)

    @property
    def idle(self) -> int:
        """Number of buffers waiting to be reused."""
        return len(self._idle)

    @property
    def borrowed(self) -> int:
        """Number of buffers currently lent out."""
        return len(self._borrowed)


default_pool = ScratchBufferPool()
