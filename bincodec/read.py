"""Readers that supply bytes to a decoder."""

from __future__ import annotations

from typing import Optional, Union

from .errors import UnexpectedEnd

__all__ = ["SliceReader"]

BytesLike = Union[bytes, bytearray, memoryview]


class SliceReader:
    """Reads from an in-memory buffer, front to back.

    ``take_bytes`` and ``peek_read`` return views into the buffer without
    copying; ``read`` returns a fresh ``bytes`` object.
    """

    __slots__ = ("_view", "_pos")

    def __init__(self, data: BytesLike) -> None:
        self._view = memoryview(data).cast("B")
        self._pos = 0

    @property
    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._view) - self._pos

    def __len__(self) -> int:
        return self.remaining

    def _split(self, n: int) -> memoryview:
        if n < 0:
            raise ValueError("byte count must not be negative")
        available = self.remaining
        if n > available:
            raise UnexpectedEnd(additional=n - available)
        chunk = self._view[self._pos : self._pos + n]
        self._pos += n
        return chunk

    def read(self, n: int) -> bytes:
        """Read exactly ``n`` bytes, or raise ``UnexpectedEnd``."""
        return bytes(self._split(n))

    def peek_read(self, n: int) -> Optional[memoryview]:
        """Return the next ``n`` bytes without consuming them, or None if short."""
        if n < 0 or n > self.remaining:
            return None
        return self._view[self._pos : self._pos + n]

    def consume(self, n: int) -> None:
        """Skip ``n`` bytes; skipping past the end leaves the reader empty."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        self._pos = min(self._pos + n, len(self._view))

    def take_bytes(self, length: int) -> memoryview:
        """Return a view of exactly ``length`` bytes, or raise ``UnexpectedEnd``."""
        return self._split(length)