"""Data models for secure-slugify."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_MAX_LENGTH, DEFAULT_SEPARATOR, TERMINATOR_SIZE
from .exceptions import BufferExceededError


@dataclass(frozen=True)
class SlugOptions:
    """Options recognized by a single conversion.

    Attributes:
        separator: Single ASCII character emitted between words.
        max_length: Maximum output length in bytes; 0 means unbounded.
        preserve_case: Keep ASCII case and pass non-ASCII bytes through
            verbatim instead of lowercasing and transliterating.
    """

    separator: str = DEFAULT_SEPARATOR
    max_length: int = DEFAULT_MAX_LENGTH
    preserve_case: bool = False

    @property
    def separator_byte(self) -> int:
        return ord(self.separator)


class OutputBuffer:
    """Fixed-capacity byte region a conversion writes into.

    The last byte of the capacity is reserved for the terminator, so at most
    ``capacity - 1`` content bytes fit. Writes that would not fit raise
    `BufferExceededError` and leave the buffer untouched.

    Args:
        capacity: Total size in bytes, terminator included. Must be >= 1.

    Examples:
        buffer = OutputBuffer(16)
        buffer.append(b"hello")
        buffer.getvalue()  # b"hello"
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError("`capacity` must be an integer")
        if capacity < TERMINATOR_SIZE:
            raise ValueError(f"`capacity` must be >= {TERMINATOR_SIZE}")
        self.capacity = capacity
        self._data = bytearray(capacity)
        self._length = 0

    def __len__(self) -> int:
        return self._length

    @property
    def remaining(self) -> int:
        """Content bytes that still fit before the terminator slot."""
        return self.capacity - TERMINATOR_SIZE - self._length

    @property
    def last_byte(self) -> int | None:
        if self._length == 0:
            return None
        return self._data[self._length - 1]

    def append(self, chunk: bytes) -> None:
        size = len(chunk)
        if size > self.remaining:
            raise BufferExceededError(self.capacity, self._length + size + TERMINATOR_SIZE)
        self._data[self._length : self._length + size] = chunk
        self._length += size

    def append_byte(self, value: int) -> None:
        if self.remaining < 1:
            raise BufferExceededError(self.capacity, self._length + 1 + TERMINATOR_SIZE)
        self._data[self._length] = value
        self._length += 1

    def drop_last(self) -> None:
        if self._length:
            self._length -= 1

    def terminate(self) -> None:
        self._data[self._length] = 0

    def getvalue(self, include_terminator: bool = False) -> bytes:
        """Return the content, followed by the terminator slot if requested."""
        end = self._length + TERMINATOR_SIZE if include_terminator else self._length
        return bytes(self._data[:end])
