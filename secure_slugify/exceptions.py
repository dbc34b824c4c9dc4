"""Package-specific exception types."""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    """Categories of conversion failure.

    Attributes:
        INVALID_INPUT: The input is not strictly well-formed UTF-8.
        BUFFER_EXCEEDED: The output would not fit the destination buffer.
        EMPTY_RESULT: Conversion produced no output bytes.
        ALLOCATION_FAILURE: The output buffer could not be allocated.
    """

    INVALID_INPUT = auto()
    BUFFER_EXCEEDED = auto()
    EMPTY_RESULT = auto()
    ALLOCATION_FAILURE = auto()


class Utf8Violation(Enum):
    """Reasons a byte sequence fails strict UTF-8 validation."""

    TRUNCATED = "truncated sequence"
    INVALID_LEAD = "invalid leading byte"
    INVALID_CONTINUATION = "invalid continuation byte"
    OVERLONG = "overlong encoding"
    SURROGATE = "surrogate code point"
    OUT_OF_RANGE = "code point out of range"
    NONCHARACTER = "noncharacter"


class SlugifyError(ValueError):
    """Base class for conversion errors.

    Every conversion failure is terminal for the call that raised it.
    """

    kind: ErrorKind


class InvalidInputError(SlugifyError):
    """Raised when the input is not strictly well-formed UTF-8.

    Args:
        offset: Zero-based byte offset of the offending sequence.
        reason: Which validity rule the sequence broke.
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, offset: int, reason: Utf8Violation):
        self.offset = offset
        self.reason = reason
        super().__init__(f"Invalid UTF-8 at byte {self.offset}: {self.reason.value}")


class BufferExceededError(SlugifyError):
    """Raised when a write would overflow the destination buffer.

    Args:
        capacity: Declared capacity of the buffer, terminator included.
        required: Capacity the pending write would need.
    """

    kind = ErrorKind.BUFFER_EXCEEDED

    def __init__(self, capacity: int, required: int):
        self.capacity = capacity
        self.required = required
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Output needs at least {self.required} bytes "
            f"but the buffer holds {self.capacity}"
        )


class EmptyResultError(SlugifyError):
    """Raised when nothing usable remains after conversion."""

    kind = ErrorKind.EMPTY_RESULT

    def __init__(self):
        super().__init__("Input produced an empty slug")


class AllocationError(SlugifyError):
    """Raised when the output buffer cannot be allocated.

    Args:
        size: Number of bytes requested.
    """

    kind = ErrorKind.ALLOCATION_FAILURE

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Unable to allocate an output buffer of {self.size} bytes")
