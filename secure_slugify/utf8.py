"""Strict UTF-8 validation and decoding.

Two decoders are provided. `decode_secure` enforces every validity rule and
is used for the whole-input validation pass; `decode_trusted` skips all
checks and must only see bytes that already passed `validate_utf8`.
"""

from __future__ import annotations

from collections.abc import Iterator

from .constants import (
    MIN_CODE_POINT_BY_LENGTH,
    NONCHARACTER_BLOCK_END,
    NONCHARACTER_BLOCK_START,
    SURROGATE_END,
    SURROGATE_START,
    UNICODE_MAX_CODE_POINT,
)
from .exceptions import InvalidInputError, Utf8Violation

# Payload bits carried by the leading byte, keyed by sequence length
_LEAD_PAYLOAD_MASKS = {1: 0x7F, 2: 0x1F, 3: 0x0F, 4: 0x07}


def sequence_length(lead: int) -> int:
    """Return the sequence length declared by a leading byte.

    Args:
        lead: First byte of a UTF-8 sequence.

    Returns:
        int: 1 to 4, or 0 when the byte cannot start a sequence (a stray
            continuation byte or ``0xF8``-``0xFF``).

    Examples:
        sequence_length(0x41)  # 1
        sequence_length(0xE2)  # 3
        sequence_length(0x80)  # 0
    """
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


def is_noncharacter(code_point: int) -> bool:
    """Check whether a code point is a Unicode noncharacter.

    Covers ``U+FDD0``-``U+FDEF`` and every code point whose low 16 bits are
    ``0xFFFE`` or ``0xFFFF``.
    """
    if NONCHARACTER_BLOCK_START <= code_point <= NONCHARACTER_BLOCK_END:
        return True
    return code_point & 0xFFFE == 0xFFFE


def decode_secure(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode one code point, enforcing strict UTF-8 rules.

    Rejects invalid leading bytes, truncated sequences, malformed
    continuation bytes, overlong encodings, surrogates, code points above
    ``U+10FFFF``, and noncharacters.

    Args:
        data: Byte sequence to read from.
        offset: Index of the leading byte. Must be within `data`.

    Returns:
        tuple[int, int]: The decoded code point and the number of bytes
            consumed.

    Raises:
        InvalidInputError: If the sequence at `offset` breaks any rule.

    Examples:
        decode_secure(b"\\xc3\\xb1")  # (0xF1, 2)
        decode_secure(b"\\xc0\\xaf")  # raises InvalidInputError (overlong "/")
    """
    lead = data[offset]
    length = sequence_length(lead)
    if length == 0:
        raise InvalidInputError(offset, Utf8Violation.INVALID_LEAD)
    if offset + length > len(data):
        raise InvalidInputError(offset, Utf8Violation.TRUNCATED)

    code_point = lead & _LEAD_PAYLOAD_MASKS[length]
    for index in range(offset + 1, offset + length):
        byte = data[index]
        if byte & 0xC0 != 0x80:
            raise InvalidInputError(offset, Utf8Violation.INVALID_CONTINUATION)
        code_point = (code_point << 6) | (byte & 0x3F)

    if code_point < MIN_CODE_POINT_BY_LENGTH[length]:
        raise InvalidInputError(offset, Utf8Violation.OVERLONG)
    if code_point > UNICODE_MAX_CODE_POINT:
        raise InvalidInputError(offset, Utf8Violation.OUT_OF_RANGE)
    if SURROGATE_START <= code_point <= SURROGATE_END:
        raise InvalidInputError(offset, Utf8Violation.SURROGATE)
    if is_noncharacter(code_point):
        raise InvalidInputError(offset, Utf8Violation.NONCHARACTER)

    return code_point, length


def decode_trusted(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode one code point from input that already passed validation.

    Performs no checks; results for unvalidated input are undefined.
    """
    lead = data[offset]
    if lead < 0x80:
        return lead, 1

    length = sequence_length(lead)
    code_point = lead & _LEAD_PAYLOAD_MASKS[length]
    for byte in data[offset + 1 : offset + length]:
        code_point = (code_point << 6) | (byte & 0x3F)
    return code_point, length


def validate_utf8(data: bytes) -> None:
    """Validate a complete byte sequence.

    Args:
        data: Input bytes.

    Returns:
        None.

    Raises:
        InvalidInputError: At the first sequence that fails `decode_secure`.

    Examples:
        validate_utf8("café".encode())
        validate_utf8(b"hello\\xc0\\x80world")  # raises InvalidInputError
    """
    offset = 0
    size = len(data)
    while offset < size:
        if data[offset] < 0x80:
            offset += 1
            continue
        _, consumed = decode_secure(data, offset)
        offset += consumed


def is_valid_utf8(data: bytes) -> bool:
    try:
        validate_utf8(data)
    except InvalidInputError:
        return False
    return True


def iter_code_points(data: bytes) -> Iterator[tuple[int, int, int]]:
    """Yield ``(offset, code_point, consumed)`` for validated input."""
    offset = 0
    size = len(data)
    while offset < size:
        code_point, consumed = decode_trusted(data, offset)
        yield offset, code_point, consumed
        offset += consumed
