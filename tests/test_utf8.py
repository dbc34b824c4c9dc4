from __future__ import annotations

import pytest

from secure_slugify.exceptions import InvalidInputError, Utf8Violation
from secure_slugify.utf8 import (
    decode_secure,
    decode_trusted,
    is_noncharacter,
    is_valid_utf8,
    iter_code_points,
    sequence_length,
    validate_utf8,
)


@pytest.mark.parametrize(
    ("lead", "expected"),
    [
        (0x00, 1),
        (0x41, 1),
        (0x7F, 1),
        (0x80, 0),
        (0xBF, 0),
        (0xC2, 2),
        (0xDF, 2),
        (0xE0, 3),
        (0xEF, 3),
        (0xF0, 4),
        (0xF7, 4),
        (0xF8, 0),
        (0xFF, 0),
    ],
)
def test_sequence_length(lead: int, expected: int):
    assert sequence_length(lead) == expected


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"A", (0x41, 1)),
        (b"\xc2\x80", (0x80, 2)),
        (b"\xc3\xb1", (0xF1, 2)),
        (b"\xdf\xbf", (0x7FF, 2)),
        (b"\xe0\xa0\x80", (0x800, 3)),
        (b"\xe2\x82\xac", (0x20AC, 3)),
        (b"\xed\x9f\xbf", (0xD7FF, 3)),
        (b"\xee\x80\x80", (0xE000, 3)),
        (b"\xef\xb7\x8f", (0xFDCF, 3)),
        (b"\xef\xb7\xb0", (0xFDF0, 3)),
        (b"\xef\xbf\xbd", (0xFFFD, 3)),
        (b"\xf0\x90\x80\x80", (0x10000, 4)),
        (b"\xf0\x9f\x98\x80", (0x1F600, 4)),
        (b"\xf4\x8f\xbf\xbd", (0x10FFFD, 4)),
    ],
)
def test_decode_secure_accepts_boundary_values(data: bytes, expected: tuple[int, int]):
    assert decode_secure(data) == expected
    assert decode_trusted(data) == expected


def test_decode_secure_honours_offset():
    assert decode_secure(b"a\xc3\xb1b", 1) == (0xF1, 2)


@pytest.mark.parametrize(
    ("data", "reason"),
    [
        (b"\x80", Utf8Violation.INVALID_LEAD),
        (b"\xbf", Utf8Violation.INVALID_LEAD),
        (b"\xf8\x88\x80\x80\x80", Utf8Violation.INVALID_LEAD),
        (b"\xff", Utf8Violation.INVALID_LEAD),
        (b"\xc3", Utf8Violation.TRUNCATED),
        (b"\xe2\x82", Utf8Violation.TRUNCATED),
        (b"\xf0\x9f\x98", Utf8Violation.TRUNCATED),
        (b"\xc3\x41", Utf8Violation.INVALID_CONTINUATION),
        (b"\xe2\x28\xa1", Utf8Violation.INVALID_CONTINUATION),
        (b"\xf0\x9f\xc0\x80", Utf8Violation.INVALID_CONTINUATION),
        (b"\xc0\x80", Utf8Violation.OVERLONG),
        (b"\xc1\xbf", Utf8Violation.OVERLONG),
        (b"\xe0\x9f\xbf", Utf8Violation.OVERLONG),
        (b"\xf0\x8f\xbf\xbf", Utf8Violation.OVERLONG),
        (b"\xed\xa0\x80", Utf8Violation.SURROGATE),
        (b"\xed\xbf\xbf", Utf8Violation.SURROGATE),
        (b"\xf4\x90\x80\x80", Utf8Violation.OUT_OF_RANGE),
        (b"\xf7\xbf\xbf\xbf", Utf8Violation.OUT_OF_RANGE),
        (b"\xef\xb7\x90", Utf8Violation.NONCHARACTER),
        (b"\xef\xb7\xaf", Utf8Violation.NONCHARACTER),
        (b"\xef\xbf\xbe", Utf8Violation.NONCHARACTER),
        (b"\xef\xbf\xbf", Utf8Violation.NONCHARACTER),
        (b"\xf0\x9f\xbf\xbf", Utf8Violation.NONCHARACTER),
        (b"\xf4\x8f\xbf\xbe", Utf8Violation.NONCHARACTER),
    ],
)
def test_decode_secure_rejects_invalid_sequences(data: bytes, reason: Utf8Violation):
    with pytest.raises(InvalidInputError) as excinfo:
        decode_secure(data)

    assert excinfo.value.reason is reason
    assert excinfo.value.offset == 0


@pytest.mark.parametrize(
    ("code_point", "expected"),
    [
        (0xFDCF, False),
        (0xFDD0, True),
        (0xFDEF, True),
        (0xFDF0, False),
        (0xFFFD, False),
        (0xFFFE, True),
        (0xFFFF, True),
        (0x1FFFE, True),
        (0x10FFFF, True),
        (0x41, False),
    ],
)
def test_is_noncharacter(code_point: int, expected: bool):
    assert is_noncharacter(code_point) is expected


def test_validate_utf8_reports_offset_of_first_bad_sequence():
    with pytest.raises(InvalidInputError) as excinfo:
        validate_utf8(b"hello\xc0\x80world")

    assert excinfo.value.offset == 5
    assert excinfo.value.reason is Utf8Violation.OVERLONG
    assert "byte 5" in str(excinfo.value)


def test_validate_utf8_accepts_empty_input():
    validate_utf8(b"")


def test_validate_utf8_accepts_mixed_scripts():
    validate_utf8("Grüße, Привет, Γειά, 日本, 😀".encode("utf-8"))


def test_is_valid_utf8():
    assert is_valid_utf8("café".encode("utf-8"))
    assert not is_valid_utf8(b"caf\xe9")
    assert not is_valid_utf8(b"\xc3\xb1\xc0\xaf\x41")


def test_iter_code_points_yields_offsets_and_lengths():
    data = "a€😀ñ".encode("utf-8")

    assert list(iter_code_points(data)) == [
        (0, 0x61, 1),
        (1, 0x20AC, 3),
        (4, 0x1F600, 4),
        (8, 0xF1, 2),
    ]
