from __future__ import annotations

import pytest

from secure_slugify.transliteration import TRANSLITERATION_TABLE, transliterate


def test_table_is_strictly_sorted():
    code_points = [code_point for code_point, _ in TRANSLITERATION_TABLE]
    assert code_points == sorted(set(code_points))


def test_table_replacements_are_ascii():
    for code_point, replacement in TRANSLITERATION_TABLE:
        assert replacement.isascii(), hex(code_point)


def test_table_has_no_alphanumeric_ascii_keys():
    for code_point, _ in TRANSLITERATION_TABLE:
        if code_point < 0x80:
            assert not chr(code_point).isalnum()


@pytest.mark.parametrize(
    ("code_point", "expected"),
    [
        (0x24, "dollar"),
        (0x26, "and"),
        (0x7C, "or"),
        (0xE9, "e"),
        (0xDF, "ss"),
        (0xF1, "n"),
        (0x3A9, "W"),
        (0x416, "Zh"),
        (0x44C, ""),
        (0x62E, "kh"),
        (0x10D0, "a"),
        (0x1EA1, "a"),
        (0x20AC, "euro"),
        (0x2122, "tm"),
        (0xFDFC, "rial"),
    ],
)
def test_transliterate_known_code_points(code_point: int, expected: str):
    assert transliterate(code_point) == expected


@pytest.mark.parametrize("code_point", [0x00, 0x41, 0x2D, 0x5F, 0x1F600, 0x65E5, 0x10FFFF])
def test_transliterate_unknown_code_points(code_point: int):
    assert transliterate(code_point) is None


def test_transliterate_finds_first_and_last_entries():
    first_code_point, first_replacement = TRANSLITERATION_TABLE[0]
    last_code_point, last_replacement = TRANSLITERATION_TABLE[-1]

    assert transliterate(first_code_point) == first_replacement
    assert transliterate(last_code_point) == last_replacement
    assert transliterate(first_code_point - 1) is None
    assert transliterate(last_code_point + 1) is None
