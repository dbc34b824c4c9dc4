from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from secure_slugify.exceptions import EmptyResultError, InvalidInputError, SlugifyError
from secure_slugify.models import SlugOptions
from secure_slugify.slugify import convert, estimate_length, generate_slug
from secure_slugify.utf8 import decode_secure, is_noncharacter, is_valid_utf8, iter_code_points

SEPARATORS = st.sampled_from(list("-_.~+ "))


@given(st.text())
def test_slug_is_ascii_lowercase_and_well_separated(title: str):
    try:
        slug = generate_slug(title)
    except (EmptyResultError, InvalidInputError):
        return

    assert slug
    slug.encode("ascii")
    assert slug == slug.lower()
    assert not slug.startswith("-")
    assert not slug.endswith("-")
    assert "--" not in slug
    assert set(slug) <= set(string.ascii_lowercase + string.digits + "-")


@given(st.text())
def test_generate_slug_is_idempotent(title: str):
    try:
        slug = generate_slug(title)
    except SlugifyError:
        return

    assert generate_slug(slug) == slug


UNMAPPED_SYMBOLS = "".join(char for char in string.punctuation if char not in "$%&<>|")


@given(st.text(alphabet=UNMAPPED_SYMBOLS + " \t\n"))
def test_symbol_only_titles_are_empty(title: str):
    with pytest.raises(EmptyResultError):
        generate_slug(title)


@given(st.binary(max_size=64))
def test_validator_agrees_with_strict_codec(data: bytes):
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        expected = False
    else:
        expected = not any(is_noncharacter(ord(char)) for char in text)

    assert is_valid_utf8(data) is expected


@given(st.text())
def test_valid_text_round_trips_through_decoder(text: str):
    data = text.encode("utf-8")
    if any(is_noncharacter(ord(char)) for char in text):
        return

    assert [code_point for _, code_point, _ in iter_code_points(data)] == [ord(c) for c in text]
    offset = 0
    for char in text:
        code_point, consumed = decode_secure(data, offset)
        assert code_point == ord(char)
        offset += consumed


@given(st.binary(max_size=64), SEPARATORS, st.integers(0, 16), st.booleans())
def test_convert_never_fails_unexpectedly(
    data: bytes, separator: str, max_length: int, preserve_case: bool
):
    options = SlugOptions(separator=separator, max_length=max_length, preserve_case=preserve_case)
    try:
        slug = convert(data, options)
    except (EmptyResultError, InvalidInputError):
        return

    assert slug
    assert is_valid_utf8(slug)
    assert len(slug) < estimate_length(data, options)
    if max_length:
        assert len(slug) <= max_length
    assert not slug.endswith(separator.encode("ascii"))
    assert not slug.startswith(separator.encode("ascii"))


@given(st.text(), st.integers(1, 32))
def test_max_length_result_is_prefix_of_unbounded(title: str, max_length: int):
    try:
        full = generate_slug(title)
        truncated = generate_slug(title, max_length=max_length)
    except SlugifyError:
        return

    assert full.startswith(truncated)
    assert len(truncated) <= max_length
