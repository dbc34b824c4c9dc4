from dataclasses import FrozenInstanceError

import pytest

from secure_slugify.exceptions import BufferExceededError, ErrorKind
from secure_slugify.models import OutputBuffer, SlugOptions


def test_error_kind_members():
    assert list(ErrorKind) == [
        ErrorKind.INVALID_INPUT,
        ErrorKind.BUFFER_EXCEEDED,
        ErrorKind.EMPTY_RESULT,
        ErrorKind.ALLOCATION_FAILURE,
    ]


def test_slug_options_defaults():
    options = SlugOptions()

    assert options.separator == "-"
    assert options.max_length == 0
    assert options.preserve_case is False
    assert options.separator_byte == 0x2D


def test_slug_options_are_immutable():
    options = SlugOptions()

    with pytest.raises(FrozenInstanceError):
        options.separator = "_"  # type: ignore[misc]


def test_output_buffer_reserves_terminator_slot():
    buffer = OutputBuffer(4)

    assert buffer.remaining == 3
    buffer.append(b"abc")
    assert buffer.remaining == 0
    assert buffer.getvalue() == b"abc"
    buffer.terminate()
    assert buffer.getvalue() == b"abc"
    assert buffer.getvalue(include_terminator=True) == b"abc\x00"


def test_output_buffer_terminate_writes_nul_after_content():
    buffer = OutputBuffer(4)
    buffer.append(b"abc")
    buffer.drop_last()
    buffer.drop_last()

    buffer.terminate()

    assert buffer.getvalue(include_terminator=True) == b"a\x00"
    assert buffer.getvalue() == b"a"
    assert buffer.remaining == 2


def test_output_buffer_rejects_overflow_without_writing():
    buffer = OutputBuffer(4)
    buffer.append(b"ab")

    with pytest.raises(BufferExceededError) as excinfo:
        buffer.append(b"cd")

    assert excinfo.value.capacity == 4
    assert excinfo.value.required == 5
    assert buffer.getvalue() == b"ab"

    buffer.append_byte(ord("c"))
    with pytest.raises(BufferExceededError):
        buffer.append_byte(ord("d"))
    assert buffer.getvalue() == b"abc"


def test_output_buffer_last_byte_and_drop_last():
    buffer = OutputBuffer(8)

    assert buffer.last_byte is None
    buffer.drop_last()
    assert len(buffer) == 0

    buffer.append(b"a-")
    assert buffer.last_byte == ord("-")
    buffer.drop_last()
    assert buffer.getvalue() == b"a"
    assert buffer.last_byte == ord("a")


@pytest.mark.parametrize("capacity", [0, -1])
def test_output_buffer_rejects_non_positive_capacity(capacity: int):
    with pytest.raises(ValueError):
        OutputBuffer(capacity)


@pytest.mark.parametrize("capacity", [True, 2.5, "8"])
def test_output_buffer_rejects_non_integer_capacity(capacity):
    with pytest.raises(TypeError):
        OutputBuffer(capacity)
