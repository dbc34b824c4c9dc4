"""Slug generation from raw UTF-8 bytes.

Conversion runs in two passes over the input. The first validates the whole
byte sequence and computes a worst-case output size; the second decodes
without checks and writes into a buffer of exactly that size.
"""

from __future__ import annotations

from .config import validate_options
from .constants import ASCII_ALPHANUMERIC, SEPARATOR_TRIGGERS, TERMINATOR_SIZE
from .exceptions import AllocationError, EmptyResultError
from .models import OutputBuffer, SlugOptions
from .transliteration import transliterate
from .utf8 import iter_code_points, validate_utf8


def _fold(byte: int) -> int:
    if 0x41 <= byte <= 0x5A:
        return byte | 0x20
    return byte


class _SlugWriter:
    """Apply emission rules against a bounded buffer."""

    def __init__(self, buffer: OutputBuffer, options: SlugOptions):
        self.buffer = buffer
        self.separator = options.separator_byte
        self.max_length = options.max_length
        self.preserve_case = options.preserve_case

    @property
    def full(self) -> bool:
        return self.max_length > 0 and len(self.buffer) >= self.max_length

    def write_char(self, byte: int) -> None:
        self.buffer.append_byte(byte if self.preserve_case else _fold(byte))

    def write_separator(self) -> None:
        # Never leading, never doubled
        last = self.buffer.last_byte
        if last is not None and last != self.separator:
            self.buffer.append_byte(self.separator)

    def write_replacement(self, replacement: str) -> None:
        for byte in replacement.encode("ascii"):
            if self.full:
                return
            if byte in ASCII_ALPHANUMERIC:
                self.write_char(byte)
            else:
                self.write_separator()

    def write_ascii(self, byte: int) -> None:
        if byte in ASCII_ALPHANUMERIC:
            self.write_char(byte)
            return
        replacement = transliterate(byte)
        if replacement is not None:
            self.write_replacement(replacement)
        elif byte in SEPARATOR_TRIGGERS:
            self.write_separator()

    def write_raw(self, chunk: bytes) -> bool:
        """Copy an encoded sequence verbatim; False once it would pass max_length."""
        if self.max_length > 0 and len(self.buffer) + len(chunk) > self.max_length:
            return False
        self.buffer.append(chunk)
        return True

    def finish(self) -> int:
        if self.buffer.last_byte == self.separator:
            self.buffer.drop_last()
        if not len(self.buffer):
            raise EmptyResultError()
        self.buffer.terminate()
        return len(self.buffer)


def _estimate(data: bytes, options: SlugOptions) -> int:
    estimated = 0
    for _, code_point, consumed in iter_code_points(data):
        if code_point < 0x80:
            if code_point in ASCII_ALPHANUMERIC:
                estimated += 1
                continue
            replacement = transliterate(code_point)
            if replacement is not None:
                estimated += len(replacement)
            elif code_point in SEPARATOR_TRIGGERS:
                estimated += 1
        elif options.preserve_case:
            estimated += consumed
        else:
            replacement = transliterate(code_point)
            if replacement is not None:
                estimated += len(replacement)
    return estimated + TERMINATOR_SIZE


def _write_slug(data: bytes, buffer: OutputBuffer, options: SlugOptions) -> int:
    writer = _SlugWriter(buffer, options)
    for offset, code_point, consumed in iter_code_points(data):
        if writer.full:
            break
        if code_point < 0x80:
            writer.write_ascii(code_point)
        elif options.preserve_case:
            if not writer.write_raw(data[offset : offset + consumed]):
                break
        else:
            replacement = transliterate(code_point)
            if replacement:
                writer.write_replacement(replacement)
    return writer.finish()


def _check_input(data: bytes) -> None:
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object; use `generate_slug()` for text")


def estimate_length(data: bytes, options: SlugOptions | None = None) -> int:
    """Compute the worst-case buffer capacity a conversion needs.

    ASCII alphanumerics, whitespace, and punctuation cost one byte each, a
    transliteration costs the length of its replacement, a verbatim
    sequence costs its encoded length, and dropped characters cost nothing.
    One byte is added for the terminator.

    Args:
        data: Input bytes.
        options: Conversion options. Defaults to `SlugOptions()`.

    Returns:
        int: Capacity in bytes, terminator included.

    Raises:
        InvalidInputError: If `data` is not strictly valid UTF-8.
        ConfigError: If `options` are invalid.

    Examples:
        estimate_length(b"Hello World")  # 12
        estimate_length("€".encode())  # 5
    """
    _check_input(data)
    options = options or SlugOptions()
    validate_options(options)
    validate_utf8(data)
    return _estimate(data, options)


def convert_into(data: bytes, buffer: OutputBuffer, options: SlugOptions | None = None) -> int:
    """Write the slug for `data` into a caller-owned buffer.

    Args:
        data: Input bytes.
        buffer: Destination; its capacity includes the terminator slot.
        options: Conversion options. Defaults to `SlugOptions()`.

    Returns:
        int: Number of content bytes written.

    Raises:
        InvalidInputError: If `data` is not strictly valid UTF-8. Nothing is
            written in that case.
        BufferExceededError: If a write would not fit `buffer`. Bytes written
            before the failing write stay in the buffer.
        EmptyResultError: If conversion produced no bytes.
        ConfigError: If `options` are invalid.

    Examples:
        buffer = OutputBuffer(estimate_length(b"Hello World"))
        convert_into(b"Hello World", buffer)  # 11
        buffer.getvalue()  # b"hello-world"
    """
    _check_input(data)
    options = options or SlugOptions()
    validate_options(options)
    validate_utf8(data)
    return _write_slug(data, buffer, options)


def convert(data: bytes, options: SlugOptions | None = None) -> bytes:
    """Convert a UTF-8 byte sequence into a slug.

    The input is validated in full before any output is produced: a single
    malformed, overlong, surrogate, or noncharacter sequence anywhere
    rejects the whole input.

    Args:
        data: Input bytes.
        options: Conversion options. Defaults to `SlugOptions()`.

    Returns:
        bytes: The slug. ASCII unless `preserve_case` lets non-ASCII
            sequences through verbatim.

    Raises:
        InvalidInputError: If `data` is not strictly valid UTF-8.
        EmptyResultError: If nothing usable remains after conversion.
        AllocationError: If the output buffer cannot be allocated.
        ConfigError: If `options` are invalid.

    Examples:
        convert(b"Hello   World")  # b"hello-world"
        convert("Café".encode())  # b"cafe"
        convert(b"\\xc1\\x81")  # raises InvalidInputError
    """
    _check_input(data)
    options = options or SlugOptions()
    validate_options(options)
    validate_utf8(data)

    capacity = _estimate(data, options)
    try:
        buffer = OutputBuffer(capacity)
    except MemoryError as error:
        raise AllocationError(capacity) from error

    _write_slug(data, buffer, options)
    return buffer.getvalue()


def generate_slug(
    text: str,
    separator: str = "-",
    max_length: int = 0,
    preserve_case: bool = False,
) -> str:
    """Generate a slug from text.

    Lone surrogates in `text` are encoded as-is and then rejected by
    validation rather than silently replaced.

    Examples:
        generate_slug("Hello World")  # "hello-world"
        generate_slug("Hello", preserve_case=True)  # "Hello"
        generate_slug("Привет мир")  # "privet-mir"
    """
    data = text.encode("utf-8", "surrogatepass")
    options = SlugOptions(separator=separator, max_length=max_length, preserve_case=preserve_case)
    return convert(data, options).decode("utf-8")
