"""Constants used across the secure-slugify package."""

from __future__ import annotations

import string

# Unicode limits
UNICODE_MAX_CODE_POINT = 0x10FFFF
SURROGATE_START = 0xD800
SURROGATE_END = 0xDFFF
NONCHARACTER_BLOCK_START = 0xFDD0
NONCHARACTER_BLOCK_END = 0xFDEF

# Smallest code point each sequence length may legitimately encode
MIN_CODE_POINT_BY_LENGTH = {1: 0x00, 2: 0x80, 3: 0x800, 4: 0x10000}

# ASCII classes (C locale)
ASCII_ALPHANUMERIC = frozenset((string.ascii_letters + string.digits).encode("ascii"))
ASCII_WHITESPACE = frozenset(string.whitespace.encode("ascii"))
ASCII_PUNCTUATION = frozenset(string.punctuation.encode("ascii"))
SEPARATOR_TRIGGERS = ASCII_WHITESPACE | ASCII_PUNCTUATION

# Conversion defaults
DEFAULT_SEPARATOR = "-"
DEFAULT_MAX_LENGTH = 0
TERMINATOR_SIZE = 1

# CLI limits
DEFAULT_MAX_INPUT_SIZE = 1024 * 1024
MAX_INPUT_SIZE_ENV_VAR = "SECURE_SLUGIFY_MAX_INPUT_SIZE"
