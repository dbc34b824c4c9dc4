"""
secure-slugify: strict UTF-8 slug generation.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    secure-slugify "Héllo Wörld"

Library Usage:
    from secure_slugify import SlugOptions, convert, generate_slug

    generate_slug("Héllo Wörld")  # "hello-world"
    convert(b"Hello World", SlugOptions(separator="_"))  # b"hello_world"
"""

from .config import ConfigError
from .exceptions import (
    AllocationError,
    BufferExceededError,
    EmptyResultError,
    ErrorKind,
    InvalidInputError,
    SlugifyError,
    Utf8Violation,
)
from .models import OutputBuffer, SlugOptions
from .slugify import convert, convert_into, estimate_length, generate_slug
from .transliteration import transliterate
from .utf8 import decode_secure, decode_trusted, is_valid_utf8, validate_utf8

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "convert",
    "convert_into",
    "estimate_length",
    "generate_slug",
    # UTF-8 and transliteration
    "decode_secure",
    "decode_trusted",
    "is_valid_utf8",
    "validate_utf8",
    "transliterate",
    # Data models
    "OutputBuffer",
    "SlugOptions",
    # Exceptions
    "AllocationError",
    "BufferExceededError",
    "ConfigError",
    "EmptyResultError",
    "ErrorKind",
    "InvalidInputError",
    "SlugifyError",
    "Utf8Violation",
    # Version
    "__version__",
]
