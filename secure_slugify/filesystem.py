"""Bounded input reading for the secure-slugify command."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import BinaryIO

from .constants import DEFAULT_MAX_INPUT_SIZE, MAX_INPUT_SIZE_ENV_VAR


def get_max_input_size(default: int = DEFAULT_MAX_INPUT_SIZE) -> int:
    """Resolve the maximum number of input bytes to read.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum input size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["SECURE_SLUGIFY_MAX_INPUT_SIZE"] = "4096"
        limit = get_max_input_size(default=1024)
    """
    env_value = os.environ.get(MAX_INPUT_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_INPUT_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_INPUT_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def contains_symlink(path: Path) -> bool:
    """Check whether a path or any parent directory is a symlink."""
    for candidate in (path, *path.parents):
        try:
            if candidate.is_symlink():
                return True
        except OSError:
            continue
    return False


def normalize_filepath(raw_path: str) -> Path:
    """Resolve and validate an input filepath.

    Args:
        raw_path: User-supplied path (absolute, relative, or ``~``-prefixed).

    Returns:
        Path: Absolute path to a regular file.

    Raises:
        ValueError: If the path does not exist, is not a regular file, or
            traverses a symlink.

    Examples:
        normalize_filepath("names.txt")
    """
    path = Path(raw_path).expanduser()

    if contains_symlink(path):
        error_message = f"Symlinks are not supported for security reasons: {path}"
        raise ValueError(error_message)

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        error_message = f"{path} does not exist."
        raise ValueError(error_message) from error
    except OSError as error:
        error_message = f"Error resolving {path}: {error}"
        raise ValueError(error_message) from error

    if not resolved.is_file():
        error_message = f"{resolved} is not a regular file."
        raise ValueError(error_message)

    return resolved


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for a file while disallowing symlinks.

    Raises:
        IOError: If the path is inaccessible, a symlink, or not a regular file.
    """
    try:
        stat_result = os.stat(filepath, follow_symlinks=False)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error

    if stat.S_ISLNK(stat_result.st_mode):
        error_message = f"Symlinks are not supported: {filepath}."
        raise IOError(error_message)

    if not stat.S_ISREG(stat_result.st_mode):
        error_message = f"{filepath} is not a regular file."
        raise IOError(error_message)

    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Guard against files that exceed the configured maximum size.

    Raises:
        IOError: If `stat_result.st_size` exceeds `max_size`.
    """
    if stat_result.st_size > max_size:
        error_message = f"{filepath} exceeds the maximum allowed size of {max_size} bytes."
        raise IOError(error_message)


def read_limited(stream: BinaryIO, max_size: int, name: str = "input") -> bytes:
    """Read a binary stream, refusing more than `max_size` bytes.

    Args:
        stream: Binary stream to read.
        max_size: Maximum number of bytes accepted.
        name: Label used in the error message.

    Returns:
        bytes: Everything read from the stream.

    Raises:
        IOError: If the stream holds more than `max_size` bytes.

    Examples:
        read_limited(io.BytesIO(b"hello"), 1024)  # b"hello"
    """
    data = stream.read(max_size + 1)
    if len(data) > max_size:
        error_message = f"{name} exceeds the maximum allowed size of {max_size} bytes."
        raise IOError(error_message)
    return data


def read_input_file(filepath: Path, max_size: int) -> bytes:
    """Read a regular file as bytes within the size limit.

    Raises:
        IOError: If the file is inaccessible, not a regular file, a symlink,
            or larger than `max_size`.
    """
    stat_result = collect_file_stat(filepath)
    enforce_file_size(stat_result, max_size, filepath)
    try:
        with open(filepath, "rb") as stream:
            return read_limited(stream, max_size, name=str(filepath))
    except (FileNotFoundError, PermissionError, IsADirectoryError, NotADirectoryError) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error
