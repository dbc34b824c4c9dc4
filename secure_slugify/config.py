"""Configuration loading and management."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from .constants import DEFAULT_MAX_INPUT_SIZE, DEFAULT_MAX_LENGTH, DEFAULT_SEPARATOR
from .models import SlugOptions


@dataclass
class SlugConfig:
    """Configuration for the secure-slugify command.

    Attributes:
        separator: Character emitted between words.
        max_length: Maximum slug length in bytes; 0 means unbounded.
        preserve_case: Keep case and pass non-ASCII text through verbatim.
        max_input_size: Maximum number of input bytes read by the CLI.

    Examples:
        SlugConfig(separator="_", max_length=64)
    """

    separator: str = DEFAULT_SEPARATOR
    max_length: int = DEFAULT_MAX_LENGTH
    preserve_case: bool = False

    # Limits
    max_input_size: int = DEFAULT_MAX_INPUT_SIZE

    def to_options(self) -> SlugOptions:
        return SlugOptions(
            separator=self.separator,
            max_length=self.max_length,
            preserve_case=self.preserve_case,
        )


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`separator` must be a single character")
    """


def load_config(search_path: Path) -> SlugConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.secure-slugify]`` table from `pyproject.toml` and the
    ``[secure-slugify]`` or ``[tool.secure-slugify]`` table from
    `.secure-slugify.toml` when present. TOML files that cannot be read or
    decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        SlugConfig: Loaded configuration, or defaults when none is found.

    Raises:
        ConfigError: If a matching table is not a mapping or contains unsupported keys.

    Examples:
        load_config(Path.cwd())
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "secure-slugify")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".secure-slugify.toml",
            table_paths=[("secure-slugify",), ("tool", "secure-slugify")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return SlugConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> SlugConfig | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> SlugConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # The TOML key uses the CLI spelling
    raw_config = {key.replace("-", "_"): value for key, value in raw_config.items()}

    try:
        return SlugConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_options(options: SlugOptions) -> None:
    """Validate conversion options.

    Args:
        options: Options to validate.

    Returns:
        None.

    Raises:
        ConfigError: If the separator is not a single non-NUL ASCII character,
            `max_length` is not a non-negative integer, or `preserve_case` is
            not a boolean.

    Examples:
        validate_options(SlugOptions(separator="_", max_length=32))
    """
    if not isinstance(options.separator, str) or len(options.separator) != 1:
        raise ConfigError("`separator` must be a single character")
    if not options.separator.isascii() or options.separator == "\0":
        raise ConfigError("`separator` must be a non-NUL ASCII character")

    _ensure_integers({"max_length": options.max_length})
    if options.max_length < 0:
        raise ConfigError("`max_length` must be >= 0")

    if not isinstance(options.preserve_case, bool):
        raise ConfigError("`preserve_case` must be a boolean")


def validate_config(config: SlugConfig) -> None:
    """Validate a `SlugConfig` instance.

    Raises:
        ConfigError: If any conversion option is invalid or `max_input_size`
            is not a positive integer.
    """
    validate_options(config.to_options())
    _ensure_integers({"max_input_size": config.max_input_size})
    _ensure_positive({"max_input_size": config.max_input_size})


def apply_overrides(config: SlugConfig, **overrides: object) -> SlugConfig:
    """Apply override values to a `SlugConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        SlugConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `SlugConfig`.

    Examples:
        updated = apply_overrides(config, separator="_", max_length=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> SlugConfig:
    """Load, override, and validate configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), separator="_")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
