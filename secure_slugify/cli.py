"""
Converts text into slugs.
Each TEXT argument becomes one slug; without arguments, input is read from a
file or stdin and converted line by line.
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from .config import ConfigError, build_config
from .exceptions import SlugifyError
from .filesystem import get_max_input_size, normalize_filepath, read_input_file, read_limited
from .models import SlugOptions
from .slugify import convert

__all__ = ["cli"]


def _convert_lines(data: bytes, options: SlugOptions) -> bool:
    """Echo one slug per non-blank line; report failures on stderr."""
    succeeded = True
    for line_number, line in enumerate(data.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            slug = convert(line, options)
        except SlugifyError as error:
            click.echo(f"line {line_number}: {error}", err=True)
            succeeded = False
            continue
        click.echo(slug.decode("utf-8"))
    return succeeded


@click.command()
@click.version_option(package_name="secure-slugify")
@click.option("--separator", help="Separator placed between words")
@click.option("--max-length", type=int, help="Maximum slug length in bytes (0 = unlimited)")
@click.option(
    "--preserve-case/--lowercase",
    default=None,
    help="Keep case and non-ASCII text instead of lowercasing and transliterating",
)
@click.option(
    "--file",
    "input_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Read input lines from a file instead of stdin",
)
@click.argument("text", nargs=-1)
def cli(
    text: tuple[str, ...],
    separator: str | None = None,
    max_length: int | None = None,
    preserve_case: bool | None = None,
    input_file: str | None = None,
):
    """
    Entry point for converting text into slugs.

    Args:
        text: Strings to convert, one slug each.
        separator: Override for the separator character.
        max_length: Override for the maximum slug length.
        preserve_case: Override for case and non-ASCII preservation.
        input_file: File to read when no TEXT is given.

    Returns:
        None.

    Raises:
        click.BadParameter: If options are invalid or TEXT and --file are
            combined.
        click.ClickException: If a conversion fails, input exceeds the size
            limit, or the input file cannot be read.

    Examples:
        secure-slugify "Hello World" --separator _
        secure-slugify --file names.txt --max-length 32
    """
    if text and input_file is not None:
        raise click.BadParameter("TEXT arguments cannot be combined with --file")

    try:
        config = build_config(
            Path.cwd(),
            separator=separator,
            max_length=max_length,
            preserve_case=preserve_case,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    options = config.to_options()

    try:
        max_input_size = get_max_input_size(default=config.max_input_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    # Arguments
    if text:
        for raw in text:
            data = os.fsencode(raw)
            if len(data) > max_input_size:
                raise click.ClickException(
                    f"Argument exceeds the maximum allowed size of {max_input_size} bytes."
                )
            try:
                slug = convert(data, options)
            except SlugifyError as error:
                raise click.ClickException(str(error)) from error
            click.echo(slug.decode("utf-8"))
        return

    # File or stdin
    try:
        if input_file is not None:
            filepath = normalize_filepath(input_file)
            data = read_input_file(filepath, max_input_size)
        else:
            data = read_limited(click.get_binary_stream("stdin"), max_input_size, name="stdin")
    except ValueError as error:
        raise click.BadParameter(str(error)) from error
    except IOError as error:
        raise click.ClickException(str(error)) from error

    if not _convert_lines(data, options):
        raise click.exceptions.Exit(1)


if __name__ == "__main__":
    cli()
