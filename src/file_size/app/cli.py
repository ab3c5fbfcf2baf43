"""Command-line interface for file-size."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final

import click

from file_size.config import CliConfig, FileSizeOptions, discover_config_file, load_config
from file_size.core.aggregator import size_from_buffer
from file_size.core.engine import size_of
from file_size.exceptions import ConfigurationError, FileSizeError
from file_size.types.models import FileSizeResult, SizeResult
from file_size.utils.formatting import format_bytes
from file_size.utils.logging import configure_logging

logger = logging.getLogger(__name__)

EXIT_FAILURE: Final[int] = 1

ARROW: Final[str] = " → "


def validate_patterns(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: tuple[str, ...],
) -> tuple[str, ...]:
    """Validate that every --include/--exclude value is a regular expression.

    Raises:
        click.BadParameter: If a pattern does not compile
    """
    for pattern in value:
        try:
            _ = re.compile(pattern)
        except re.error as exc:
            raise click.BadParameter(f'Invalid regular expression "{pattern}": {exc}')
    return value


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize log level.

    Raises:
        click.BadParameter: If validation fails
    """
    if value is None:
        return value

    normalized_value = value.upper().strip()
    valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
    if normalized_value not in valid_levels:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(valid_levels))}'
        )
    return normalized_value


def _load_cli_config(config_path: Path | None) -> CliConfig:
    path = config_path if config_path is not None else discover_config_file()
    if path is None:
        return CliConfig()
    return load_config(path)


def build_options(
    config: CliConfig,
    level: int | None,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
) -> FileSizeOptions:
    """Merge command-line values over configuration file defaults.

    An absent or empty pattern list means "no filter", never "match nothing".
    """
    include_patterns = list(include) or config.include
    exclude_patterns = list(exclude) or config.exclude
    effective_level = level if level is not None else config.level

    fields: dict[str, object] = {
        "include": include_patterns or None,
        "exclude": exclude_patterns or None,
    }
    if effective_level is not None:
        fields["level"] = effective_level
    return FileSizeOptions.model_validate(fields)


def render_result(
    result: FileSizeResult | SizeResult,
    *,
    gzip: bool,
    raw: bool,
    original: bool,
    si: bool,
    bits: bool,
    max_frac_digits: int,
) -> str:
    """Render a size result the way the command prints it."""

    def render(value: int) -> str:
        if raw:
            return str(value)
        return format_bytes(value, binary=not si, bits=bits, max_fraction_digits=max_frac_digits)

    if not gzip:
        return render(result.raw_size)

    output = render(result.compressed_size)
    if original:
        output = render(result.raw_size) + click.style(ARROW, dim=True) + output
    return output


try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("file-size")
except PackageNotFoundError:
    __version__ = "unknown"


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument('path', required=False, type=click.Path(path_type=Path))
@click.option('--level', '-l', type=int, default=None, help='Compression level [-1..9] (default: zlib default level)')
@click.option('--gzip', '-g', is_flag=True, help='Report the gzip-compressed size instead of the raw size')
@click.option('--raw', '-r', is_flag=True, help='Print a bare byte count')
@click.option('--original', '-o', is_flag=True, help='With --gzip, also print the raw size ("raw → gzip")')
@click.option(
    '--include', '-i',
    multiple=True,
    callback=validate_patterns,
    help='Regular expression a file path must match (repeatable)',
)
@click.option(
    '--exclude', '-e',
    multiple=True,
    callback=validate_patterns,
    help='Regular expression excluding matching file paths (repeatable)',
)
@click.option(
    '--si/--no-si', '-s',
    default=None,
    help='Use decimal SI units (kB) instead of binary units (KiB)',
)
@click.option('--bits/--no-bits', '-b', default=None, help='Format the size in bits')
@click.option(
    '--max-frac-digits', '-m',
    type=click.IntRange(min=0, max=20),
    default=None,
    help='Maximum fraction digits in human-readable output (default: 3)',
)
@click.option(
    '--config', '-c',
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help='YAML file with default options. If not specified, .file-size.yaml is searched '
    'in the current and home directories.',
)
@click.option(
    '--log-level',
    type=str,
    default=None,
    callback=validate_log_level,
    help='Logging verbosity on stderr (DEBUG, INFO, WARNING, ERROR, CRITICAL)',
)
@click.version_option(version=__version__, prog_name='file-size')
@click.pass_context
def cli(
    ctx: click.Context,
    path: Path | None,
    level: int | None,
    gzip: bool,
    raw: bool,
    original: bool,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    si: bool | None,
    bits: bool | None,
    max_frac_digits: int | None,
    config: Path | None,
    log_level: str | None,
) -> None:
    """Get the raw and gzip-compressed size of a file, a directory or stdin.

    Examples:

        # Raw size of a file
        file-size unicorn.png

        # Gzip size in bytes, with the raw size
        file-size dist --gzip --original --raw

        # Only JavaScript files, skipping source maps
        file-size dist -g -i '\\.js$' -e '\\.map$'

        # Piped input
        cat unicorn.png | file-size --gzip
    """
    try:
        cli_config = _load_cli_config(config)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))

    configure_logging(log_level=log_level or cli_config.log_level)
    options = build_options(cli_config, level, include, exclude)

    result: FileSizeResult | SizeResult
    try:
        if path is None:
            stdin = click.get_binary_stream('stdin')
            if stdin.isatty():
                click.echo('Specify a path', err=True)
                ctx.exit(EXIT_FAILURE)
            result = size_from_buffer(stdin.read(), options)
        elif not path.exists():
            click.echo(f'Specify a valid path, {path} does not exist!', err=True)
            ctx.exit(EXIT_FAILURE)
        else:
            result = size_of(path, options)
    except (FileSizeError, OSError) as exc:
        logger.debug("Size computation failed", exc_info=True)
        raise click.ClickException(str(exc))

    click.echo(
        render_result(
            result,
            gzip=gzip,
            raw=raw,
            original=original,
            si=si if si is not None else cli_config.si,
            bits=bits if bits is not None else cli_config.bits,
            max_frac_digits=max_frac_digits if max_frac_digits is not None else cli_config.max_frac_digits,
        )
    )


if __name__ == '__main__':
    cli()
