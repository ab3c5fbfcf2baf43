"""Options and configuration for the size engine.

Compression and filter options are pydantic models so they can be built
from keyword arguments, from a YAML configuration file, or from the CLI
with the same validation. Compressor knobs are not range-checked here:
zlib is the authority and rejects bad values with ``CompressionError``.
"""

from __future__ import annotations

import logging
import re
import zlib
from pathlib import Path
from typing import Annotated, Final

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from file_size.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Configuration files looked up when --config is not given, in order
CONFIG_FILE_NAMES: Final[tuple[str, ...]] = (".file-size.yaml", ".file-size.yml")

PatternSet = tuple[re.Pattern[str], ...]


class GzipOptions(BaseModel):
    """Configuration forwarded verbatim to the gzip compressor."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    level: Annotated[
        int,
        Field(description="Compression level, -1 selects zlib's default level"),
    ] = zlib.Z_DEFAULT_COMPRESSION
    mem_level: Annotated[
        int,
        Field(description="Memory used for the internal compression state (1-9)"),
    ] = zlib.DEF_MEM_LEVEL
    strategy: Annotated[
        int,
        Field(description="zlib compression strategy constant"),
    ] = zlib.Z_DEFAULT_STRATEGY
    window_bits: Annotated[
        int,
        Field(description="Base two logarithm of the history buffer size (9-15)"),
    ] = zlib.MAX_WBITS


class FileSizeOptions(GzipOptions):
    """Compression options plus include/exclude regular expressions.

    ``None`` means "no filter". An empty include set matches nothing.
    """

    include: PatternSet | None = None
    exclude: PatternSet | None = None

    @field_validator("include", "exclude", mode="before")
    @classmethod
    def wrap_single_pattern(cls, v: object) -> object:
        """Accept a single pattern where a pattern set is expected.

        Args:
            v: Raw field value

        Returns:
            A sequence of patterns, or the value unchanged
        """
        if isinstance(v, (str, re.Pattern)):
            return (v,)
        return v


class CliConfig(BaseModel):
    """Defaults for the command line, loaded from a YAML file."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
    )

    level: int | None = None
    include: list[str] = []
    exclude: list[str] = []
    si: bool = False
    bits: bool = False
    max_frac_digits: Annotated[int, Field(ge=0, le=20)] = 3
    log_level: str = "WARNING"

    @field_validator("include", "exclude", mode="after")
    @classmethod
    def validate_patterns_compile(cls, v: list[str]) -> list[str]:
        """Validate that every pattern is a valid regular expression.

        Raises:
            ValueError: If a pattern does not compile
        """
        for pattern in v:
            try:
                _ = re.compile(pattern)
            except re.error as exc:
                msg = f"Invalid regular expression {pattern!r}: {exc}"
                raise ValueError(msg) from exc
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        normalized = v.upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if normalized not in valid_levels:
            msg = f"Invalid log level {v!r}. Valid options: {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return normalized


def _format_validation_error(error: ValidationError) -> str:
    lines: list[str] = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<root>"
        lines.append(f"  - {location}: {detail['msg']}")
    return "\n".join(lines)


def load_config(path: Path) -> CliConfig:
    """Load and validate a YAML configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML file

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the file cannot be read, parsed, or validated
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read configuration file {path}: {exc.strerror or exc}"
        raise ConfigurationError(msg, file_path=path) from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in configuration file {path}: {exc}"
        raise ConfigurationError(msg, file_path=path) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Configuration file {path} must contain a mapping at the top level"
        raise ConfigurationError(msg, file_path=path)

    try:
        config = CliConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid configuration in {path}:\n{_format_validation_error(exc)}"
        raise ConfigurationError(msg, file_path=path) from exc

    logger.debug("Loaded configuration", extra={"config_path": str(path)})
    return config


def discover_config_file(cwd: Path | None = None, home: Path | None = None) -> Path | None:
    """Find a configuration file in the working directory, then the home directory.

    Args:
        cwd: Directory searched first (defaults to the current directory)
        home: Directory searched second (defaults to the user's home)

    Returns:
        Path to the first configuration file found, or None
    """
    search_dirs: list[Path] = [cwd if cwd is not None else Path.cwd()]
    if home is not None:
        search_dirs.append(home)
    else:
        try:
            search_dirs.append(Path.home())
        except (OSError, RuntimeError):
            # Path.home() can fail in some environments
            pass

    for directory in search_dirs:
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None
