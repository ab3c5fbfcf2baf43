"""Pure formatting utilities for human-readable byte counts.

Output follows the conventions of the ``pretty-bytes`` family: decimal
(SI, 1000-based) or binary (IEC, 1024-based) unit ladders, optional bit
units, and a bounded number of fraction digits with trailing zeros
trimmed.
"""

from __future__ import annotations

from typing import Final

# Unit ladders indexed by exponent
_SI_BYTE_UNITS: Final[tuple[str, ...]] = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_BINARY_BYTE_UNITS: Final[tuple[str, ...]] = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")
_SI_BIT_UNITS: Final[tuple[str, ...]] = ("b", "kbit", "Mbit", "Gbit", "Tbit", "Pbit", "Ebit", "Zbit", "Ybit")
_BINARY_BIT_UNITS: Final[tuple[str, ...]] = (
    "b",
    "kibit",
    "Mibit",
    "Gibit",
    "Tibit",
    "Pibit",
    "Eibit",
    "Zibit",
    "Yibit",
)

_SI_BASE: Final[int] = 1000
_BINARY_BASE: Final[int] = 1024

DEFAULT_MAX_FRACTION_DIGITS: Final[int] = 3


def _units(binary: bool, bits: bool) -> tuple[str, ...]:
    if bits:
        return _BINARY_BIT_UNITS if binary else _SI_BIT_UNITS
    return _BINARY_BYTE_UNITS if binary else _SI_BYTE_UNITS


def _format_number(value: float, max_fraction_digits: int) -> str:
    text = f"{value:,.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_bytes(
    value: float,
    *,
    binary: bool = True,
    bits: bool = False,
    max_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS,
    signed: bool = False,
) -> str:
    """Convert a byte count to a human-readable size.

    Args:
        value: Number of bytes (negative values keep their sign)
        binary: Use 1024-based IEC units (KiB, MiB) instead of 1000-based SI units
        bits: Express the size in bits (the byte count is multiplied by 8)
        max_fraction_digits: Maximum number of digits after the decimal point
        signed: Prefix positive values with ``+`` (zero gets a leading space)

    Returns:
        Human-readable string such as ``"1.5 KiB"`` or ``"192 kB"``

    Raises:
        ValueError: If max_fraction_digits is negative

    Examples:
        >>> format_bytes(512)
        '512 B'
        >>> format_bytes(1536)
        '1.5 KiB'
        >>> format_bytes(1536, binary=False)
        '1.536 kB'
        >>> format_bytes(1000, binary=False, bits=True)
        '8 kbit'
        >>> format_bytes(1536, signed=True)
        '+1.5 KiB'
    """
    if max_fraction_digits < 0:
        msg = "max_fraction_digits must be non-negative"
        raise ValueError(msg)

    units = _units(binary, bits)
    base = _BINARY_BASE if binary else _SI_BASE

    number = float(value) * 8 if bits else float(value)
    if number < 0:
        prefix = "-"
    elif signed:
        prefix = "+" if number > 0 else " "
    else:
        prefix = ""
    number = abs(number)

    exponent = 0
    while number >= base and exponent < len(units) - 1:
        number /= base
        exponent += 1

    return f"{prefix}{_format_number(number, max_fraction_digits)} {units[exponent]}"
