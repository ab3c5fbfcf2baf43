"""Unit tests for byte count formatting.

Tests cover:
- Binary (IEC) and decimal (SI) unit ladders
- Bit units
- Fraction digit limits and trailing zero trimming
- Property-based testing with Hypothesis
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from file_size.utils.formatting import format_bytes


class TestFormatBytes:
    """Test suite for format_bytes function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0 B"),
            (1, "1 B"),
            (1023, "1,023 B"),
            (1024, "1 KiB"),
            (1536, "1.5 KiB"),
            (196608, "192 KiB"),
            (100352, "98 KiB"),
            (1024**2, "1 MiB"),
            (1024**3 * 5, "5 GiB"),
            (1024**8, "1 YiB"),
            (1024**9, "1,024 YiB"),
        ],
    )
    def test_binary_units(self, value: int, expected: str) -> None:
        assert format_bytes(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0 B"),
            (999, "999 B"),
            (1000, "1 kB"),
            (1536, "1.536 kB"),
            (196608, "196.608 kB"),
            (1_500_000, "1.5 MB"),
            (10**12, "1 TB"),
        ],
    )
    def test_si_units(self, value: int, expected: str) -> None:
        assert format_bytes(value, binary=False) == expected

    @pytest.mark.parametrize(
        ("value", "binary", "expected"),
        [
            (1, False, "8 b"),
            (125, False, "1 kbit"),
            (128, True, "1 kibit"),
            (131072, True, "1 Mibit"),
        ],
    )
    def test_bits(self, value: int, binary: bool, expected: str) -> None:
        assert format_bytes(value, binary=binary, bits=True) == expected

    def test_fraction_digits_round(self) -> None:
        assert format_bytes(1234567, binary=False, max_fraction_digits=1) == "1.2 MB"
        assert format_bytes(1234567, binary=False, max_fraction_digits=0) == "1 MB"
        assert format_bytes(1234567, binary=False) == "1.235 MB"

    def test_negative_values(self) -> None:
        assert format_bytes(-1536) == "-1.5 KiB"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1536, "+1.5 KiB"),
            (0, " 0 B"),
            (-1536, "-1.5 KiB"),
        ],
    )
    def test_signed(self, value: int, expected: str) -> None:
        assert format_bytes(value, signed=True) == expected

    def test_unsigned_by_default(self) -> None:
        assert format_bytes(1536) == "1.5 KiB"
        assert format_bytes(0) == "0 B"

    def test_negative_fraction_digits_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            _ = format_bytes(1, max_fraction_digits=-1)

    @given(st.integers(min_value=0, max_value=1024**6))
    def test_unit_suffix_always_present(self, value: int) -> None:
        number, unit = format_bytes(value).split(" ")

        assert unit in {"B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"}
        assert float(number.replace(",", "")) <= 1024

    @given(st.integers(min_value=0, max_value=10**18))
    def test_at_most_three_fraction_digits(self, value: int) -> None:
        number = format_bytes(value, binary=False).split(" ")[0]

        if "." in number:
            assert len(number.split(".")[1]) <= 3
            assert not number.endswith("0")
