"""
Tests for the number rendering helpers.
"""

import pytest

from cnum.formatting import DEFAULT_DECIMALS, format_number, format_rounded


class TestFormatNumber:
    """Tests for format_number"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (2.0, "2"),
            (-3.0, "-3"),
            (0.0, "0"),
            (-0.0, "-0"),
            (0.05, "0.05"),
            (-0.13, "-0.13"),
            (1.12345679, "1.12345679"),
        ],
    )
    def test_shortest_representation(self, value: float, expected: str) -> None:
        """Integral values lose their trailing '.0', others print as repr"""
        assert format_number(value) == expected

    def test_integer_input(self) -> None:
        """Integers are rendered like the equivalent float"""
        assert format_number(7) == "7"

    def test_exponent_kept(self) -> None:
        """Large and small magnitudes keep Python's exponent notation"""
        assert format_number(1e16) == "1e+16"
        assert format_number(1e-05) == "1e-05"

    def test_non_finite(self) -> None:
        """inf and nan pass through"""
        assert format_number(float("inf")) == "inf"
        assert format_number(float("-inf")) == "-inf"
        assert format_number(float("nan")) == "nan"


class TestFormatRounded:
    """Tests for format_rounded"""

    def test_default_decimals(self) -> None:
        """Rounds to 8 decimals by default"""
        assert DEFAULT_DECIMALS == 8
        assert format_rounded(1.123456789) == "1.12345679"

    def test_custom_decimals(self) -> None:
        assert format_rounded(3.14159265, 2) == "3.14"
        assert format_rounded(2.71828, 0) == "3"

    def test_float_noise_removed(self) -> None:
        """Representation error below the 8th decimal disappears"""
        assert format_rounded(0.1 + 0.2) == "0.3"

    def test_round_half_to_even(self) -> None:
        """Exact halves go to the even neighbour"""
        assert format_rounded(0.5, 0) == "0"
        assert format_rounded(1.5, 0) == "2"
        assert format_rounded(2.5, 0) == "2"
