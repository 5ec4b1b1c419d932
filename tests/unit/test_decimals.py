"""Tests for lp_common.decimals."""
from decimal import Decimal

import pytest

from src.lp_common.decimals import (
    decimal_places,
    decimal_to_str,
    floor_units,
    is_whole,
    to_decimal,
)


class TestToDecimal:
    def test_string(self) -> None:
        assert to_decimal("0.2") == Decimal("0.2")

    def test_float_uses_shortest_repr(self) -> None:
        assert to_decimal(0.1) == Decimal("0.1")

    def test_int(self) -> None:
        assert to_decimal(5) == Decimal(5)

    @pytest.mark.parametrize("value", ["abc", "", None, "NaN", "Infinity", Decimal("NaN")])
    def test_rejects_non_finite_or_garbage(self, value) -> None:
        with pytest.raises(ValueError):
            to_decimal(value)


class TestFloorUnits:
    def test_floors(self) -> None:
        assert floor_units(Decimal("1.99998")) == Decimal(1)

    def test_floors_negative_toward_minus_infinity(self) -> None:
        assert floor_units(Decimal("-0.5")) == Decimal(-1)

    def test_plain_exponent(self) -> None:
        assert str(floor_units(Decimal("1E+6"))) == "1000000"


class TestIsWhole:
    def test_whole(self) -> None:
        assert is_whole(Decimal("3.000"))

    def test_fraction(self) -> None:
        assert not is_whole(Decimal("3.5"))


class TestDecimalToStr:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("1.100"), "1.1"),
            (Decimal("1E+6"), "1000000"),
            (Decimal("0.0000001"), "0.0000001"),
            (Decimal("0.000"), "0"),
            (Decimal("-2.50"), "-2.5"),
        ],
    )
    def test_plain_format(self, value, expected) -> None:
        assert decimal_to_str(value) == expected


class TestDecimalPlaces:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("1.2500"), 2),
            (Decimal("100"), 0),
            (Decimal("1E+3"), 0),
            (Decimal("0.000000001"), 9),
            (Decimal("0.2000000000000000000000000001"), 28),
        ],
    )
    def test_counts_significant_fraction_digits(self, value, expected) -> None:
        assert decimal_places(value) == expected
