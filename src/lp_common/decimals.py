"""Decimal helpers shared by pricing, persistence and schemas.

Amounts are always decimal.Decimal, never float. Persisted and serialized
forms are plain strings so no precision is lost on a round trip.
"""

from decimal import ROUND_FLOOR, Decimal, InvalidOperation

ZERO = Decimal(0)
_ONE = Decimal(1)


def to_decimal(value: object) -> Decimal:
    """Coerce str/int/Decimal to a finite Decimal. Floats go through repr() first."""
    if isinstance(value, Decimal):
        result = value
    else:
        if isinstance(value, float):
            value = repr(value)
        try:
            result = Decimal(value)  # type: ignore[arg-type]
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise ValueError(f"Not a decimal amount: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return result


def floor_units(value: Decimal) -> Decimal:
    """Round toward negative infinity to a whole number of units (exponent 0, so 1E+6 -> 1000000)."""
    return value.to_integral_value(rounding=ROUND_FLOOR).quantize(_ONE)


def is_whole(value: Decimal) -> bool:
    return value == value.to_integral_value()


def decimal_to_str(value: Decimal) -> str:
    """Plain (non-scientific) string, trailing zeros stripped: 1.100 -> '1.1', 1E+6 -> '1000000'."""
    if value == ZERO:
        return "0"
    return format(value.normalize(), "f")


def decimal_places(value: Decimal) -> int:
    """Significant fractional digits: 1.2500 -> 2, 100 -> 0."""
    exponent = value.normalize().as_tuple().exponent
    return -exponent if exponent < 0 else 0  # type: ignore[operator]
