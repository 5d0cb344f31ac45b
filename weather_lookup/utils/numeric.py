"""
Decimal/float conversion at the storage boundary.

Decimal-valued observation fields are stored as fixed-precision decimal
text so that values such as 1013.25 hPa never pick up binary floating
point noise in the database. These helpers convert between the wire
representation (float) and the storage representation (text).
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def to_decimal_text(value: Number, precision: int, scale: int) -> str:
    """
    Convert a number into NUMERIC(precision, scale) text.

    The value goes through ``str()`` first so a float is taken at its
    shortest round-tripping repr (15.5, not 15.4999999...). Rounding to
    the column scale is half away from zero, as PostgreSQL does.

    Args:
        value: Number to store
        precision: Total number of significant digits of the column
        scale: Digits after the decimal point

    Returns:
        Decimal text such as "1013.25"

    Raises:
        ValueError: If the value is not finite or does not fit the column
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")

    number = value if isinstance(value, Decimal) else Decimal(str(value))
    if not number.is_finite():
        raise ValueError(f"Cannot store non-finite value {value!r}")

    if number != 0 and number.adjusted() >= precision - scale:
        raise ValueError(
            f"Value {value!r} overflows NUMERIC({precision}, {scale})"
        )

    quantized = number.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)
    # Rounding up can still carry into an extra digit (999.995 -> 1000.00)
    if len(quantized.as_tuple().digits) > precision:
        raise ValueError(
            f"Value {value!r} overflows NUMERIC({precision}, {scale})"
        )
    return format(quantized, "f")


def from_decimal_text(text: str) -> Decimal:
    """Parse stored decimal text back into an exact Decimal."""
    return Decimal(text)


def to_float(value: Union[Number, str]) -> float:
    """
    Convert a stored decimal value into a native float.

    Accepts the Decimal produced by the storage type, raw decimal text,
    or a number that is already native.
    """
    if isinstance(value, str):
        value = from_decimal_text(value)
    return float(value)
