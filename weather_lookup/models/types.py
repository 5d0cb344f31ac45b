"""
Custom column types.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from weather_lookup.utils.numeric import Number, from_decimal_text, to_decimal_text


class DecimalText(TypeDecorator):
    """
    Fixed-precision decimal persisted as text.

    Behaves like NUMERIC(precision, scale) on every backend, SQLite
    included: values are quantized to ``scale`` digits on write and come
    back as ``decimal.Decimal`` on read.
    """

    impl = String
    cache_ok = True

    def __init__(self, precision: int, scale: int):
        # sign + integer digits + point + fraction digits
        super().__init__(length=precision + 2)
        self.precision = precision
        self.scale = scale

    @property
    def python_type(self):
        return Decimal

    def process_bind_param(self, value: Optional[Number], dialect) -> Optional[str]:
        if value is None:
            return None
        return to_decimal_text(value, self.precision, self.scale)

    def process_result_value(self, value: Optional[str], dialect) -> Optional[Decimal]:
        if value is None:
            return None
        return from_decimal_text(value)

    def __repr__(self) -> str:
        return f"DecimalText(precision={self.precision}, scale={self.scale})"
