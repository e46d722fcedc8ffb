"""Fixed-point normalization for fractional weather fields.

The store keeps fractional quantities as exact decimals with a declared
scale; everything above the store works with floats.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional, Union

from sqlalchemy import Numeric
from sqlalchemy.types import TypeDecorator

from weather_service.app_logging import get_logger

logger = get_logger(__name__)

# (precision, scale) per stored field
COORDINATE = (10, 7)
TEMPERATURE = (5, 2)
PRESSURE = (7, 2)
WIND_SPEED = (5, 2)
VISIBILITY = (5, 2)


def column_limit(precision: int, scale: int) -> float:
    """Largest magnitude a ``numeric(precision, scale)`` column holds."""
    return float(Decimal(10) ** (precision - scale) - Decimal(1).scaleb(-scale))


def encode_decimal(value: Union[float, int, Decimal], scale: int) -> str:
    """Render ``value`` as fixed-point text with exactly ``scale`` digits.

    Rounds half away from zero, which is what ``numeric`` columns do.
    """
    try:
        exact = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}")
    if not exact.is_finite():
        raise ValueError(f"Cannot store non-finite value {value!r}")

    quantized = exact.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)
    if quantized != exact:
        logger.debug(f"Rounded {exact} to {quantized} (scale {scale})")
    return format(quantized, "f")


def decode_decimal(text: Union[str, Decimal, float, None]) -> Optional[float]:
    """Parse a stored fixed-point value back to a float."""
    if text is None:
        return None
    return float(text)


class FixedPoint(TypeDecorator):
    """Numeric column that accepts and returns floats.

    Values are quantized to the column scale before they reach the driver.
    """

    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int, scale: int):
        super().__init__(precision=precision, scale=scale, asdecimal=True)
        self.precision = precision
        self.scale = scale

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return Decimal(encode_decimal(value, self.scale))

    def process_result_value(self, value, dialect):
        return decode_decimal(value)
