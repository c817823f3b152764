"""Temperature scale conversions."""

from decimal import ROUND_HALF_UP, Decimal


def celsius_to_fahrenheit(celsius: float) -> float:
    return (celsius * 1.8) + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + 273


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves away from zero.

    ``value * 10`` is rounded on its exact binary value, so
    ``round_one_decimal(25.45) == 25.5`` and
    ``round_one_decimal(-25.45) == -25.5``.
    """
    scaled = Decimal(value * 10).to_integral_value(rounding=ROUND_HALF_UP)
    return float(scaled) / 10
