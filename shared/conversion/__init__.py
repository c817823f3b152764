"""Temperature unit conversion."""

from .temperature import celsius_to_fahrenheit, celsius_to_kelvin, round_one_decimal

__all__ = ["celsius_to_fahrenheit", "celsius_to_kelvin", "round_one_decimal"]
