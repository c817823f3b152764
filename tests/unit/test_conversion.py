"""Unit tests for temperature conversion and the temperature report."""

import pytest
from pydantic import ValidationError

from shared.conversion import celsius_to_fahrenheit, celsius_to_kelvin, round_one_decimal
from shared.models import TemperatureReport


class TestScaleConversion:
    """Test Celsius to Fahrenheit and Kelvin formulas."""

    def test_fahrenheit_freezing_point(self):
        assert celsius_to_fahrenheit(0) == 32

    def test_fahrenheit_boiling_point(self):
        assert celsius_to_fahrenheit(100) == 212

    def test_fahrenheit_negative(self):
        assert celsius_to_fahrenheit(-40) == -40

    def test_kelvin_uses_273_offset(self):
        assert celsius_to_kelvin(0) == 273
        assert celsius_to_kelvin(-273) == 0
        assert celsius_to_kelvin(25.5) == 298.5


class TestRounding:
    """Test one-decimal rounding with halves away from zero."""

    def test_rounds_down_below_half(self):
        assert round_one_decimal(25.449) == 25.4

    def test_rounds_half_up(self):
        assert round_one_decimal(25.45) == 25.5

    def test_rounds_half_away_from_zero_for_negatives(self):
        assert round_one_decimal(-25.45) == -25.5
        assert round_one_decimal(-0.05) == -0.1

    def test_half_even_cases_are_not_banker_rounded(self):
        assert round_one_decimal(0.25) == 0.3
        assert round_one_decimal(2.5) == 2.5

    def test_keeps_one_decimal_values(self):
        assert round_one_decimal(77.9) == 77.9
        assert round_one_decimal(298.5) == 298.5


class TestTemperatureReport:
    """Test the composed report built from a Celsius reading."""

    def test_from_celsius(self):
        report = TemperatureReport.from_celsius("São Paulo", 25.5)

        assert report.model_dump() == {
            "city": "São Paulo",
            "temp_C": 25.5,
            "temp_F": 77.9,
            "temp_K": 298.5,
        }

    def test_celsius_is_not_rounded(self):
        """Only the derived scales are rounded."""
        report = TemperatureReport.from_celsius("Curitiba", 21.37)

        assert report.temp_C == 21.37
        assert report.temp_F == 70.5
        assert report.temp_K == 294.4

    def test_extreme_values_pass_through(self):
        report = TemperatureReport.from_celsius("Nowhere", -89.2)

        assert report.temp_C == -89.2
        assert report.temp_F == -128.6
        assert report.temp_K == 183.8

    def test_report_is_immutable(self):
        report = TemperatureReport.from_celsius("Recife", 30.0)

        with pytest.raises(ValidationError):
            report.temp_C = 10.0

    def test_empty_city_rejected(self):
        with pytest.raises(ValidationError):
            TemperatureReport.from_celsius("", 20.0)
