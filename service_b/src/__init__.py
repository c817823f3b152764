"""Back service: postal code to city temperature.

Resolves the city through the ViaCEP directory and its current
temperature through WeatherAPI.
"""

__version__ = "1.0.0"
