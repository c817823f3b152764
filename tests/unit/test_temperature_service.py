"""Unit tests for the back service orchestration."""

from unittest.mock import AsyncMock, Mock

import pytest

from service_b.src.services import TemperatureService
from shared.errors import ConfigurationError, ResolutionError, WeatherError
from shared.models import TemperatureReport


@pytest.fixture
def location_client():
    client = Mock()
    client.fetch_location = AsyncMock(return_value="São Paulo")
    return client


@pytest.fixture
def weather_client():
    client = Mock()
    client.fetch_temperature = AsyncMock(return_value=25.5)
    return client


@pytest.fixture
def service(location_client, weather_client):
    return TemperatureService(location_client, weather_client)


class TestTemperatureService:
    """Test city resolution followed by the weather lookup."""

    @pytest.mark.asyncio
    async def test_builds_report(self, service, location_client, weather_client):
        report = await service.get_report("01001000")

        assert report == TemperatureReport(city="São Paulo", temp_C=25.5, temp_F=77.9, temp_K=298.5)
        location_client.fetch_location.assert_awaited_once_with("01001000")
        weather_client.fetch_temperature.assert_awaited_once_with("São Paulo")

    @pytest.mark.asyncio
    async def test_lookups_are_sequential(self, location_client, weather_client):
        calls = []
        location_client.fetch_location.side_effect = lambda cep: calls.append("location") or "Recife"
        weather_client.fetch_temperature.side_effect = lambda city: calls.append("weather") or 30.0

        await TemperatureService(location_client, weather_client).get_report("50030230")

        assert calls == ["location", "weather"]

    @pytest.mark.asyncio
    async def test_resolution_failure_skips_weather(self, service, location_client, weather_client):
        location_client.fetch_location.side_effect = ResolutionError()

        with pytest.raises(ResolutionError):
            await service.get_report("99999999")

        weather_client.fetch_temperature.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [ConfigurationError("missing WEATHERAPI_KEY"), WeatherError("failed to fetch temperature")],
    )
    async def test_weather_errors_propagate(self, service, weather_client, error):
        weather_client.fetch_temperature.side_effect = error

        with pytest.raises(type(error)) as exc_info:
            await service.get_report("01001000")

        assert exc_info.value is error
