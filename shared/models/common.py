"""Common Pydantic models shared across services."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator

from shared.conversion import celsius_to_fahrenheit, celsius_to_kelvin, round_one_decimal


class HealthStatus(str, Enum):
    """Health status enum."""

    HEALTHY = "healthy"


class HealthResponse(BaseModel):
    """Health check response body."""

    status: HealthStatus = Field(HealthStatus.HEALTHY, description="Service health")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")


class CepRequest(BaseModel):
    """Request body accepted by the front service.

    The ``cep`` key matches case-insensitively (``CEP``, ``Cep``); an exact
    match wins over a case variant.
    """

    cep: Optional[StrictStr] = Field(None, description="Postal code, 8 digits")

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        if isinstance(data, dict) and "cep" not in data:
            for key in data:
                if isinstance(key, str) and key.lower() == "cep":
                    return {**data, "cep": data[key]}
        return data


class TemperatureReport(BaseModel):
    """City temperature in Celsius, Fahrenheit and Kelvin.

    Celsius is kept exactly as the weather API reported it; the derived
    scales are rounded to one decimal place.
    """

    city: str = Field(..., min_length=1, description="City resolved from the postal code")
    temp_C: float = Field(..., description="Temperature in Celsius")
    temp_F: float = Field(..., description="Temperature in Fahrenheit")
    temp_K: float = Field(..., description="Temperature in Kelvin")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_celsius(cls, city: str, temp_c: float) -> "TemperatureReport":
        return cls(
            city=city,
            temp_C=temp_c,
            temp_F=round_one_decimal(celsius_to_fahrenheit(temp_c)),
            temp_K=round_one_decimal(celsius_to_kelvin(temp_c)),
        )
