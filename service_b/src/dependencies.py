"""
FastAPI dependencies for the back service.

Components are built once in ``create_app`` and stored on ``app.state``;
these functions hand them to route handlers.
"""

from fastapi import Request

from service_b.src.services import TemperatureService
from shared.tracing import TracePropagation


def get_tracing(request: Request) -> TracePropagation:
    return request.app.state.tracing


def get_temperature_service(request: Request) -> TemperatureService:
    return request.app.state.temperature_service
