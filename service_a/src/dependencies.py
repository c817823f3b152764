"""
FastAPI dependencies for the front service.

Components are built once in ``create_app`` and stored on ``app.state``.
"""

from fastapi import Request

from service_a.src.clients import TemperatureClient
from shared.tracing import TracePropagation


def get_tracing(request: Request) -> TracePropagation:
    return request.app.state.tracing


def get_temperature_client(request: Request) -> TemperatureClient:
    return request.app.state.temperature_client
