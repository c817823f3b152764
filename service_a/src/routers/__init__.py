"""API routers for the front service."""

from .temperature import router as temperature_router

__all__ = ["temperature_router"]
