"""API routers for the back service."""

from .cep import router as cep_router

__all__ = ["cep_router"]
