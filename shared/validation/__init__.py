"""Input validation shared by both services."""

from .cep_validator import CEP_LENGTH, is_valid_cep

__all__ = ["CEP_LENGTH", "is_valid_cep"]
