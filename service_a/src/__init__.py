"""Front service: validates postal codes and delegates to the back service."""

__version__ = "1.0.0"
