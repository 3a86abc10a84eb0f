"""Exceções utilitárias compartilhadas."""

from .exceptions import CodecUnavailableError, InfrastructureError

__all__ = [
    "CodecUnavailableError",
    "InfrastructureError",
]
