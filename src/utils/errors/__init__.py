"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    UpstreamUnavailableError,
)

__all__ = [
    "InfrastructureError",
    "UpstreamUnavailableError",
]
