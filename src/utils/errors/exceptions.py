"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class UpstreamUnavailableError(InfrastructureError):
    """Falha ao obter o calendário upstream (rede, timeout ou status não-2xx).

    Attributes:
        url: URL requisitada ao upstream.
        status_code: Status HTTP recebido, ou None em falha de transporte.
    """

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
