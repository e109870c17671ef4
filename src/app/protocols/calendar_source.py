"""Contrato da fonte de calendarios ICS por versao.

Mantemos apenas o protocolo aqui para que testes substituam o upstream
real por um documento fixo.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CalendarSourceProtocol(Protocol):
    """Fonte do documento ICS de uma versao."""

    async def fetch_calendar(self, version: str) -> str:
        """Retorna o texto do calendario da versao (token ja validado).

        Raises:
            UpstreamUnavailableError: Falha de rede, timeout ou status nao-2xx.
        """
        ...
