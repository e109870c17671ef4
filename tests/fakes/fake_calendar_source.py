"""Fake in-memory da fonte de calendários para testes deterministas."""

from __future__ import annotations

from utils.errors import UpstreamUnavailableError


class FakeCalendarSource:
    """Implementa o protocolo sem IO.

    Retorna sempre o mesmo documento (ou levanta o erro configurado) e
    guarda as versões pedidas para asserts.
    """

    def __init__(
        self,
        document: str = "",
        *,
        error: UpstreamUnavailableError | None = None,
    ) -> None:
        self.document = document
        self._error = error
        self.requested_versions: list[str] = []

    async def fetch_calendar(self, version: str) -> str:
        self.requested_versions.append(version)
        if self._error is not None:
            raise self._error
        return self.document
