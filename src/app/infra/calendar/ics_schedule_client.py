"""Client httpx do calendario de releases publicado em ICS."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import httpx

from app.observability import get_correlation_id, record_latency
from app.protocols.calendar_source import CalendarSourceProtocol
from utils.errors import UpstreamUnavailableError

if TYPE_CHECKING:
    from config.settings import ScheduleSettings

logger = logging.getLogger(__name__)

_COMPONENT = "ics_schedule_client"


class IcsScheduleClient(CalendarSourceProtocol):
    """Busca o arquivo "<versao>-key.ics" do upstream.

    Uma unica requisicao GET por chamada, sem retry. Se um AsyncClient
    compartilhado for fornecido (lifespan da app) ele e reutilizado; caso
    contrario abre um client curto por chamada.
    """

    __slots__ = ("_client", "_settings")

    def __init__(
        self,
        settings: ScheduleSettings,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._client = client

    async def fetch_calendar(self, version: str) -> str:
        url = self._settings.build_upstream_url(version)
        started_at = time.perf_counter()
        try:
            response = await self._get(url)
        except httpx.HTTPError as exc:
            self._log_error(version=version, exc=exc)
            raise UpstreamUnavailableError("upstream_request_failed", url=url) from exc
        finally:
            record_latency(
                _COMPONENT,
                "fetch_calendar",
                (time.perf_counter() - started_at) * 1000,
                get_correlation_id(),
            )

        if not response.is_success:
            self._log_error(version=version, status_code=response.status_code)
            raise UpstreamUnavailableError(
                "upstream_bad_status",
                url=url,
                status_code=response.status_code,
            )

        logger.info(
            "upstream_fetched",
            extra={
                "component": _COMPONENT,
                "version": version,
                "status_code": response.status_code,
                "content_length": len(response.content),
            },
        )
        return response.text

    def _build_headers(self) -> dict[str, str]:
        headers = {"Accept": "text/calendar, text/plain;q=0.9, */*;q=0.1"}
        if self._settings.rewrite_origin:
            headers["Origin"] = self._settings.upstream_origin
        return headers

    async def _get(self, url: str) -> httpx.Response:
        headers = self._build_headers()
        timeout = self._settings.request_timeout_seconds
        if self._client is not None:
            return await self._client.get(url, headers=headers, timeout=timeout)
        async with httpx.AsyncClient(timeout=timeout) as client:
            return await client.get(url, headers=headers)

    def _log_error(
        self,
        *,
        version: str,
        status_code: int | None = None,
        exc: Exception | None = None,
    ) -> None:
        logger.warning(
            "upstream_fetch_failed",
            extra={
                "component": _COMPONENT,
                "action": "fetch_calendar",
                "result": "error",
                "version": version,
                "status_code": status_code,
                "error_type": type(exc).__name__ if exc else None,
                "correlation_id": get_correlation_id(),
            },
        )
