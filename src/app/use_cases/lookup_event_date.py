"""Use case: data de inicio do evento alvo no calendario de uma versao."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.release_schedule import EventDateLookup
from app.services.ics_event_date import find_event_date
from app.services.version_resolver import resolve_version

if TYPE_CHECKING:
    from app.protocols.calendar_source import CalendarSourceProtocol
    from config.settings import ScheduleSettings

logger = logging.getLogger(__name__)


class LookupEventDateUseCase:
    """Orquestra resolver de versao, fetch do upstream e extracao da data.

    Erros de cada etapa (InvalidVersionError, UpstreamUnavailableError,
    MalformedTimestampError) sobem sem tratamento para a camada HTTP.
    """

    def __init__(self, source: CalendarSourceProtocol, settings: ScheduleSettings) -> None:
        self._source = source
        self._settings = settings

    async def execute(self, raw_version: str | None) -> EventDateLookup:
        version = resolve_version(raw_version, self._settings)
        ics_text = await self._source.fetch_calendar(version)
        event_date = find_event_date(ics_text, self._settings.target_summary)

        logger.info(
            "event_date_lookup_done",
            extra={
                "component": "lookup_event_date",
                "version": version,
                "result": "found" if event_date is not None else "not_found",
            },
        )
        return EventDateLookup(
            version=version,
            summary=self._settings.target_summary,
            event_date=event_date,
        )
