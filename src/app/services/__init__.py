"""Serviços de aplicação.

Regras puras reutilizáveis (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.ics_event_date import (
    MalformedTimestampError,
    find_event_date,
    format_event_date,
    parse_ics_timestamp,
)
from app.services.version_resolver import InvalidVersionError, resolve_version

__all__ = [
    "InvalidVersionError",
    "MalformedTimestampError",
    "find_event_date",
    "format_event_date",
    "parse_ics_timestamp",
    "resolve_version",
]
