"""Extracao da data de inicio de um evento em um documento ICS.

Nao e um parser iCal: procura a primeira linha "SUMMARY:<summary>" e le a
linha imediatamente seguinte, que precisa ser "DTSTART:YYYYMMDDTHHMMSSZ".
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

SUMMARY_PREFIX = "SUMMARY:"
DTSTART_PREFIX = "DTSTART:"

_LINE_BREAK = re.compile(r"\r?\n")
_ICS_UTC_TIMESTAMP = re.compile(r"[0-9]{8}T[0-9]{6}Z")


class MalformedTimestampError(ValueError):
    """DTSTART fora do formato YYYYMMDDTHHMMSSZ ou com data impossivel."""

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Malformed DTSTART value ({reason}): {raw[:32]!r}")


def parse_ics_timestamp(raw: str) -> datetime:
    """Converte "YYYYMMDDTHHMMSSZ" em datetime UTC.

    Leitura por largura fixa: [0:4] ano, [4:6] mes, [6:8] dia, [9:11] hora,
    [11:13] minuto, [13:15] segundo. O indice 8 e o separador "T".

    Raises:
        MalformedTimestampError: Largura/caracteres invalidos ou data impossivel.
    """
    value = raw.strip()
    if not _ICS_UTC_TIMESTAMP.fullmatch(value):
        raise MalformedTimestampError(raw, "format")

    try:
        return datetime(
            int(value[0:4]),
            int(value[4:6]),
            int(value[6:8]),
            int(value[9:11]),
            int(value[11:13]),
            int(value[13:15]),
            tzinfo=UTC,
        )
    except ValueError as exc:
        raise MalformedTimestampError(raw, "out_of_range") from exc


def format_event_date(value: datetime) -> str:
    """Serializa em ISO-8601 UTC com milissegundos e sufixo Z."""
    utc_value = value.astimezone(UTC)
    return utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def find_event_date(ics_text: str, summary: str) -> datetime | None:
    """Retorna o DTSTART do primeiro evento cujo SUMMARY comeca com `summary`.

    Args:
        ics_text: Documento ICS completo.
        summary: Titulo do evento procurado.

    Returns:
        Instante UTC, ou None se o SUMMARY nao existir ou a linha seguinte
        nao for um DTSTART.

    Raises:
        MalformedTimestampError: DTSTART encontrado mas invalido.
    """
    marker = f"{SUMMARY_PREFIX}{summary}"
    lines = _LINE_BREAK.split(ics_text)

    for index, line in enumerate(lines):
        if not line.startswith(marker):
            continue
        # Apenas o primeiro SUMMARY conta
        if index + 1 >= len(lines):
            return None
        next_line = lines[index + 1]
        if not next_line.startswith(DTSTART_PREFIX):
            return None
        return parse_ics_timestamp(next_line[len(DTSTART_PREFIX):])

    return None
