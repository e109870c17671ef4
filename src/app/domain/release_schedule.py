"""Modelos de dominio do calendario de releases.

Valores transitorios por request: nada aqui e persistido.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import BaseModel, ConfigDict, Field


class EventDateLookup(BaseModel):
    """Resultado da busca da data de um evento no calendario de uma versao."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    version: str = Field(..., description="Token de versao ja validado pela allow-list.")
    summary: str = Field(..., description="Summary do evento procurado.")
    event_date: datetime | None = Field(
        default=None,
        description="Inicio do evento em UTC; None quando o evento nao existe.",
    )

    @property
    def found(self) -> bool:
        return self.event_date is not None
