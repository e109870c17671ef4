"""Builder de respostas HTTP do endpoint de datas de release.

Cada handler produz uma variante de `Outcome`; `build_response` mapeia a
variante de forma deterministica para status, headers e corpo.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import TYPE_CHECKING

from fastapi import Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, field_serializer

from app.services.ics_event_date import format_event_date

if TYPE_CHECKING:
    from config.settings import ScheduleSettings


class EventDatePayload(BaseModel):
    """Corpo de sucesso: {"event_date": "<ISO-8601 UTC>"}."""

    event_date: datetime

    @field_serializer("event_date")
    def serialize_event_date(self, value: datetime) -> str:
        return format_event_date(value)


class ErrorPayload(BaseModel):
    """Corpo de erro: {"error": "<mensagem>"}."""

    error: str


@dataclass(frozen=True, slots=True)
class Success:
    event_date: datetime


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


@dataclass(frozen=True, slots=True)
class InvalidInput:
    message: str


@dataclass(frozen=True, slots=True)
class UpstreamFailure:
    message: str


@dataclass(frozen=True, slots=True)
class MethodNotAllowed:
    pass


@dataclass(frozen=True, slots=True)
class PreflightOk:
    requested_headers: str | None = None


@dataclass(frozen=True, slots=True)
class PreflightPlain:
    pass


Outcome = (
    Success
    | NotFound
    | InvalidInput
    | UpstreamFailure
    | MethodNotAllowed
    | PreflightOk
    | PreflightPlain
)


def outcome_name(outcome: Outcome) -> str:
    """Nome estavel da variante para logs e metricas (ex: "not_found")."""
    names = {
        Success: "success",
        NotFound: "not_found",
        InvalidInput: "invalid_input",
        UpstreamFailure: "upstream_failure",
        MethodNotAllowed: "method_not_allowed",
        PreflightOk: "preflight_ok",
        PreflightPlain: "preflight_plain",
    }
    return names[type(outcome)]


def _allow_header(settings: ScheduleSettings) -> str:
    return ", ".join(settings.allowed_methods)


def cors_headers(settings: ScheduleSettings) -> dict[str, str]:
    """Headers CORS presentes em toda resposta exceto OPTIONS simples."""
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": ",".join(settings.allowed_methods),
    }


def build_response(outcome: Outcome, settings: ScheduleSettings) -> Response:
    """Converte uma variante de outcome na resposta HTTP final."""
    headers = cors_headers(settings)

    if isinstance(outcome, Success):
        if settings.cache_max_age_seconds > 0:
            headers["Cache-Control"] = f"public, max-age={settings.cache_max_age_seconds}"
        payload = EventDatePayload(event_date=outcome.event_date)
        return JSONResponse(
            content=payload.model_dump(mode="json"),
            status_code=status.HTTP_200_OK,
            headers=headers,
        )

    if isinstance(outcome, NotFound):
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=headers)

    if isinstance(outcome, InvalidInput):
        return JSONResponse(
            content=ErrorPayload(error=outcome.message).model_dump(),
            status_code=status.HTTP_400_BAD_REQUEST,
            headers=headers,
        )

    if isinstance(outcome, UpstreamFailure):
        return JSONResponse(
            content=ErrorPayload(error=outcome.message).model_dump(),
            status_code=status.HTTP_502_BAD_GATEWAY,
            headers=headers,
        )

    if isinstance(outcome, MethodNotAllowed):
        headers["Allow"] = _allow_header(settings)
        return Response(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, headers=headers)

    if isinstance(outcome, PreflightOk):
        headers["Access-Control-Max-Age"] = str(settings.cors_max_age_seconds)
        if outcome.requested_headers:
            headers["Access-Control-Allow-Headers"] = outcome.requested_headers
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=headers)

    if isinstance(outcome, PreflightPlain):
        return Response(
            status_code=status.HTTP_204_NO_CONTENT,
            headers={"Allow": _allow_header(settings)},
        )

    raise TypeError(f"Outcome desconhecido: {type(outcome).__name__}")
