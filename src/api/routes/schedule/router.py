"""Endpoint da data alvo de release.

Endpoints:
- GET /?version=f-41: data de inicio do evento alvo no calendario da versao
- OPTIONS /: preflight CORS ou OPTIONS simples (header Allow)
- Qualquer outro metodo em /: 405 sem corpo (rota explicita ou exception handler)

Fluxo do GET:
1. Resolve a versao (allow-list + politica lenient/strict)
2. Busca o ICS no upstream (uma chamada, sem retry)
3. Extrai o DTSTART do evento alvo
4. 200 com a data, 204 se o evento nao existe
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.schedule.responses import (
    InvalidInput,
    MethodNotAllowed,
    NotFound,
    Outcome,
    PreflightOk,
    PreflightPlain,
    Success,
    UpstreamFailure,
    build_response,
    outcome_name,
)
from app.bootstrap import create_calendar_source
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    record_outcome,
    reset_correlation_id,
    set_correlation_id,
)
from app.services.ics_event_date import MalformedTimestampError
from app.services.version_resolver import InvalidVersionError
from app.use_cases import LookupEventDateUseCase
from config.settings import get_schedule_settings
from utils.errors import UpstreamUnavailableError

if TYPE_CHECKING:
    from app.protocols.calendar_source import CalendarSourceProtocol
    from config.settings import ScheduleSettings

logger = logging.getLogger(__name__)

router = APIRouter()

_PREFLIGHT_HEADERS = (
    "origin",
    "access-control-request-method",
    "access-control-request-headers",
)


def _get_calendar_source(request: Request, settings: ScheduleSettings) -> CalendarSourceProtocol:
    """Usa a fonte criada no lifespan; fora dele cria uma sob demanda."""
    app = request.scope.get("app")
    source = getattr(getattr(app, "state", None), "calendar_source", None)
    if source is None:
        source = create_calendar_source(settings)
    return source


def _respond(outcome: Outcome, settings: ScheduleSettings) -> Response:
    response = build_response(outcome, settings)
    correlation_id = get_correlation_id()
    if correlation_id:
        response.headers[CORRELATION_ID_HEADER] = correlation_id
    record_outcome(outcome_name(outcome), response.status_code, correlation_id)
    return response


async def _lookup_outcome(request: Request, settings: ScheduleSettings) -> Outcome:
    # Parametro repetido: vale o primeiro valor
    versions = request.query_params.getlist("version")
    raw_version = versions[0] if versions else None
    use_case = LookupEventDateUseCase(_get_calendar_source(request, settings), settings)

    try:
        lookup = await use_case.execute(raw_version)
    except InvalidVersionError as exc:
        return InvalidInput(message=str(exc))
    except UpstreamUnavailableError as exc:
        logger.warning(
            "event_date_upstream_unavailable",
            extra={"status_code": exc.status_code, "reason": str(exc)},
        )
        return UpstreamFailure(message="Upstream calendar unavailable")
    except MalformedTimestampError as exc:
        logger.warning(
            "event_date_malformed_dtstart",
            extra={"reason": exc.reason},
        )
        return UpstreamFailure(message="Upstream calendar returned an unparseable DTSTART")

    if lookup.event_date is None:
        return NotFound()
    return Success(event_date=lookup.event_date)


@router.get("/")
async def get_event_date(request: Request) -> Response:
    """Retorna {"event_date": ...} do evento alvo para a versao pedida."""
    settings = get_schedule_settings()
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        outcome = await _lookup_outcome(request, settings)
        return _respond(outcome, settings)
    finally:
        reset_correlation_id(token)


@router.options("/")
async def options_event_date(request: Request) -> Response:
    """Preflight CORS completo ou OPTIONS simples.

    Preflight exige Origin, Access-Control-Request-Method e
    Access-Control-Request-Headers; sem os tres, responde so com Allow.
    """
    settings = get_schedule_settings()
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        if all(request.headers.get(name) is not None for name in _PREFLIGHT_HEADERS):
            outcome: Outcome = PreflightOk(
                requested_headers=request.headers.get("access-control-request-headers"),
            )
        else:
            outcome = PreflightPlain()
        return _respond(outcome, settings)
    finally:
        reset_correlation_id(token)


def _method_not_allowed(request: Request) -> Response:
    settings = get_schedule_settings()
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        logger.info("method_not_allowed", extra={"method": request.method})
        return _respond(MethodNotAllowed(), settings)
    finally:
        reset_correlation_id(token)


@router.api_route("/", methods=["HEAD", "POST", "PUT", "PATCH", "DELETE"])
async def reject_method(request: Request) -> Response:
    """Metodos nao suportados: 405 sem corpo."""
    return _method_not_allowed(request)


async def method_not_allowed_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> Response:
    """Exception handler para o 405 gerado pelo roteamento.

    Cobre metodos sem rota declarada (TRACE, CONNECT, PROPFIND, verbos
    custom) em /. Demais HTTPException seguem o handler padrao.
    """
    if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED or request.url.path != "/":
        return await http_exception_handler(request, exc)
    return _method_not_allowed(request)
