"""Entrypoint do proxy de datas de release.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.schedule.router import method_not_allowed_handler
from app.bootstrap import (
    create_calendar_source,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_schedule_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Abre o AsyncClient compartilhado com o upstream

    Shutdown:
    - Fecha o AsyncClient
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()

    settings = get_schedule_settings()
    http_client = httpx.AsyncClient(timeout=settings.request_timeout_seconds)
    app.state.http_client = http_client
    app.state.calendar_source = create_calendar_source(settings, client=http_client)

    try:
        yield
    finally:
        logger.info("app_shutting_down", extra={"service": service_name})
        app.state.calendar_source = None
        await http_client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    CORS é aplicado pelo builder de respostas do endpoint, não por
    middleware: o preflight só é reconhecido com os três headers.
    """
    base_settings = get_base_settings()

    # Desabilita docs em produção
    docs_enabled = not base_settings.is_production

    fastapi_app = FastAPI(
        title="Release Date Proxy",
        description="Data alvo de release extraída do calendário ICS publicado por versão",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    fastapi_app.include_router(create_api_router())
    # 405 do roteamento (métodos sem rota) também sai sem corpo e com CORS
    fastapi_app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    logger.info("app_configured", extra={"service": base_settings.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (reload só em development)."""
    import uvicorn

    port = int(os.getenv("PORT", "8080"))
    logger.info("Starting release date proxy", extra={"port": port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=port,
        reload=get_base_settings().is_development,
    )


if __name__ == "__main__":
    main()
