"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta a
implementação concreta da fonte de calendários ao protocolo.

Uso:
    from app.bootstrap import initialize_app, create_calendar_source

    initialize_app()
    source = create_calendar_source(get_schedule_settings())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.calendar.ics_schedule_client import IcsScheduleClient
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_schedule_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols.calendar_source import CalendarSourceProtocol
    from config.settings import ScheduleSettings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço. DEBUG=true força
    nível DEBUG independente de LOG_LEVEL.
    """
    base_settings = get_base_settings()
    configure_logging(
        level="DEBUG" if base_settings.debug else base_settings.log_level,
        service_name=base_settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base_settings = get_base_settings()
    environment = base_settings.environment
    strict_mode = base_settings.is_production or base_settings.is_staging
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base_settings.validate())
    errors.extend(f"schedule: {error}" for error in get_schedule_settings().config_errors())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


def create_calendar_source(
    settings: ScheduleSettings,
    client: httpx.AsyncClient | None = None,
) -> CalendarSourceProtocol:
    """Cria a fonte de calendários ICS do upstream.

    Args:
        settings: Configuração imutável do serviço.
        client: AsyncClient compartilhado (lifespan); None abre um por chamada.
    """
    return IcsScheduleClient(settings, client=client)
