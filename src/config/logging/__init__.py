"""Logging estruturado JSON do proxy de datas de release.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap
    configure_logging(level="INFO", service_name="release_date_proxy")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("upstream_fetched", extra={"version": "f-41"})

Todo record sai com: asctime, level, logger, message, correlation_id, service.
Nunca logar o corpo bruto do calendário upstream.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
