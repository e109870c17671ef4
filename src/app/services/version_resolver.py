"""Resolucao do token de versao recebido na query string.

Apenas tokens da allow-list chegam a montar URL do upstream. A politica
configurada decide o que fazer com entrada ausente ou invalida:

- lenient: substitui pela versao padrao (com log de fallback)
- strict: levanta InvalidVersionError (vira 400 na camada HTTP)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging import log_fallback

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config.settings import ScheduleSettings

logger = logging.getLogger(__name__)

_COMPONENT = "version_resolver"


class InvalidVersionError(ValueError):
    """Versao ausente ou fora da allow-list (politica strict)."""

    def __init__(self, value: str | None, allowed: Sequence[str]) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid or missing 'version' parameter. "
            f"Allowed values: {', '.join(self.allowed)}"
        )


def resolve_version(raw_version: str | None, settings: ScheduleSettings) -> str:
    """Retorna um token de versao membro da allow-list.

    Args:
        raw_version: Valor bruto do parametro "version" (None se ausente).
        settings: Configuracao imutavel do servico.

    Returns:
        Token validado.

    Raises:
        InvalidVersionError: Entrada invalida sob politica strict.
    """
    if raw_version is not None and raw_version in settings.allowed_versions:
        return raw_version

    reason = "version_missing" if raw_version is None else "version_not_allowed"
    if settings.version_policy == "strict":
        logger.info(
            "version_rejected",
            extra={"component": _COMPONENT, "reason": reason},
        )
        raise InvalidVersionError(raw_version, settings.allowed_versions)

    log_fallback(logger, _COMPONENT, reason=reason)
    return settings.default_version
