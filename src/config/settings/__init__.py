"""Agregador de settings do serviço de datas de release.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Schedule settings
from config.settings.schedule import (
    ScheduleSettings,
    VersionPolicy,
    get_schedule_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    "Environment",
    # Schedule
    "ScheduleSettings",
    "VersionPolicy",
    "get_base_settings",
    "get_schedule_settings",
]
