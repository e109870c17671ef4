"""Configuração do pytest para o proxy de datas de release."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

SAMPLE_ICS = (
    "BEGIN:VCALENDAR\r\n"
    "VERSION:2.0\r\n"
    "PRODID:-//schedule//release//EN\r\n"
    "BEGIN:VEVENT\r\n"
    "SUMMARY:Beta Release Public Availability\r\n"
    "DTSTART:20250318T140000Z\r\n"
    "END:VEVENT\r\n"
    "BEGIN:VEVENT\r\n"
    "SUMMARY:Current Final Target date\r\n"
    "DTSTART:20250615T120000Z\r\n"
    "DTEND:20250616T120000Z\r\n"
    "END:VEVENT\r\n"
    "END:VCALENDAR\r\n"
)


@pytest.fixture
def sample_ics() -> str:
    """Calendário mínimo com o evento alvo."""
    return SAMPLE_ICS


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Limpa o cache das settings antes e depois de cada teste."""
    from config.settings import get_base_settings, get_schedule_settings

    get_base_settings.cache_clear()
    get_schedule_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_schedule_settings.cache_clear()
