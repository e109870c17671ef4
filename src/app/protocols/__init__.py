"""Protocolos e contratos do core da aplicação."""

from .calendar_source import CalendarSourceProtocol

__all__ = ["CalendarSourceProtocol"]
