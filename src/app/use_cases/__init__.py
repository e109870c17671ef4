"""Use cases da aplicação."""

from .lookup_event_date import LookupEventDateUseCase

__all__ = ["LookupEventDateUseCase"]
