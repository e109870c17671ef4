"""Registro de métricas via structured logging.

As métricas saem como logs estruturados e são agregadas depois pelo
backend de logs (Cloud Logging, BigQuery etc.).

Métricas suportadas:
- Latência: tempo da chamada ao calendário upstream
- Outcome: contador de respostas por variante (success, not_found...)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "ics_schedule_client")
        operation: Nome da operação (ex: "fetch_calendar")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_outcome(outcome: str, status_code: int, correlation_id: str | None = None) -> None:
    """Registra a variante de resposta entregue ao cliente."""
    logger.info(
        "metric_outcome",
        extra={
            "metric_type": "counter",
            "outcome": outcome,
            "status_code": status_code,
            "correlation_id": correlation_id,
        },
    )
