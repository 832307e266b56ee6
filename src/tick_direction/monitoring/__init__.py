import logging
from dataclasses import dataclass
from typing import Dict


@dataclass
class MetricsSink:
    """Interface for metrics emission; swap with real telemetry in prod."""

    def emit_run_metrics(
        self,
        latency_ms: float,
        symbol: str,
        n_observations: int,
        fallback_count: int,
        accuracy: float,
        order: str,
        status: str = "ok",
    ) -> None:
        return

    def emit_error(self, name: str, detail: Dict[str, str]) -> None:
        return


class LoggingMetricsSink(MetricsSink):
    """Logs metrics to standard logging for dev/debug."""

    def __init__(self) -> None:
        self._logger = logging.getLogger("tick_direction.metrics")

    def emit_run_metrics(
        self,
        latency_ms: float,
        symbol: str,
        n_observations: int,
        fallback_count: int,
        accuracy: float,
        order: str,
        status: str = "ok",
    ) -> None:
        self._logger.info(
            "run_metrics latency_ms=%.2f symbol=%s observations=%s fallbacks=%s accuracy=%.4f order=%s status=%s",
            latency_ms,
            symbol,
            n_observations,
            fallback_count,
            accuracy,
            order,
            status,
        )

    def emit_error(self, name: str, detail: Dict[str, str]) -> None:
        self._logger.error("run_error name=%s detail=%s", name, detail)


__all__ = ["MetricsSink", "LoggingMetricsSink"]
