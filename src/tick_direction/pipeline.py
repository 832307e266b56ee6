"""End-to-end run: parse, build, fit, predict, evaluate."""

import logging
import time
from dataclasses import dataclass
from typing import Any, List, Optional

import numpy as np

from .config import PipelineConfig
from .data.interfaces import RawSeriesSource
from .data.parser import parse_time_series
from .data.schemas import Observation
from .errors import TickDirectionError
from .evaluation.metrics import EvaluationReport, evaluate
from .features.builder import (
    LabeledDataset,
    SeriesOrder,
    build_features,
    check_ordering,
    sort_chronologically,
)
from .models.naive_bayes import GaussianNB, GaussianNBModel
from .monitoring import LoggingMetricsSink, MetricsSink

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    symbol: str
    observations: List[Observation]
    dataset: LabeledDataset
    model: GaussianNBModel
    predictions: np.ndarray
    report: EvaluationReport
    fallback_count: int
    order: SeriesOrder  # order of the observations that were labeled
    source_order: SeriesOrder

    @property
    def accuracy(self) -> float:
        return self.report.accuracy

    @property
    def status(self) -> str:
        """Run status: degraded when fallback rows were used or labels do not follow time order."""
        if self.fallback_count or self.order is not SeriesOrder.ASCENDING:
            return "degraded"
        return "ok"


class DirectionPipeline:
    """Fits and scores a next-tick direction classifier on one instrument's series."""

    def __init__(
        self,
        config: PipelineConfig | None = None,
        metrics: Optional[MetricsSink] = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.config.validate()
        self.metrics = metrics or LoggingMetricsSink()
        self.classifier = GaussianNB(var_smoothing=self.config.var_smoothing)

    def run_from_source(self, source: RawSeriesSource) -> PipelineResult:
        raw = source.fetch_raw(self.config.symbol)
        return self.run(raw, series_key=source.series_key)

    def run(self, raw: Any, series_key: Optional[str] = None) -> PipelineResult:
        start = time.perf_counter()
        try:
            result = self._run(raw, series_key or self.config.series_key)
        except TickDirectionError as e:
            self.metrics.emit_error(type(e).__name__, {"symbol": self.config.symbol, "detail": str(e)})
            raise
        latency_ms = (time.perf_counter() - start) * 1000
        self.metrics.emit_run_metrics(
            latency_ms=latency_ms,
            symbol=result.symbol,
            n_observations=len(result.observations),
            fallback_count=result.fallback_count,
            accuracy=result.accuracy,
            order=result.order.value,
            status=result.status,
        )
        return result

    def _run(self, raw: Any, series_key: str) -> PipelineResult:
        parsed = parse_time_series(raw, series_key=series_key, policy=self.config.fallback_policy)
        if parsed.fallback_count:
            logger.warning(
                "%d of %d entries for %s used the 0.0/0 numeric fallback",
                parsed.fallback_count,
                len(parsed),
                parsed.symbol,
            )

        observations = parsed.observations
        source_order = order = check_ordering(observations)
        if order is not SeriesOrder.ASCENDING:
            if self.config.sort_chronologically:
                logger.info("Series for %s is %s; sorting by timestamp", parsed.symbol, order.value)
                observations = sort_chronologically(observations)
                order = SeriesOrder.ASCENDING
            else:
                logger.warning(
                    "Series for %s is %s; labels follow source order, not time",
                    parsed.symbol,
                    order.value,
                )

        dataset = build_features(observations, min_length=self.config.min_length)
        x_train, y_train = dataset.training_pair()
        model = self.classifier.fit(x_train, y_train)
        predictions = self.classifier.predict(model, x_train)
        report = evaluate(predictions, y_train)

        return PipelineResult(
            symbol=parsed.symbol,
            observations=list(observations),
            dataset=dataset,
            model=model,
            predictions=predictions,
            report=report,
            fallback_count=parsed.fallback_count,
            order=order,
            source_order=source_order,
        )
