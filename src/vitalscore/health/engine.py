"""
Assessment engine — metrics in, immutable ``Assessment`` out.

``assess`` is the whole pipeline as a plain function: normalize → score
→ estimate risks → combine.  ``AssessmentEngine`` binds the same
pipeline to trend/history settings so a request handler can keep one
configured object around.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from loguru import logger

from .calculators.overall import health_status, overall_score
from .calculators.risk import estimate_risks
from .calculators.scores import score_categories
from .calculators.trends import (
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_THRESHOLD_PCT,
    TimeWindow,
    TrendReport,
    analyze_trends,
    as_window,
    latest,
    require_trends,
    summarize_history,
)
from .models import Assessment, HealthMetrics, HealthTrends
from .parsing import parse_metrics, parse_timestamp

if TYPE_CHECKING:
    from vitalscore.core.config import Config


def assess(metrics: HealthMetrics | Mapping[str, Any], now: datetime | None = None) -> Assessment:
    """Score one set of metrics.

    Args:
        metrics: A ``HealthMetrics`` or a raw payload accepted by ``parse_metrics``.
        now: Assessment timestamp. Defaults to the current UTC time; a naive
            datetime is taken as UTC.

    Raises:
        InvalidInput: If the metrics are missing fields or out of domain.
    """
    if not isinstance(metrics, HealthMetrics):
        metrics = parse_metrics(metrics)
    now = parse_timestamp(now) if now else datetime.now(UTC)

    bmi = metrics.bmi
    logger.debug(f"Derived BMI {bmi:.2f} from height={metrics.height} weight={metrics.weight}")

    scores = score_categories(metrics)
    logger.debug(f"Category scores: {scores.to_dict()}")

    risks = estimate_risks(metrics, scores)
    logger.debug(f"Risk estimates: {risks.to_dict()}")

    overall = overall_score(scores)
    status = health_status(overall)

    assessment = Assessment(
        timestamp=now,
        metrics=metrics,
        scores=scores,
        risks=risks,
        overall_score=overall,
        health_status=status,
    )
    logger.info(f"Assessment complete: overall={overall:.1f} status={status}")
    return assessment


def load_history(records: Iterable[Assessment | Mapping[str, Any]]) -> list[Assessment]:
    """Restore stored records (dicts from ``Assessment.to_dict``) into assessments."""
    return [r if isinstance(r, Assessment) else Assessment.from_dict(r) for r in records]


class AssessmentEngine:
    """Configured entry point for assessments and history trends.

    Attributes:
        threshold_pct: Percent change that counts as a trend.
        history_limit: How many recent assessments ``recent_trends`` considers.
        default_window: Window used by ``history_report`` when none is given.
    """

    def __init__(
        self,
        threshold_pct: float = DEFAULT_THRESHOLD_PCT,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        default_window: TimeWindow | str = TimeWindow.SIX_MONTHS,
    ):
        self.threshold_pct = threshold_pct
        self.history_limit = history_limit
        self.default_window = as_window(default_window)

    @classmethod
    def from_config(cls, config: Config) -> AssessmentEngine:
        """Build from the ``trends`` section of a validated config.

        Raises:
            ConfigurationError: If the config fails validation.
        """
        trends = config.validated().trends
        return cls(
            threshold_pct=trends.threshold_pct,
            history_limit=trends.history_limit,
            default_window=trends.default_window,
        )

    def assess(self, metrics: HealthMetrics | Mapping[str, Any], now: datetime | None = None) -> Assessment:
        return assess(metrics, now)

    def trends(self, history: Sequence[Assessment]) -> HealthTrends | None:
        """First-vs-last trends over a chronological history (None if < 2)."""
        return analyze_trends(history, self.threshold_pct)

    def require_trends(self, history: Sequence[Assessment]) -> HealthTrends:
        return require_trends(history, self.threshold_pct)

    def recent_trends(self, history: Sequence[Assessment]) -> HealthTrends | None:
        """Trends over the ``history_limit`` most recent assessments."""
        return analyze_trends(latest(history, self.history_limit), self.threshold_pct)

    def history_report(
        self,
        history: Sequence[Assessment],
        window: TimeWindow | str | None = None,
        now: datetime | None = None,
    ) -> TrendReport:
        return summarize_history(history, window or self.default_window, now, self.threshold_pct)
