"""
Longitudinal trend analysis across stored assessments.

``analyze_trends`` compares the first and the last assessment of a
chronological history (not adjacent pairs) and classifies each tracked
metric as increasing, decreasing or stable using a percent-change
threshold.  The remaining helpers select the history to analyze:
named time windows, chronological ordering, and a most-recent-N limit.
"""

from __future__ import annotations

import calendar
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from loguru import logger

from vitalscore.core.exceptions import InsufficientHistory, InvalidInput
from vitalscore.health.models import (
    Assessment,
    BloodPressurePoint,
    HealthTrends,
    TrendDirection,
    TrendPoint,
    TrendSeries,
)
from vitalscore.health.parsing import parse_timestamp

DEFAULT_THRESHOLD_PCT = 5.0
DEFAULT_HISTORY_LIMIT = 10


class TimeWindow(StrEnum):
    """Named look-back windows for history queries."""

    ONE_MONTH = "1month"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"
    ONE_YEAR = "1year"

    @property
    def months(self) -> int:
        return _WINDOW_MONTHS[self]


_WINDOW_MONTHS = {
    TimeWindow.ONE_MONTH: 1,
    TimeWindow.THREE_MONTHS: 3,
    TimeWindow.SIX_MONTHS: 6,
    TimeWindow.ONE_YEAR: 12,
}


@dataclass(frozen=True)
class TrendReport:
    """History summary for one time window."""

    window: TimeWindow
    series: TrendSeries
    summary: HealthTrends | None
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "timeframe": str(self.window),
            "count": self.count,
            "trends": self.series.to_dict(),
            "summary": self.summary.to_dict() if self.summary else None,
        }


# ── Classification ───────────────────────────────────────────────────


def calculate_trend(old_value: float, new_value: float, threshold_pct: float = DEFAULT_THRESHOLD_PCT) -> TrendDirection:
    """Classify the change from ``old_value`` to ``new_value``.

    A change strictly beyond +/- ``threshold_pct`` percent is a trend;
    anything within it is stable.  With a zero baseline the percent
    change is undefined, so the sign of the new value decides.
    """
    if old_value == 0:
        if new_value > 0:
            return TrendDirection.INCREASING
        if new_value < 0:
            return TrendDirection.DECREASING
        return TrendDirection.STABLE

    change = (new_value - old_value) / old_value * 100
    if change > threshold_pct:
        return TrendDirection.INCREASING
    if change < -threshold_pct:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def analyze_trends(
    assessments: Sequence[Assessment],
    threshold_pct: float = DEFAULT_THRESHOLD_PCT,
) -> HealthTrends | None:
    """Compare the oldest and newest assessment.

    Args:
        assessments: History ordered oldest first.
        threshold_pct: Percent change that counts as a trend.

    Returns:
        Per-metric directions, or None when fewer than two assessments exist.
    """
    if len(assessments) < 2:
        logger.debug(f"No trend available: {len(assessments)} assessment(s) in history")
        return None

    previous = assessments[0]
    newest = assessments[-1]

    trends = HealthTrends(
        weight=calculate_trend(previous.bmi, newest.bmi, threshold_pct),
        blood_pressure=calculate_trend(previous.metrics.systolic, newest.metrics.systolic, threshold_pct),
        glucose=calculate_trend(previous.metrics.glucose_level, newest.metrics.glucose_level, threshold_pct),
        overall=calculate_trend(previous.overall_score, newest.overall_score, threshold_pct),
    )
    logger.info(f"Trends over {len(assessments)} assessments: {trends.to_dict()}")
    return trends


def require_trends(
    assessments: Sequence[Assessment],
    threshold_pct: float = DEFAULT_THRESHOLD_PCT,
) -> HealthTrends:
    """Like ``analyze_trends`` but raises instead of returning None.

    Raises:
        InsufficientHistory: If fewer than two assessments are supplied.
    """
    trends = analyze_trends(assessments, threshold_pct)
    if trends is None:
        raise InsufficientHistory(f"At least 2 assessments are needed for trends, got {len(assessments)}")
    return trends


# ── History selection ────────────────────────────────────────────────


def _subtract_months(moment: datetime, months: int) -> datetime:
    """Calendar-month subtraction, clamping the day to the target month's end."""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def as_window(window: TimeWindow | str) -> TimeWindow:
    try:
        return TimeWindow(window)
    except ValueError:
        valid = ", ".join(w.value for w in TimeWindow)
        raise InvalidInput(f"Unknown time window {window!r}. Expected one of: {valid}") from None


def window_start(window: TimeWindow | str, now: datetime | None = None) -> datetime:
    """Earliest timestamp inside ``window`` when looking back from ``now`` (naive means UTC)."""
    window = as_window(window)
    now = parse_timestamp(now) if now else datetime.now(UTC)
    return _subtract_months(now, window.months)


def sort_chronologically(assessments: Sequence[Assessment]) -> list[Assessment]:
    return sorted(assessments, key=lambda a: a.timestamp)


def filter_window(
    assessments: Sequence[Assessment],
    window: TimeWindow | str,
    now: datetime | None = None,
) -> list[Assessment]:
    """Assessments with ``window_start <= timestamp <= now``, oldest first.

    Raises:
        InvalidInput: If ``window`` is not a known window name.
    """
    now = parse_timestamp(now) if now else datetime.now(UTC)
    start = window_start(window, now)
    selected = [a for a in assessments if start <= a.timestamp <= now]
    logger.debug(f"Window {window}: kept {len(selected)}/{len(assessments)} assessments since {start.isoformat()}")
    return sort_chronologically(selected)


def latest(assessments: Sequence[Assessment], limit: int = DEFAULT_HISTORY_LIMIT) -> list[Assessment]:
    """The ``limit`` most recent assessments, returned oldest first."""
    if limit < 1:
        raise InvalidInput(f"History limit must be at least 1, got {limit}")
    return sort_chronologically(assessments)[-limit:]


def _points(assessments: Sequence[Assessment], value_of: Callable[[Assessment], float]) -> list[TrendPoint]:
    return [TrendPoint(date=a.timestamp, value=value_of(a)) for a in assessments]


def trend_series(assessments: Sequence[Assessment]) -> TrendSeries:
    """Per-metric time series in chronological order."""
    ordered = sort_chronologically(assessments)
    return TrendSeries(
        overall_score=_points(ordered, lambda a: a.overall_score),
        bmi=_points(ordered, lambda a: a.bmi),
        blood_pressure=[
            BloodPressurePoint(date=a.timestamp, systolic=a.metrics.systolic, diastolic=a.metrics.diastolic)
            for a in ordered
        ],
        lifestyle=_points(ordered, lambda a: a.scores.lifestyle),
    )


def summarize_history(
    assessments: Sequence[Assessment],
    window: TimeWindow | str = TimeWindow.SIX_MONTHS,
    now: datetime | None = None,
    threshold_pct: float = DEFAULT_THRESHOLD_PCT,
) -> TrendReport:
    """Window the history, then build its series and first-vs-last summary."""
    window = as_window(window)
    selected = filter_window(assessments, window, now)
    return TrendReport(
        window=window,
        series=trend_series(selected),
        summary=analyze_trends(selected, threshold_pct),
        count=len(selected),
    )
