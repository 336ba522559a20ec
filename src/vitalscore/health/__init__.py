"""
Health assessment engine.

Pure, synchronous scoring of one ``HealthMetrics`` into an ``Assessment``,
plus first-vs-last trend analysis over a stored history.  Storage, auth
and presentation belong to the caller.
"""

from .engine import AssessmentEngine, assess, load_history
from .models import (
    ActivityLevel,
    AlcoholConsumption,
    Assessment,
    CategoryScores,
    Cholesterol,
    DietType,
    HealthMetrics,
    HealthStatus,
    HealthTrends,
    RiskEstimates,
    SmokingStatus,
    StressLevel,
    TrendDirection,
    TrendSeries,
)
from .parsing import parse_metrics

__all__ = [
    "ActivityLevel",
    "AlcoholConsumption",
    "Assessment",
    "AssessmentEngine",
    "CategoryScores",
    "Cholesterol",
    "DietType",
    "HealthMetrics",
    "HealthStatus",
    "HealthTrends",
    "RiskEstimates",
    "SmokingStatus",
    "StressLevel",
    "TrendDirection",
    "TrendSeries",
    "assess",
    "load_history",
    "parse_metrics",
]
