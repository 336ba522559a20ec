"""Health calculators — BMI, category scores, risks, composite, trends."""

from .normalizer import calculate_bmi
from .overall import health_status, overall_score
from .risk import (
    diabetes_risk,
    estimate_risks,
    heart_disease_risk,
    hypertension_risk,
    obesity_risk,
    stroke_risk,
)
from .scores import (
    blood_pressure_score,
    bmi_score,
    heart_rate_score,
    lifestyle_score,
    metabolic_score,
    respiratory_score,
    score_categories,
)
from .trends import (
    TimeWindow,
    TrendReport,
    analyze_trends,
    calculate_trend,
    filter_window,
    latest,
    require_trends,
    sort_chronologically,
    summarize_history,
    trend_series,
    window_start,
)

__all__ = [
    "TimeWindow",
    "TrendReport",
    "analyze_trends",
    "blood_pressure_score",
    "bmi_score",
    "calculate_bmi",
    "calculate_trend",
    "diabetes_risk",
    "estimate_risks",
    "filter_window",
    "health_status",
    "heart_disease_risk",
    "heart_rate_score",
    "hypertension_risk",
    "latest",
    "lifestyle_score",
    "metabolic_score",
    "obesity_risk",
    "overall_score",
    "require_trends",
    "respiratory_score",
    "score_categories",
    "sort_chronologically",
    "stroke_risk",
    "summarize_history",
    "trend_series",
    "window_start",
]
