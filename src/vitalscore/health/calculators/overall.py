"""Composite score and status label."""

from vitalscore.health.models import CategoryScores, HealthStatus

# Metabolic and respiratory scores are not part of the composite.
OVERALL_WEIGHTS = {
    "blood_pressure": 0.3,
    "heart_rate": 0.2,
    "bmi": 0.2,
    "lifestyle": 0.3,
}

# (lower bound inclusive, status), highest band first
STATUS_BANDS = (
    (90, HealthStatus.EXCELLENT),
    (75, HealthStatus.GOOD),
    (60, HealthStatus.FAIR),
)


def overall_score(scores: CategoryScores) -> float:
    """Weighted composite of the category scores.  Not clamped."""
    return (
        scores.blood_pressure * OVERALL_WEIGHTS["blood_pressure"]
        + scores.heart_rate * OVERALL_WEIGHTS["heart_rate"]
        + scores.bmi * OVERALL_WEIGHTS["bmi"]
        + scores.lifestyle * OVERALL_WEIGHTS["lifestyle"]
    )


def health_status(score: float) -> HealthStatus:
    for lower_bound, status in STATUS_BANDS:
        if score >= lower_bound:
            return status
    return HealthStatus.POOR
