"""
Disease-risk estimates.

Each estimator sums non-negative weighted contributions and caps the
total at 100.  The results are ordinal severity indicators, not
calibrated probabilities.
"""

from collections.abc import Iterable

from vitalscore.health.models import ActivityLevel, CategoryScores, HealthMetrics, RiskEstimates

MAX_RISK = 100

# Blood-pressure category score below which BP counts as a risk factor.
BP_SCORE_RISK_CUTOFF = 70


def _has(conditions: Iterable[str] | None, tag: str) -> bool:
    return conditions is not None and tag in conditions


def heart_disease_risk(
    age: int,
    gender: str,
    bmi: float,
    blood_pressure_score: float,
    conditions: Iterable[str] | None = None,
) -> float:
    risk = 0
    risk += 30 if age > 50 else 10
    risk += 20 if gender == "male" else 15
    risk += 20 if bmi > 25 else 10
    risk += 30 if blood_pressure_score < BP_SCORE_RISK_CUTOFF else 10
    risk += 40 if _has(conditions, "heartDisease") else 0
    return min(risk, MAX_RISK)


def stroke_risk(age: int, blood_pressure_score: float, conditions: Iterable[str] | None = None) -> float:
    risk = 0
    risk += 35 if age > 60 else 15
    risk += 35 if blood_pressure_score < BP_SCORE_RISK_CUTOFF else 15
    risk += 30 if _has(conditions, "hypertension") else 0
    return min(risk, MAX_RISK)


def diabetes_risk(bmi: float, family_history: str | None, conditions: Iterable[str] | None = None) -> float:
    """BMI, family history (case-insensitive mention of diabetes) and diagnosis."""
    risk = 0
    risk += 40 if bmi > 30 else 20
    risk += 30 if family_history and "diabetes" in family_history.lower() else 0
    risk += 40 if _has(conditions, "diabetes") else 0
    return min(risk, MAX_RISK)


def obesity_risk(bmi: float, activity_level: ActivityLevel | str) -> float:
    risk = 0
    if bmi > 30:
        risk += 50
    elif bmi > 25:
        risk += 30
    else:
        risk += 10

    if activity_level == ActivityLevel.SEDENTARY:
        risk += 30
    elif activity_level == ActivityLevel.MODERATE:
        risk += 15
    else:
        risk += 5
    return min(risk, MAX_RISK)


def hypertension_risk(systolic: float, diastolic: float, age: int) -> float:
    risk = 0
    risk += 40 if systolic > 140 or diastolic > 90 else 20
    risk += 30 if age > 50 else 15
    return min(risk, MAX_RISK)


def estimate_risks(metrics: HealthMetrics, scores: CategoryScores) -> RiskEstimates:
    """Run all five estimators; the BP-dependent ones reuse ``scores.blood_pressure``."""
    bmi = metrics.bmi
    conditions = metrics.medical_conditions
    return RiskEstimates(
        heart_disease=heart_disease_risk(metrics.age, metrics.gender, bmi, scores.blood_pressure, conditions),
        stroke=stroke_risk(metrics.age, scores.blood_pressure, conditions),
        diabetes=diabetes_risk(bmi, metrics.family_history, conditions),
        obesity=obesity_risk(bmi, metrics.activity_level),
        hypertension=hypertension_risk(metrics.systolic, metrics.diastolic, metrics.age),
    )
