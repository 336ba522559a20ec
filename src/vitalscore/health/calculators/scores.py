"""
Category scores — one sub-score per physiological dimension.

Each scorer is a pure function of its arguments.  Most results land in
0-100 by construction; metabolic and respiratory clamp at 0, blood
pressure is deliberately left unclamped.
"""

from vitalscore.health.models import (
    ActivityLevel,
    AlcoholConsumption,
    CategoryScores,
    Cholesterol,
    DietType,
    HealthMetrics,
    SmokingStatus,
    StressLevel,
)

# === Reference values ===

IDEAL_SYSTOLIC = 120
IDEAL_DIASTOLIC = 80
IDEAL_HEART_RATE = 80

# === Lifestyle point table ===

ACTIVITY_POINTS = {
    ActivityLevel.ACTIVE: 25,
    ActivityLevel.MODERATE: 20,
    ActivityLevel.SEDENTARY: 5,
}
SMOKING_POINTS = {
    SmokingStatus.NON_SMOKER: 25,
    SmokingStatus.FORMER_SMOKER: 15,
    SmokingStatus.CURRENT_SMOKER: 5,
}
ALCOHOL_POINTS = {
    AlcoholConsumption.NEVER: 15,
    AlcoholConsumption.OCCASIONAL: 10,
    AlcoholConsumption.REGULAR: 5,
}
STRESS_POINTS = {
    StressLevel.LOW: 10,
    StressLevel.MODERATE: 7,
    StressLevel.HIGH: 3,
}
DIET_POINTS = {
    DietType.BALANCED: 10,
    DietType.VEGETARIAN: 8,
    DietType.VEGAN: 8,
    DietType.KETO: 7,
}
DIET_DEFAULT_POINTS = 5


def blood_pressure_score(systolic: float, diastolic: float) -> float:
    """Mean distance from 120/80, scored out of 100.  Not clamped."""
    systolic_score = 100 - abs(IDEAL_SYSTOLIC - systolic)
    diastolic_score = 100 - abs(IDEAL_DIASTOLIC - diastolic)
    return (systolic_score + diastolic_score) / 2


def heart_rate_score(heart_rate: float) -> float:
    """Resting heart rate; the 60-100 bpm band is scored by distance from 80."""
    if heart_rate < 60:
        return 70
    if heart_rate > 100:
        return 60
    return 100 - abs(IDEAL_HEART_RATE - heart_rate)


def bmi_score(bmi: float) -> float:
    # Order matters: underweight, obese, overweight, normal.
    if bmi < 18.5:
        return 70
    if bmi > 30:
        return 50
    if bmi > 25:
        return 80
    return 100


def metabolic_score(glucose_level: float, cholesterol: Cholesterol) -> float:
    """Glucose and lipid panel deductions from 100, floored at 0.

    Glucose outside 70-140 mg/dL costs 20; otherwise outside 80-120 costs 10.
    Total > 200, LDL > 130 and HDL < 40 each cost 10.
    """
    score = 100

    if glucose_level < 70 or glucose_level > 140:
        score -= 20
    elif glucose_level < 80 or glucose_level > 120:
        score -= 10

    if cholesterol.total > 200:
        score -= 10
    if cholesterol.ldl > 130:
        score -= 10
    if cholesterol.hdl < 40:
        score -= 10

    return max(0, score)


def respiratory_score(respiratory_rate: float, oxygen_saturation: float) -> float:
    """Breathing rate and SpO2 deductions from 100, floored at 0.

    Rate outside 12-20/min costs 15.  SpO2 below 90% costs 40, otherwise
    below 95% costs 20.
    """
    score = 100

    if respiratory_rate < 12 or respiratory_rate > 20:
        score -= 15

    if oxygen_saturation < 90:
        score -= 40
    elif oxygen_saturation < 95:
        score -= 20

    return max(0, score)


def sleep_points(sleep_hours: float) -> int:
    if 7 <= sleep_hours <= 9:
        return 15
    if 6 <= sleep_hours <= 10:
        return 10
    return 5


def lifestyle_score(
    activity_level: ActivityLevel | str,
    smoking_status: SmokingStatus | str,
    alcohol_consumption: AlcoholConsumption | str,
    sleep_hours: float,
    stress_level: StressLevel | str,
    diet_type: DietType | str,
) -> float:
    """Additive six-factor lifestyle table (max 100).

    Unrecognized categorical values earn 0 points, except diet which
    falls back to the "other" row.
    """
    score = 0
    score += ACTIVITY_POINTS.get(activity_level, 0)
    score += SMOKING_POINTS.get(smoking_status, 0)
    score += ALCOHOL_POINTS.get(alcohol_consumption, 0)
    score += sleep_points(sleep_hours)
    score += STRESS_POINTS.get(stress_level, 0)
    score += DIET_POINTS.get(diet_type, DIET_DEFAULT_POINTS)
    return score


def score_categories(metrics: HealthMetrics) -> CategoryScores:
    """Run all six category scorers over one set of metrics."""
    return CategoryScores(
        blood_pressure=blood_pressure_score(metrics.systolic, metrics.diastolic),
        heart_rate=heart_rate_score(metrics.heart_rate),
        bmi=bmi_score(metrics.bmi),
        metabolic=metabolic_score(metrics.glucose_level, metrics.cholesterol),
        respiratory=respiratory_score(metrics.respiratory_rate, metrics.oxygen_saturation),
        lifestyle=lifestyle_score(
            metrics.activity_level,
            metrics.smoking_status,
            metrics.alcohol_consumption,
            metrics.sleep_hours,
            metrics.stress_level,
            metrics.diet_type,
        ),
    )
