"""
Health assessment data models.

Inputs (``HealthMetrics``) and outputs (``CategoryScores``, ``RiskEstimates``,
``Assessment``) are frozen dataclasses: an assessment is never mutated once
produced.  ``to_dict`` / ``from_dict`` use the camelCase record layout the
request handler and the external store exchange.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

# ── Categorical inputs ───────────────────────────────────────────────


class ActivityLevel(StrEnum):
    SEDENTARY = "sedentary"
    MODERATE = "moderate"
    ACTIVE = "active"


class SmokingStatus(StrEnum):
    NON_SMOKER = "nonSmoker"
    FORMER_SMOKER = "formerSmoker"
    CURRENT_SMOKER = "currentSmoker"


class AlcoholConsumption(StrEnum):
    NEVER = "never"
    OCCASIONAL = "occasional"
    REGULAR = "regular"


class StressLevel(StrEnum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class DietType(StrEnum):
    BALANCED = "balanced"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    KETO = "keto"
    OTHER = "other"


class HealthStatus(StrEnum):
    """Overall status label derived from the composite score."""

    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class TrendDirection(StrEnum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


# ── Inputs ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Cholesterol:
    """Lipid panel, all values in mg/dL."""

    total: float
    hdl: float
    ldl: float

    def to_dict(self) -> dict[str, float]:
        return {"total": self.total, "hdl": self.hdl, "ldl": self.ldl}


@dataclass(frozen=True)
class HealthMetrics:
    """One submitted set of vitals, labs and lifestyle factors.

    Categorical fields hold the enum member when the value is recognized
    and the raw string otherwise; unrecognized values score as "other".

    Attributes:
        age: Age in whole years.
        gender: Biological sex category (only ``"male"`` is weighted).
        height: Height in cm.
        weight: Weight in kg.
        systolic / diastolic: Blood pressure in mmHg.
        heart_rate: Resting heart rate in bpm.
        respiratory_rate: Breaths per minute.
        oxygen_saturation: SpO2 in percent.
        glucose_level: Blood glucose in mg/dL.
        cholesterol: Total / HDL / LDL panel.
        medical_conditions: Condition tags such as ``"hypertension"``.
        family_history: Free text, searched case-insensitively.
    """

    age: int
    gender: str
    height: float
    weight: float
    systolic: float
    diastolic: float
    heart_rate: float
    respiratory_rate: float
    oxygen_saturation: float
    glucose_level: float
    cholesterol: Cholesterol
    activity_level: ActivityLevel | str
    smoking_status: SmokingStatus | str
    alcohol_consumption: AlcoholConsumption | str
    sleep_hours: float
    stress_level: StressLevel | str
    diet_type: DietType | str
    medical_conditions: tuple[str, ...] = ()
    family_history: str = ""

    @property
    def bmi(self) -> float:
        """Body-mass index derived from height and weight."""
        from .calculators.normalizer import calculate_bmi

        return calculate_bmi(self.height, self.weight)

    def has_condition(self, tag: str) -> bool:
        return tag in self.medical_conditions

    def to_dict(self) -> dict[str, Any]:
        """Serialize as the ``metrics`` block of a stored assessment (includes ``bmi``)."""
        return {
            "age": self.age,
            "gender": self.gender,
            "height": self.height,
            "weight": self.weight,
            "bmi": self.bmi,
            "systolic": self.systolic,
            "diastolic": self.diastolic,
            "heartRate": self.heart_rate,
            "respiratoryRate": self.respiratory_rate,
            "oxygenSaturation": self.oxygen_saturation,
            "glucoseLevel": self.glucose_level,
            "cholesterol": self.cholesterol.to_dict(),
            "activityLevel": str(self.activity_level),
            "smokingStatus": str(self.smoking_status),
            "alcoholConsumption": str(self.alcohol_consumption),
            "sleepHours": self.sleep_hours,
            "stressLevel": str(self.stress_level),
            "dietType": str(self.diet_type),
        }


# ── Outputs ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CategoryScores:
    """Per-category sub-scores.  Roughly 0-100; only some are clamped."""

    blood_pressure: float
    heart_rate: float
    bmi: float
    metabolic: float
    respiratory: float
    lifestyle: float

    def to_dict(self) -> dict[str, float]:
        return {
            "bloodPressure": self.blood_pressure,
            "heartRate": self.heart_rate,
            "bmi": self.bmi,
            "metabolic": self.metabolic,
            "respiratory": self.respiratory,
            "lifestyle": self.lifestyle,
        }


@dataclass(frozen=True)
class RiskEstimates:
    """Ordinal disease-risk indicators, each clamped to [0, 100]."""

    heart_disease: float
    stroke: float
    diabetes: float
    obesity: float
    hypertension: float

    def to_dict(self) -> dict[str, float]:
        return {
            "heartDisease": self.heart_disease,
            "stroke": self.stroke,
            "diabetes": self.diabetes,
            "obesity": self.obesity,
            "hypertension": self.hypertension,
        }


@dataclass(frozen=True)
class Assessment:
    """One immutable scored snapshot derived from a ``HealthMetrics`` input."""

    timestamp: datetime
    metrics: HealthMetrics
    scores: CategoryScores
    risks: RiskEstimates
    overall_score: float
    health_status: HealthStatus

    @property
    def medical_conditions(self) -> list[str]:
        return list(self.metrics.medical_conditions)

    @property
    def family_history(self) -> str:
        return self.metrics.family_history

    @property
    def bmi(self) -> float:
        return self.metrics.bmi

    def to_dict(self) -> dict[str, Any]:
        scores = self.scores.to_dict()
        scores["overall"] = self.overall_score
        return {
            "date": self.timestamp.isoformat(),
            "metrics": self.metrics.to_dict(),
            "scores": scores,
            "risks": self.risks.to_dict(),
            "healthStatus": str(self.health_status),
            "medicalConditions": self.medical_conditions,
            "familyHistory": self.family_history,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Assessment:
        """Restore a stored record produced by ``to_dict``.

        Scores and risks are taken as stored, not recomputed.

        Raises:
            InvalidInput: If a required block or field is missing or malformed.
        """
        from vitalscore.core.exceptions import InvalidInput

        from .parsing import parse_metrics, parse_timestamp

        try:
            scores = data["scores"]
            risks = data["risks"]
            metrics_payload = dict(data["metrics"])
            metrics_payload.setdefault("medicalConditions", data.get("medicalConditions") or [])
            metrics_payload.setdefault("familyHistory", data.get("familyHistory") or "")
            return cls(
                timestamp=parse_timestamp(data["date"]),
                metrics=parse_metrics(metrics_payload),
                scores=CategoryScores(
                    blood_pressure=float(scores["bloodPressure"]),
                    heart_rate=float(scores["heartRate"]),
                    bmi=float(scores["bmi"]),
                    metabolic=float(scores["metabolic"]),
                    respiratory=float(scores["respiratory"]),
                    lifestyle=float(scores["lifestyle"]),
                ),
                risks=RiskEstimates(
                    heart_disease=float(risks["heartDisease"]),
                    stroke=float(risks["stroke"]),
                    diabetes=float(risks["diabetes"]),
                    obesity=float(risks["obesity"]),
                    hypertension=float(risks["hypertension"]),
                ),
                overall_score=float(scores["overall"]),
                health_status=HealthStatus(data["healthStatus"]),
            )
        except InvalidInput:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInput(f"Malformed assessment record: {e!r}") from e


# ── Trends ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class HealthTrends:
    """First-vs-last direction of the tracked metrics across a history."""

    weight: TrendDirection
    blood_pressure: TrendDirection
    glucose: TrendDirection
    overall: TrendDirection

    def to_dict(self) -> dict[str, str]:
        return {
            "weightTrend": str(self.weight),
            "bpTrend": str(self.blood_pressure),
            "glucoseTrend": str(self.glucose),
            "overallTrend": str(self.overall),
        }


@dataclass(frozen=True)
class TrendPoint:
    date: datetime
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "value": self.value}


@dataclass(frozen=True)
class BloodPressurePoint:
    date: datetime
    systolic: float
    diastolic: float

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "systolic": self.systolic, "diastolic": self.diastolic}


@dataclass(frozen=True)
class TrendSeries:
    """Chronological per-metric points for charting a history."""

    overall_score: list[TrendPoint] = field(default_factory=list)
    bmi: list[TrendPoint] = field(default_factory=list)
    blood_pressure: list[BloodPressurePoint] = field(default_factory=list)
    lifestyle: list[TrendPoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "overallScore": [p.to_dict() for p in self.overall_score],
            "bmi": [p.to_dict() for p in self.bmi],
            "bloodPressure": [p.to_dict() for p in self.blood_pressure],
            "lifestyle": [p.to_dict() for p in self.lifestyle],
        }
