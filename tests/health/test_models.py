"""Tests for health.models — enums, serialization and record restore."""

import pytest

from vitalscore.core.exceptions import InvalidInput
from vitalscore.health import assess
from vitalscore.health.models import (
    ActivityLevel,
    Assessment,
    HealthStatus,
    SmokingStatus,
    TrendDirection,
)


class TestEnums:
    def test_wire_values(self):
        assert SmokingStatus.NON_SMOKER == "nonSmoker"
        assert ActivityLevel.SEDENTARY == "sedentary"
        assert TrendDirection.INCREASING == "increasing"

    def test_is_string_enum(self):
        assert isinstance(HealthStatus.GOOD, str)


class TestAssessmentToDict:
    def test_record_layout(self, at_risk_payload, fixed_now):
        data = assess(at_risk_payload, now=fixed_now).to_dict()

        assert set(data) == {"date", "metrics", "scores", "risks", "healthStatus", "medicalConditions", "familyHistory"}
        assert data["date"] == "2026-06-15T12:00:00+00:00"
        assert data["metrics"]["bmi"] == pytest.approx(31.02, abs=0.01)
        assert data["metrics"]["activityLevel"] == "sedentary"
        assert data["metrics"]["cholesterol"] == {"total": 210, "hdl": 38, "ldl": 135}
        assert data["scores"]["overall"] == pytest.approx(61.25)
        assert data["scores"]["lifestyle"] == 28
        assert data["risks"]["hypertension"] == 70
        assert data["healthStatus"] == "Fair"
        assert data["medicalConditions"] == ["hypertension"]
        assert data["familyHistory"] == "diabetes in mother"


class TestAssessmentFromDict:
    def test_restores_stored_record(self, at_risk_payload, fixed_now):
        original = assess(at_risk_payload, now=fixed_now)
        restored = Assessment.from_dict(original.to_dict())
        assert restored == original

    def test_keeps_stored_scores(self, healthy_payload, fixed_now):
        data = assess(healthy_payload, now=fixed_now).to_dict()
        data["scores"]["overall"] = 42
        data["healthStatus"] = "Poor"
        restored = Assessment.from_dict(data)
        assert restored.overall_score == 42
        assert restored.health_status == HealthStatus.POOR

    def test_missing_block(self, healthy_payload, fixed_now):
        data = assess(healthy_payload, now=fixed_now).to_dict()
        del data["risks"]
        with pytest.raises(InvalidInput, match="Malformed assessment record"):
            Assessment.from_dict(data)

    def test_bad_status(self, healthy_payload, fixed_now):
        data = assess(healthy_payload, now=fixed_now).to_dict()
        data["healthStatus"] = "Great"
        with pytest.raises(InvalidInput):
            Assessment.from_dict(data)

    def test_invalid_metrics_propagate(self, healthy_payload, fixed_now):
        data = assess(healthy_payload, now=fixed_now).to_dict()
        data["metrics"]["height"] = 0
        with pytest.raises(InvalidInput, match="height"):
            Assessment.from_dict(data)
