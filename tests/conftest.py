"""Shared test fixtures for vitalscore."""

import os
import tempfile
from datetime import UTC, datetime

import pytest


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {"data_dir": os.path.join(tmp_dir, "data")},
        "trends": {"threshold_pct": 10.0, "history_limit": 5, "default_window": "3months"},
        "logging": {"level": "ERROR"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def at_risk_payload():
    """Request payload for a 55-year-old male with elevated BP and BMI ~31."""
    return {
        "age": 55,
        "gender": "male",
        "height": 175,
        "weight": 95,
        "systolic": 145,
        "diastolic": 92,
        "heartRate": 88,
        "respiratoryRate": 18,
        "oxygenSaturation": 97,
        "glucoseLevel": 110,
        "cholesterol": {"total": 210, "hdl": 38, "ldl": 135},
        "activityLevel": "sedentary",
        "smokingStatus": "currentSmoker",
        "alcoholConsumption": "regular",
        "sleepHours": 5,
        "stressLevel": "high",
        "dietType": "other",
        "medicalConditions": ["hypertension"],
        "familyHistory": "diabetes in mother",
    }


@pytest.fixture
def healthy_payload():
    """Request payload with every factor in its best band."""
    return {
        "age": 30,
        "gender": "female",
        "height": 170,
        "weight": 65,
        "systolic": 120,
        "diastolic": 80,
        "heartRate": 80,
        "respiratoryRate": 16,
        "oxygenSaturation": 98,
        "glucoseLevel": 95,
        "cholesterol": {"total": 180, "hdl": 55, "ldl": 100},
        "activityLevel": "active",
        "smokingStatus": "nonSmoker",
        "alcoholConsumption": "never",
        "sleepHours": 8,
        "stressLevel": "low",
        "dietType": "balanced",
        "medicalConditions": [],
        "familyHistory": "",
    }


@pytest.fixture
def fixed_now():
    return datetime(2026, 6, 15, 12, 0, tzinfo=UTC)
