"""
Request payload → ``HealthMetrics``.

Accepts the camelCase keys the request handler receives (``heartRate``,
``glucoseLevel`` …) as well as their snake_case forms.  Presence and
numeric checks fail fast with ``InvalidInput``; nothing is coerced
silently beyond ``int``/``float`` conversion of numeric strings.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from vitalscore.core.exceptions import InvalidInput

from .models import (
    ActivityLevel,
    AlcoholConsumption,
    Cholesterol,
    DietType,
    HealthMetrics,
    SmokingStatus,
    StressLevel,
)

# snake_case field -> camelCase payload key
_CAMEL_KEYS = {
    "heart_rate": "heartRate",
    "respiratory_rate": "respiratoryRate",
    "oxygen_saturation": "oxygenSaturation",
    "glucose_level": "glucoseLevel",
    "activity_level": "activityLevel",
    "smoking_status": "smokingStatus",
    "alcohol_consumption": "alcoholConsumption",
    "sleep_hours": "sleepHours",
    "stress_level": "stressLevel",
    "diet_type": "dietType",
    "medical_conditions": "medicalConditions",
    "family_history": "familyHistory",
}

NUMERIC_FIELDS = (
    "height",
    "weight",
    "systolic",
    "diastolic",
    "heart_rate",
    "respiratory_rate",
    "oxygen_saturation",
    "glucose_level",
    "sleep_hours",
)

CATEGORICAL_FIELDS: dict[str, type[StrEnum]] = {
    "activity_level": ActivityLevel,
    "smoking_status": SmokingStatus,
    "alcohol_consumption": AlcoholConsumption,
    "stress_level": StressLevel,
    "diet_type": DietType,
}


def _lookup(payload: Mapping[str, Any], name: str) -> Any:
    camel = _CAMEL_KEYS.get(name, name)
    if camel in payload:
        return payload[camel]
    return payload.get(name)


def _required(payload: Mapping[str, Any], name: str) -> Any:
    value = _lookup(payload, name)
    if value is None or value == "":
        raise InvalidInput(f"Missing required field: {_CAMEL_KEYS.get(name, name)}")
    return value


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidInput(f"Field {name} must be numeric, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"Field {name} must be numeric, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInput(f"Field {name} must be finite, got {value!r}")
    return number


def _category(value: Any, enum_cls: type[StrEnum], name: str) -> StrEnum | str:
    if not isinstance(value, str):
        raise InvalidInput(f"Field {name} must be a string, got {value!r}")
    try:
        return enum_cls(value)
    except ValueError:
        # Unknown categories score as "other" downstream.
        return value


def _conditions(value: Any) -> tuple[str, ...]:
    """A single tag or a list of tags; absent means none."""
    if value is None or value == "":
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)) or not all(isinstance(c, str) for c in value):
        raise InvalidInput(f"Field medicalConditions must be a string or a list of strings, got {value!r}")
    return tuple(value)


def parse_cholesterol(value: Any) -> Cholesterol:
    if isinstance(value, Cholesterol):
        return value
    if not isinstance(value, Mapping):
        raise InvalidInput(f"Field cholesterol must be a mapping with total/hdl/ldl, got {value!r}")
    parts = {}
    for key in ("total", "hdl", "ldl"):
        if value.get(key) is None:
            raise InvalidInput(f"Missing required field: cholesterol.{key}")
        parts[key] = _number(value[key], f"cholesterol.{key}")
    return Cholesterol(**parts)


def parse_metrics(payload: Mapping[str, Any]) -> HealthMetrics:
    """Validate a raw payload and build a ``HealthMetrics``.

    Raises:
        InvalidInput: On a missing field, a non-numeric value, a
            non-positive age/height/weight, a malformed cholesterol block, or
            condition tags that are not strings.
    """
    if not isinstance(payload, Mapping):
        raise InvalidInput(f"Metrics payload must be a mapping, got {type(payload).__name__}")

    age = _number(_required(payload, "age"), "age")
    if age <= 0 or not age.is_integer():
        raise InvalidInput(f"Field age must be a positive whole number, got {age}")

    gender = _required(payload, "gender")
    if not isinstance(gender, str):
        raise InvalidInput(f"Field gender must be a string, got {gender!r}")

    numbers = {name: _number(_required(payload, name), _CAMEL_KEYS.get(name, name)) for name in NUMERIC_FIELDS}
    for name in ("height", "weight"):
        if numbers[name] <= 0:
            raise InvalidInput(f"Field {name} must be positive, got {numbers[name]}")

    categories = {
        name: _category(_required(payload, name), enum_cls, _CAMEL_KEYS[name])
        for name, enum_cls in CATEGORICAL_FIELDS.items()
    }

    conditions = _conditions(_lookup(payload, "medical_conditions"))
    family_history = _lookup(payload, "family_history") or ""
    if not isinstance(family_history, str):
        raise InvalidInput(f"Field familyHistory must be a string, got {family_history!r}")

    return HealthMetrics(
        age=int(age),
        gender=gender,
        cholesterol=parse_cholesterol(_required(payload, "cholesterol")),
        medical_conditions=conditions,
        family_history=family_history,
        **numbers,
        **categories,
    )


def parse_timestamp(value: Any) -> datetime:
    """ISO-8601 string or datetime → timezone-aware datetime (naive means UTC)."""
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise InvalidInput(f"Invalid timestamp: {value!r}") from None
    else:
        raise InvalidInput(f"Invalid timestamp: {value!r}")

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment
