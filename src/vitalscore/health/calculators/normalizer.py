"""Derived metrics computed from raw inputs before scoring."""

from vitalscore.core.exceptions import InvalidInput


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    """Body-mass index: weight (kg) / height (m)^2.

    Raises:
        InvalidInput: If height or weight is not positive.
    """
    if height_cm <= 0:
        raise InvalidInput(f"Height must be positive, got {height_cm}")
    if weight_kg <= 0:
        raise InvalidInput(f"Weight must be positive, got {weight_kg}")

    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)
