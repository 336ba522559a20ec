"""Tests for vitalscore.core.exceptions."""

from vitalscore.core.exceptions import (
    ConfigurationError,
    InsufficientHistory,
    InvalidInput,
    VitalScoreError,
)


def test_hierarchy():
    """All exceptions should inherit from VitalScoreError."""
    for exc_cls in [ConfigurationError, InvalidInput, InsufficientHistory]:
        assert issubclass(exc_cls, VitalScoreError)


def test_invalid_input_is_value_error():
    assert issubclass(InvalidInput, ValueError)
    assert not issubclass(InsufficientHistory, ValueError)


def test_exception_message():
    err = InvalidInput("Height must be positive, got 0")
    assert "positive" in str(err)


def test_catch_base():
    """Catching VitalScoreError should catch all subtypes."""
    try:
        raise InsufficientHistory("need 2")
    except VitalScoreError as e:
        assert "need 2" in str(e)
