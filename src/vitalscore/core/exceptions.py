"""
VitalScore exception hierarchy.

All vitalscore exceptions inherit from VitalScoreError, so consumers can
catch library-level errors while still distinguishing specific failure modes.
"""


class VitalScoreError(Exception):
    """Base exception class for all vitalscore errors."""


class ConfigurationError(VitalScoreError):
    """Raised for configuration errors (missing keys, invalid values)."""


class InvalidInput(VitalScoreError, ValueError):
    """Raised for missing, non-numeric or out-of-domain metric values."""


class InsufficientHistory(VitalScoreError):
    """Raised when a trend is requested from fewer than two assessments."""
