"""vitalscore — health metric scoring, risk estimation and trend analysis."""

__version__ = "0.1.0"
