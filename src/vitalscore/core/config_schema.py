"""Pydantic models for config validation.

Opt-in schema validation for ``Config.config_data``.  Call
``Config.validated()`` to obtain a typed, validated ``VitalScoreConfig``
instance.  Dict-based access through ``Config.get`` keeps working unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vitalscore.health.calculators.trends import TimeWindow

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    data_dir: Path
    log_dir: Path | None = None

    @field_validator("data_dir", "log_dir", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class TrendsConfig(BaseModel):
    """Trend classification and history selection."""

    threshold_pct: float = Field(default=5.0, gt=0)
    history_limit: int = Field(default=10, ge=2)
    default_window: TimeWindow = TimeWindow.SIX_MONTHS


class LoggingConfig(BaseModel):
    """loguru sink settings.  A relative ``file`` lives under ``paths.log_dir``."""

    level: str = "WARNING"
    file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _known_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.upper()
            if v not in LOG_LEVELS:
                raise ValueError(f"unknown log level {v!r}, expected one of {LOG_LEVELS}")
        return v


class VitalScoreConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig = PathsConfig(data_dir=Path("~/.vitalscore-data"))
    trends: TrendsConfig = TrendsConfig()
    logging: LoggingConfig = LoggingConfig()

    @property
    def log_file(self) -> Path | None:
        """``logging.file`` resolved against ``paths.log_dir`` when relative."""
        if not self.logging.file:
            return None
        log_dir = self.paths.log_dir or self.paths.data_dir / "logs"
        return log_dir / Path(self.logging.file).expanduser()
