"""Shared setup logic for CLI commands."""

from __future__ import annotations

import json
import os
import sys
from typing import Any, NoReturn

import click
import yaml

from vitalscore.core.config import Config
from vitalscore.core.exceptions import ConfigurationError, InvalidInput
from vitalscore.core.utils.logging import setup_logging


def configure(config_file: str | None, log_level: str | None) -> Config:
    """Load config and set up logging from it."""
    try:
        config = Config(config_file=config_file)
        if log_level:
            config.set("logging.level", log_level)
        settings = config.validated()
    except ConfigurationError as e:
        fail(str(e))

    log_file = settings.log_file
    if log_file:
        config.ensure_directories()
    setup_logging(level=settings.logging.level, log_file=str(log_file) if log_file else None)
    return config


def load_data_file(path: str) -> Any:
    """Read a YAML (.yaml/.yml) or JSON file.

    Raises:
        InvalidInput: If the file does not parse.
    """
    ext = os.path.splitext(path)[1].lower()
    with open(path) as f:
        try:
            if ext in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
        except (yaml.YAMLError, ValueError) as e:
            raise InvalidInput(f"Could not parse {path}: {e}") from e


def echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))


def fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)
