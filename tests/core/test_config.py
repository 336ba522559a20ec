"""Tests for vitalscore.core.config."""

import json
import os

import pytest
import yaml

from vitalscore.core.config import Config, get_config, reset_config
from vitalscore.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _reset_singleton():
    """Reset config singleton between tests."""
    reset_config()
    yield
    reset_config()


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("paths.data_dir").endswith(".vitalscore-data")
        assert config.get("trends.threshold_pct") == 5.0
        assert config.get("trends.history_limit") == 10
        assert config.get("trends.default_window") == "6months"
        assert config.get("logging.level") == "WARNING"

    def test_custom_data_dir(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("paths.data_dir") == tmp_dir
        assert config.get("paths.log_dir") == os.path.join(tmp_dir, "logs")

    def test_custom_env_prefix(self, monkeypatch, tmp_dir):
        monkeypatch.setenv("MYAPP_TRENDS__HISTORY_LIMIT", "20")
        config = Config(env_prefix="MYAPP_", data_dir=tmp_dir)
        assert config.get("trends.history_limit") == "20"

    def test_yaml_config_file(self, tmp_config_file, tmp_dir):
        config = Config(config_file=tmp_config_file, data_dir=tmp_dir)
        assert config.get("trends.threshold_pct") == 10.0
        assert config.get("trends.default_window") == "3months"
        # untouched defaults survive the merge
        assert config.get("paths.log_dir") == os.path.join(tmp_dir, "logs")

    def test_json_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.json")
        with open(config_path, "w") as f:
            json.dump({"logging": {"level": "INFO"}}, f)

        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("logging.level") == "INFO"

    def test_missing_config_file(self, tmp_dir):
        with pytest.raises(ConfigurationError, match="not found"):
            Config(config_file=os.path.join(tmp_dir, "nope.yaml"))

    def test_unsupported_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.ini")
        with open(config_path, "w") as f:
            f.write("[trends]\n")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            Config(config_file=config_path)

    def test_env_overrides_file(self, tmp_dir, monkeypatch):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"logging": {"level": "INFO"}}, f)

        monkeypatch.setenv("VITALSCORE_LOGGING__LEVEL", "ERROR")
        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("logging.level") == "ERROR"

    def test_get_missing_key(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.set("custom.nested.value", 42)
        assert config.get("custom.nested.value") == 42

    def test_ensure_directories(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.ensure_directories()
        assert os.path.isdir(os.path.join(tmp_dir, "logs"))

    def test_extra_defaults(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"custom": {"key": "value"}})
        assert config.get("custom.key") == "value"


class TestGetConfig:
    def test_singleton(self, tmp_dir):
        c1 = get_config(data_dir=tmp_dir)
        c2 = get_config()
        assert c1 is c2

    def test_reset_clears_singleton(self, tmp_dir):
        c1 = get_config(data_dir=tmp_dir)
        reset_config()
        c2 = get_config(data_dir=tmp_dir)
        assert c1 is not c2
