"""Tests for utils.config module."""

import json
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from utils.config import Config, PracticeSettings, default_config_path


@pytest.fixture
def temp_config_path():
    """Create a settings path inside a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "typefollow" / "settings.json"


@pytest.fixture
def config(temp_config_path):
    """Create Config instance with a temporary settings file."""
    return Config(temp_config_path)


class TestPracticeSettings:
    """Tests for PracticeSettings validation."""

    def test_defaults(self):
        """Test default values."""
        settings = PracticeSettings()

        assert settings.focus_probe_interval_ms == 100
        assert settings.resume_on_focus is False
        assert settings.copy_score_to_clipboard is True
        assert settings.font_family == "Verdana"
        assert settings.font_size == 20
        assert settings.log_level == "INFO"

    def test_rejects_non_positive_interval(self):
        """Test the probe interval must be positive."""
        with pytest.raises(ValidationError):
            PracticeSettings(focus_probe_interval_ms=0)

    def test_rejects_font_size_out_of_range(self):
        """Test font size bounds."""
        with pytest.raises(ValidationError):
            PracticeSettings(font_size=200)

    def test_log_level_is_normalized(self):
        """Test log level is upper-cased."""
        assert PracticeSettings(log_level="debug").log_level == "DEBUG"

    def test_rejects_unknown_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            PracticeSettings(log_level="verbose")

    def test_ignores_unknown_fields(self):
        """Test extra keys from older settings files are ignored."""
        settings = PracticeSettings.model_validate({"burst_timeout_ms": 5})
        assert settings == PracticeSettings()


class TestConfigLoad:
    """Tests for loading settings files."""

    def test_missing_file_gives_defaults(self, config):
        """Test a missing file yields default settings."""
        assert config.settings == PracticeSettings()

    def test_reads_existing_file(self, temp_config_path):
        """Test values from disk are used."""
        temp_config_path.parent.mkdir(parents=True)
        temp_config_path.write_text(json.dumps({"font_size": 30}))

        config = Config(temp_config_path)

        assert config.get("font_size") == 30

    def test_invalid_json_falls_back_to_defaults(self, temp_config_path):
        """Test a corrupt file is ignored."""
        temp_config_path.parent.mkdir(parents=True)
        temp_config_path.write_text("{not json")

        config = Config(temp_config_path)

        assert config.settings == PracticeSettings()

    def test_invalid_values_fall_back_to_defaults(self, temp_config_path):
        """Test a file failing validation is ignored."""
        temp_config_path.parent.mkdir(parents=True)
        temp_config_path.write_text(json.dumps({"font_size": -1}))

        config = Config(temp_config_path)

        assert config.get("font_size") == 20

    @patch.dict("os.environ", {"XDG_CONFIG_HOME": "/tmp/xdg-test"})
    def test_default_path_uses_xdg(self):
        """Test the default path honours XDG_CONFIG_HOME."""
        assert default_config_path() == Path("/tmp/xdg-test/typefollow/settings.json")


class TestConfigGetSet:
    """Tests for Config get and set."""

    def test_get_unknown_key_returns_default(self, config):
        """Test unknown keys return the given default."""
        assert config.get("nonexistent", "fallback") == "fallback"

    def test_set_persists(self, config, temp_config_path):
        """Test set writes the new value to disk."""
        config.set("resume_on_focus", True)

        assert Config(temp_config_path).get("resume_on_focus") is True

    def test_set_invalid_value_raises(self, config):
        """Test invalid values are rejected and not stored."""
        with pytest.raises(ValidationError):
            config.set("focus_probe_interval_ms", -5)

        assert config.get("focus_probe_interval_ms") == 100

    def test_set_unknown_key_raises(self, config):
        """Test unknown settings cannot be set."""
        with pytest.raises(KeyError):
            config.set("nonexistent", 1)

    def test_get_all(self, config):
        """Test get_all returns every field."""
        assert set(config.get_all()) == set(PracticeSettings.model_fields)

    def test_reset_restores_defaults(self, config, temp_config_path):
        """Test reset writes default settings."""
        config.set("font_size", 40)

        config.reset()

        assert config.get("font_size") == 20
        assert Config(temp_config_path).get("font_size") == 20
