"""Configuration management for TypeFollow."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

log = logging.getLogger("typefollow.config")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class PracticeSettings(BaseModel):
    """Application settings with validation."""

    # Focus probe
    focus_probe_interval_ms: int = Field(
        default=100,
        gt=0,
        description="Interval between input focus checks (ms)",
    )
    resume_on_focus: bool = Field(
        default=False,
        description="Resume timing when focus returns instead of on the next key",
    )

    # Results
    copy_score_to_clipboard: bool = Field(
        default=True, description="Copy the score report when a passage is finished"
    )

    # Passage display
    font_family: str = Field(default="Verdana", description="Passage font family")
    font_size: int = Field(default=20, ge=6, le=96, description="Passage font size (pt)")

    log_level: str = Field(default="INFO", description="Root log level")

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {v!r}")
        return level


def default_config_path() -> Path:
    """Settings file under the XDG config directory."""
    config_home = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(config_home) / "typefollow" / "settings.json"


class Config:
    """Configuration manager using a JSON file with Pydantic validation."""

    def __init__(self, path: Path | None = None):
        """Initialize config, loading the settings file if present.

        Args:
            path: Settings file (default: XDG config location)
        """
        self.path = path or default_config_path()
        self.settings = self._load()

    def _load(self) -> PracticeSettings:
        """Read settings, falling back to defaults if the file is unusable."""
        if not self.path.exists():
            return PracticeSettings()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return PracticeSettings.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            log.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return PracticeSettings()

    def save(self) -> None:
        """Write current settings to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.settings.model_dump_json(indent=2), encoding="utf-8")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting name
            default: Returned if the setting does not exist

        Returns:
            Setting value or default
        """
        return getattr(self.settings, key, default)

    def set(self, key: str, value: Any) -> None:
        """Validate, set and persist a setting.

        Raises:
            KeyError: Unknown setting
            pydantic.ValidationError: Invalid value
        """
        if key not in PracticeSettings.model_fields:
            raise KeyError(f"Unknown setting: {key}")

        setattr(self.settings, key, value)
        self.save()

    def get_all(self) -> dict[str, Any]:
        return self.settings.model_dump()

    def reset(self) -> None:
        """Restore defaults and persist them."""
        self.settings = PracticeSettings()
        self.save()
