"""Settings persistence.

Settings are stored as JSON in ``$KUBERVIZ_CONFIG_DIR/settings.json``,
defaulting to ``~/.config/kuberviz``.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from kuberviz.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "KUBERVIZ_CONFIG_DIR"
SETTINGS_FILE_NAME = "settings.json"


class ConfigManager:
    """Loads and saves AppSettings."""

    @staticmethod
    def config_dir() -> Path:
        override = os.environ.get(CONFIG_DIR_ENV)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".config" / "kuberviz"

    @classmethod
    def settings_path(cls) -> Path:
        return cls.config_dir() / SETTINGS_FILE_NAME

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists yet.

        Raises:
            ConfigLoadError: If the file is unreadable or holds invalid settings.
        """
        settings_path = path or cls.settings_path()
        if not settings_path.exists():
            logger.debug(f"no settings file at {settings_path}, using defaults")
            return AppSettings()
        try:
            raw = json.loads(settings_path.read_text(encoding="utf-8"))
            settings = AppSettings.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            logger.error(f"failed to load settings from {settings_path}: {exc}")
            raise ConfigLoadError(f"failed to load settings from {settings_path}: {exc}") from exc
        logger.info(f"loaded settings from {settings_path}")
        return settings

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Persist settings and return the file written.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        settings_path = path or cls.settings_path()
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            settings_path.write_text(
                json.dumps(settings.model_dump(), indent=2, sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            logger.error(f"failed to save settings to {settings_path}: {exc}")
            raise ConfigSaveError(f"failed to save settings to {settings_path}: {exc}") from exc
        logger.info(f"saved settings to {settings_path}")
        return settings_path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
