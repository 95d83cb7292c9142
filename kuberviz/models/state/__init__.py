"""Application state and settings models."""

from kuberviz.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kuberviz.models.state.app_state import AppState
from kuberviz.models.state.config_manager import ConfigManager

__all__ = [
    "AppSettings",
    "AppState",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
