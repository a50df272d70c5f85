"""Config – export settings and their loaders."""

from series_export.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExportSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from series_export.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
