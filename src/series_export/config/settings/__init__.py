"""Config settings – 12-factor env-based configuration."""
from series_export.config.settings.base import ExportSettings, Settings
from series_export.config.settings.factory import SettingsFactory
from series_export.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExportSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
