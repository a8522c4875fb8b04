"""Config settings – 12-factor env-based configuration."""
from stroption.config.settings.base import Settings
from stroption.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from stroption.config.settings.logging_settings import LoggingSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
