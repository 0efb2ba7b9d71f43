"""Config settings – 12-factor env-based configuration."""
from univ_admin.config.settings.base import Settings
from univ_admin.config.settings.factory import SettingsFactory
from univ_admin.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
