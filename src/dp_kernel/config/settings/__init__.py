"""Config settings – env-based configuration."""
from dp_kernel.config.settings.base import Settings
from dp_kernel.config.settings.factory import SettingsFactory
from dp_kernel.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from dp_kernel.config.settings.permissions import PermissionSettings
from dp_kernel.config.settings.validator import SettingsValidator

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PermissionSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "SettingsValidator",
]
