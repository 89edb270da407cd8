"""Config – env-based settings and loaders."""

from dp_kernel.config.settings import (
    EnvSettingsLoader,
    PermissionSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from dp_kernel.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PermissionSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
