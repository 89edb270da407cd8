"""Config settings – SettingsValidator."""
from __future__ import annotations

import dataclasses

from dp_kernel.config.settings.base import Settings
from dp_kernel.config.validation.errors import ConfigError


class SettingsValidator:
    """Re-check a populated (possibly mutated) settings instance."""

    def validate(self, settings: Settings) -> list[str]:
        """Return a list of validation error messages (empty when valid)."""
        errors: list[str] = []
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            if value is None and field.default is dataclasses.MISSING:
                errors.append(f"{field.name} is required but None")
        try:
            settings._validate()
        except ConfigError as exc:
            errors.append(exc.message)
        return errors


__all__ = ["SettingsValidator"]
