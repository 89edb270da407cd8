"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from dp_kernel.config.settings.base import Settings
from dp_kernel.config.settings.loaders import SettingsLoader
from dp_kernel.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from dp_kernel.observability.logging.processors import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields. *overrides* (if provided) take the highest priority.
    A loader that lacks a required value (:class:`MissingRequiredSettingError`)
    is logged and skipped so that the remaining loaders may still contribute
    values. Values that are present but invalid are raised, never replaced
    by defaults.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~dp_kernel.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Ordered sequence of loaders. Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and local development.

        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        InvalidSettingValueError
            When a loader finds a value that cannot be coerced or fails the
            settings class's cross-field validation.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except MissingRequiredSettingError as exc:
                logger.warning(
                    "settings.loader_skipped",
                    loader=type(loader).__name__,
                    settings=settings_cls.__name__,
                    error=exc.message,
                )
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
