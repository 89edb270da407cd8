"""Config settings – permission space layout.

Environment variables (prefix ``DP_PERMISSION``)::

    DP_PERMISSION_READ_START=64
    DP_PERMISSION_EDIT_OFFSET=4
    DP_PERMISSION_DELETE_OFFSET=8
    DP_PERMISSION_MIN_VALUE=0
    DP_PERMISSION_MAX_VALUE=255
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from dp_kernel.config.settings.base import Settings
from dp_kernel.config.validation.errors import InvalidSettingValueError
from dp_kernel.kernel.security.authorization import (
    PERMISSION_DELETE_START,
    PERMISSION_READ_START,
    TABLE_DATA_DELETE_OFFSET,
    TABLE_DATA_EDIT_OFFSET,
    entity_band,
    table_data_band,
)
from dp_kernel.kernel.security.permission import (
    NOT_LOADED,
    PERMISSION_MAX,
    PERMISSION_MIN,
    PermissionRegistry,
)


@dataclasses.dataclass
class PermissionSettings(Settings):
    """Where the data-source table-data tiers sit in the permission space."""

    _prefix: ClassVar[str] = "DP_PERMISSION"

    read_start: int = PERMISSION_READ_START
    edit_offset: int = TABLE_DATA_EDIT_OFFSET
    delete_offset: int = TABLE_DATA_DELETE_OFFSET
    min_value: int = PERMISSION_MIN
    max_value: int = PERMISSION_MAX

    def _validate(self) -> None:
        if self.min_value <= NOT_LOADED:
            raise InvalidSettingValueError(
                "min_value", self.min_value, f"must be greater than NOT_LOADED ({NOT_LOADED})"
            )
        if self.edit_offset <= 0:
            raise InvalidSettingValueError("edit_offset", self.edit_offset, "must be positive")
        if self.delete_offset <= self.edit_offset:
            raise InvalidSettingValueError(
                "delete_offset", self.delete_offset, "must be greater than edit_offset"
            )
        if self.min_value > PERMISSION_READ_START or self.max_value < PERMISSION_DELETE_START:
            raise InvalidSettingValueError(
                "min_value/max_value",
                (self.min_value, self.max_value),
                f"must cover the ENTITY tiers [{PERMISSION_READ_START}, {PERMISSION_DELETE_START}]",
            )
        if not self.min_value <= self.read_start:
            raise InvalidSettingValueError("read_start", self.read_start, "must not be below min_value")
        if self.read_start + self.delete_offset > self.max_value:
            raise InvalidSettingValueError(
                "max_value", self.max_value, "must leave room for the delete tier"
            )

    def to_registry(self) -> PermissionRegistry:
        """Registry with the configured ``DATA_SOURCE`` band and the ``ENTITY`` band."""
        return PermissionRegistry(
            [
                entity_band(min_value=self.min_value, max_value=self.max_value),
                table_data_band(
                    self.read_start,
                    edit_offset=self.edit_offset,
                    delete_offset=self.delete_offset,
                    min_value=self.min_value,
                    max_value=self.max_value,
                ),
            ]
        )


__all__ = ["PermissionSettings"]
