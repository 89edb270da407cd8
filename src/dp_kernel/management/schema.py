"""Schema – a data source connection profile carrying a table-data permission.

Authorization on a data source targets the data in its tables, not the record
itself, so its permission lives in the ``DATA_SOURCE`` band
(``TABLE_DATA_READ`` < ``TABLE_DATA_EDIT`` < ``TABLE_DATA_DELETE``). Granting
any of them never exposes edit or delete rights on the schema record.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from dp_kernel.kernel.ddd.entity import Entity
from dp_kernel.kernel.ddd.invariant import ensure
from dp_kernel.kernel.security.authorization import (
    DATA_SOURCE_RESOURCE_TYPE,
    TABLE_DATA_DELETE,
    TABLE_DATA_EDIT,
    TABLE_DATA_READ,
    table_data_band,
)
from dp_kernel.kernel.security.aware import PermissionAware
from dp_kernel.kernel.security.permission import PermissionBand
from dp_kernel.kernel.types.ids import EntityId
from dp_kernel.management.properties import SchemaProperty, dump_properties, load_properties
from dp_kernel.management.references import DriverEntity, User

_DEFAULT_BAND = table_data_band()


class Schema(Entity, PermissionAware):
    """Database schema (data source) entity."""

    AUTHORIZATION_RESOURCE_TYPE: ClassVar[str] = DATA_SOURCE_RESOURCE_TYPE

    READ_TIER: ClassVar[str] = TABLE_DATA_READ
    EDIT_TIER: ClassVar[str] = TABLE_DATA_EDIT
    DELETE_TIER: ClassVar[str] = TABLE_DATA_DELETE

    PROPERTY_TITLE: ClassVar[str] = "title"

    def __init__(
        self,
        id: EntityId | str | None = None,  # noqa: A002
        title: str | None = None,
        url: str | None = None,
        user: str | None = None,
        password: str | None = None,
        *,
        create_user: User | None = None,
        create_time: datetime | None = None,
        driver_entity: DriverEntity | None = None,
        properties: list[SchemaProperty] | None = None,
        band: PermissionBand | None = None,
    ) -> None:
        band = band if band is not None else _DEFAULT_BAND
        ensure(
            band.resource_type == self.AUTHORIZATION_RESOURCE_TYPE,
            f"Schema permissions must use the {self.AUTHORIZATION_RESOURCE_TYPE} band",
            resource_type=band.resource_type,
        )
        Entity.__init__(self, id)
        PermissionAware.__init__(self, band)
        self.title = title
        self.url = url
        self.user = user
        self.password = password
        self.create_user = create_user
        self.create_time = create_time
        self.driver_entity = driver_entity
        self.properties = properties

    def has_create_user(self) -> bool:
        return self.create_user is not None

    def has_create_time(self) -> bool:
        return self.create_time is not None

    def has_property(self) -> bool:
        return bool(self.properties)

    def has_driver_entity(self) -> bool:
        return self.driver_entity is not None and bool(self.driver_entity.id)

    @property
    def properties_json(self) -> str:
        """``properties`` as a JSON array (``"[]"`` when absent)."""
        return dump_properties(self.properties)

    @properties_json.setter
    def properties_json(self, document: str | None) -> None:
        self.properties = load_properties(document)

    def clone(self) -> "Schema":
        """Shallow snapshot, permission included.

        The ``properties`` list is copied; its items are immutable and shared.
        Callers that need an unauthorized copy call :meth:`reset_permission`.
        """
        entity = Schema(
            self.id,
            self.title,
            self.url,
            self.user,
            self.password,
            create_user=self.create_user,
            create_time=self.create_time,
            driver_entity=self.driver_entity,
            properties=list(self.properties) if self.properties is not None else None,
            band=self.permission_band,
        )
        entity._permission = self._permission
        return entity

    def clear_sensitive(self) -> None:
        """Drop secrets (the connection password); nothing else changes."""
        self.password = None

    clear_password = clear_sensitive

    def to_dict(self, *, include_sensitive: bool = False) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": str(self.id),
            "title": self.title,
            "url": self.url,
            "user": self.user,
            "createUser": self.create_user.to_dict() if self.create_user is not None else None,
            "createTime": self.create_time.isoformat() if self.create_time is not None else None,
            "driverEntity": self.driver_entity.to_dict() if self.driver_entity is not None else None,
            "properties": [p.to_dict() for p in self.properties] if self.properties is not None else None,
            "dataPermission": self.permission,
        }
        if include_sensitive:
            data["password"] = self.password
        return data

    @classmethod
    def is_read_table_data_permission(cls, permission: int) -> bool:
        return _DEFAULT_BAND.is_in_tier(permission, TABLE_DATA_READ)

    @classmethod
    def is_edit_table_data_permission(cls, permission: int) -> bool:
        return _DEFAULT_BAND.is_in_tier(permission, TABLE_DATA_EDIT)

    @classmethod
    def is_delete_table_data_permission(cls, permission: int) -> bool:
        return _DEFAULT_BAND.is_in_tier(permission, TABLE_DATA_DELETE)

    @classmethod
    def can_read_table_data(cls, permission: int) -> bool:
        return _DEFAULT_BAND.at_least(permission, TABLE_DATA_READ)

    @classmethod
    def can_edit_table_data(cls, permission: int) -> bool:
        return _DEFAULT_BAND.at_least(permission, TABLE_DATA_EDIT)

    @classmethod
    def can_delete_table_data(cls, permission: int) -> bool:
        return _DEFAULT_BAND.at_least(permission, TABLE_DATA_DELETE)

    def __repr__(self) -> str:
        return (
            f"Schema(title={self.title!r}, url={self.url!r}, user={self.user!r}, "
            f"createUser={self.create_user!r}, createTime={self.create_time!r}, "
            f"driverEntity={self.driver_entity!r})"
        )


__all__ = ["Schema"]
