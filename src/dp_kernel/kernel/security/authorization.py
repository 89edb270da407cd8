"""Kernel security – platform authorization constants and default bands.

Two permission spaces ship by default:

* ``ENTITY``: permissions on an entity record itself
  (``READ=64``, ``EDIT=128``, ``DELETE=192``).
* ``DATA_SOURCE``: permissions on the *table data* behind a data source,
  packed just above ``READ_START`` (``TABLE_DATA_READ=64``, ``+4``, ``+8``) so
  that granting them never exposes edit/delete on the data source record.
  The gaps between tiers leave room for intermediate grades.
"""

from __future__ import annotations

from typing import Final

from dp_kernel.kernel.security.permission import (
    PERMISSION_MAX,
    PERMISSION_MIN,
    PermissionBand,
    PermissionRegistry,
)

PERMISSION_READ_START: Final = 64
PERMISSION_EDIT_START: Final = 128
PERMISSION_DELETE_START: Final = 192

ENTITY_RESOURCE_TYPE: Final = "ENTITY"
DATA_SOURCE_RESOURCE_TYPE: Final = "DATA_SOURCE"

READ: Final = "READ"
EDIT: Final = "EDIT"
DELETE: Final = "DELETE"

TABLE_DATA_READ: Final = "TABLE_DATA_READ"
TABLE_DATA_EDIT: Final = "TABLE_DATA_EDIT"
TABLE_DATA_DELETE: Final = "TABLE_DATA_DELETE"

TABLE_DATA_EDIT_OFFSET: Final = 4
TABLE_DATA_DELETE_OFFSET: Final = 8


def entity_band(
    *,
    min_value: int = PERMISSION_MIN,
    max_value: int = PERMISSION_MAX,
) -> PermissionBand:
    return PermissionBand(
        ENTITY_RESOURCE_TYPE,
        [
            (READ, PERMISSION_READ_START),
            (EDIT, PERMISSION_EDIT_START),
            (DELETE, PERMISSION_DELETE_START),
        ],
        min_value=min_value,
        max_value=max_value,
    )


def table_data_band(
    read_start: int = PERMISSION_READ_START,
    *,
    edit_offset: int = TABLE_DATA_EDIT_OFFSET,
    delete_offset: int = TABLE_DATA_DELETE_OFFSET,
    min_value: int = PERMISSION_MIN,
    max_value: int = PERMISSION_MAX,
) -> PermissionBand:
    """Table-data tiers of a data source, anchored at *read_start*."""
    return PermissionBand(
        DATA_SOURCE_RESOURCE_TYPE,
        [
            (TABLE_DATA_READ, read_start),
            (TABLE_DATA_EDIT, read_start + edit_offset),
            (TABLE_DATA_DELETE, read_start + delete_offset),
        ],
        min_value=min_value,
        max_value=max_value,
    )


def default_registry() -> PermissionRegistry:
    """Registry holding the ``ENTITY`` and ``DATA_SOURCE`` bands."""
    return PermissionRegistry([entity_band(), table_data_band()])


__all__ = [
    "DATA_SOURCE_RESOURCE_TYPE",
    "DELETE",
    "EDIT",
    "ENTITY_RESOURCE_TYPE",
    "PERMISSION_DELETE_START",
    "PERMISSION_EDIT_START",
    "PERMISSION_READ_START",
    "READ",
    "TABLE_DATA_DELETE",
    "TABLE_DATA_DELETE_OFFSET",
    "TABLE_DATA_EDIT",
    "TABLE_DATA_EDIT_OFFSET",
    "TABLE_DATA_READ",
    "default_registry",
    "entity_band",
    "table_data_band",
]
