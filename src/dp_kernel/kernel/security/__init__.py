"""Kernel security – tiered permissions, permission-aware resources, sensitive fields."""
from dp_kernel.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS
from dp_kernel.kernel.security.permission import (
    NOT_LOADED,
    PERMISSION_MAX,
    PERMISSION_MIN,
    PermissionBand,
    PermissionRegistry,
    Tier,
    TierRef,
)
from dp_kernel.kernel.security.authorization import (
    DATA_SOURCE_RESOURCE_TYPE,
    DELETE,
    EDIT,
    ENTITY_RESOURCE_TYPE,
    PERMISSION_DELETE_START,
    PERMISSION_EDIT_START,
    PERMISSION_READ_START,
    READ,
    TABLE_DATA_DELETE,
    TABLE_DATA_DELETE_OFFSET,
    TABLE_DATA_EDIT,
    TABLE_DATA_EDIT_OFFSET,
    TABLE_DATA_READ,
    default_registry,
    entity_band,
    table_data_band,
)
from dp_kernel.kernel.security.aware import PermissionAware

__all__ = [
    "DATA_SOURCE_RESOURCE_TYPE",
    "DEFAULT_SENSITIVE_FIELDS",
    "DELETE",
    "EDIT",
    "ENTITY_RESOURCE_TYPE",
    "NOT_LOADED",
    "PERMISSION_DELETE_START",
    "PERMISSION_EDIT_START",
    "PERMISSION_MAX",
    "PERMISSION_MIN",
    "PERMISSION_READ_START",
    "PermissionAware",
    "PermissionBand",
    "PermissionRegistry",
    "READ",
    "TABLE_DATA_DELETE",
    "TABLE_DATA_DELETE_OFFSET",
    "TABLE_DATA_EDIT",
    "TABLE_DATA_EDIT_OFFSET",
    "TABLE_DATA_READ",
    "Tier",
    "TierRef",
    "default_registry",
    "entity_band",
    "table_data_band",
]
