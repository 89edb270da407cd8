"""Management entities – data sources and their references."""

from dp_kernel.management.properties import (
    EMPTY_DOCUMENT,
    SchemaProperty,
    dump_properties,
    load_properties,
)
from dp_kernel.management.references import DriverEntity, User
from dp_kernel.management.schema import Schema

__all__ = [
    "EMPTY_DOCUMENT",
    "DriverEntity",
    "Schema",
    "SchemaProperty",
    "User",
    "dump_properties",
    "load_properties",
]
