"""Extensible schema properties and their JSON document form.

An absent or empty property list always serializes to ``"[]"``, and an absent
or blank document always deserializes to ``[]``.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Sequence
from typing import Any

from dp_kernel.kernel.errors.infrastructure import SerializationError
from dp_kernel.observability.logging.processors import get_logger

logger = get_logger(__name__)

EMPTY_DOCUMENT = "[]"


@dataclasses.dataclass(frozen=True)
class SchemaProperty:
    """A single ``name = value`` connection property."""

    name: str
    value: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


def dump_properties(properties: Sequence[SchemaProperty] | None) -> str:
    """Serialize *properties* to a JSON array."""
    if not properties:
        return EMPTY_DOCUMENT
    return json.dumps([p.to_dict() for p in properties], ensure_ascii=False)


def load_properties(document: str | None) -> list[SchemaProperty]:
    """Parse a JSON array produced by :func:`dump_properties`.

    Raises:
        SerializationError: The document is not a JSON array of
            ``{"name": str, "value": str | null}`` objects.
    """
    if document is None or not document.strip():
        return []
    try:
        raw = json.loads(document)
    except json.JSONDecodeError as exc:
        logger.warning("schema_properties.decode_failed", error=str(exc))
        raise SerializationError(
            "Schema properties document is not valid JSON",
            payload_type="SchemaProperty[]",
            cause=exc,
        ) from exc

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise SerializationError(
            f"Schema properties document must be a JSON array, got {type(raw).__name__}",
            payload_type="SchemaProperty[]",
        )

    properties: list[SchemaProperty] = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            logger.warning("schema_properties.invalid_item", index=index)
            raise SerializationError(
                f"Schema property #{index} must be an object with a string 'name'",
                payload_type="SchemaProperty",
                detail={"index": index},
            )
        value = item.get("value")
        properties.append(SchemaProperty(item["name"], None if value is None else str(value)))
    return properties


__all__ = ["EMPTY_DOCUMENT", "SchemaProperty", "dump_properties", "load_properties"]
