"""Lightweight references a schema points at: its creator and its JDBC driver."""

from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class User:
    """Platform user, as far as a schema needs to know."""

    id: str
    name: str | None = None
    real_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "realName": self.real_name}


@dataclasses.dataclass(frozen=True)
class DriverEntity:
    """A registered database driver package."""

    id: str | None = None
    display_name: str | None = None
    display_desc: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "displayName": self.display_name, "displayDesc": self.display_desc}


__all__ = ["DriverEntity", "User"]
