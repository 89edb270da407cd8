"""Kernel security – names of fields that must never leave the process unredacted."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "credential", "credentials",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
