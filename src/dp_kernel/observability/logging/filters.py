"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any

from dp_kernel.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts and lists of dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            elif isinstance(v, list):
                result[k] = [self.redact_deep(i) if isinstance(i, dict) else i for i in v]
            else:
                result[k] = v
        return result


class RedactSensitiveFields:
    """structlog processor that redacts sensitive keys anywhere in the event.

    Usage::

        structlog.configure(processors=[RedactSensitiveFields(), ...])
    """

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._filter = SensitiveFieldsFilter(sensitive_fields)

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._filter.redact_deep(event_dict)


__all__ = ["RedactSensitiveFields", "SensitiveFieldsFilter"]
