"""Localized text – a default string plus per-locale overrides.

Resolution for a requested locale never fails:

1. exact match on the normalized locale tag,
2. the unlocalized default,
3. ``""``.
"""

from __future__ import annotations

import types
from collections.abc import Mapping
from typing import Any

from dp_kernel.kernel.errors.domain import ValidationError


def normalize_locale(locale: str | None) -> str | None:
    """Return the canonical tag for *locale* (``"zh_hans_cn"`` -> ``"zh-Hans-CN"``).

    ``None`` and blank strings normalize to ``None``.
    """
    if locale is None:
        return None
    parts = [p for p in locale.strip().replace("_", "-").split("-") if p]
    if not parts:
        return None
    canonical = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 2 and part.isalpha():
            canonical.append(part.upper())
        elif len(part) == 4 and part.isalpha():
            canonical.append(part.title())
        else:
            canonical.append(part)
    return "-".join(canonical)


class Label:
    """Display text keyed by locale, with an optional unlocalized default."""

    __slots__ = ("_default", "_values")

    def __init__(
        self,
        default: str | None = None,
        values: Mapping[str, str] | None = None,
    ) -> None:
        self._default = default
        self._values: dict[str, str] = {}
        for locale, text in (values or {}).items():
            self.put(locale, text)

    @property
    def default(self) -> str | None:
        return self._default

    @default.setter
    def default(self, text: str | None) -> None:
        self._default = text

    @property
    def values(self) -> Mapping[str, str]:
        """Read-only view of the per-locale texts."""
        return types.MappingProxyType(self._values)

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._values)

    def is_localized(self) -> bool:
        return bool(self._values)

    def put(self, locale: str, text: str) -> None:
        """Set the text for *locale*."""
        key = normalize_locale(locale)
        if key is None:
            raise ValidationError(f"Invalid locale tag: {locale!r}")
        self._values[key] = text

    def get(self, locale: str | None) -> str | None:
        """Exact lookup, no fallback."""
        key = normalize_locale(locale)
        if key is None:
            return None
        return self._values.get(key)

    def resolve(self, locale: str | None) -> str:
        text = self.get(locale)
        if text is not None:
            return text
        return self._default if self._default is not None else ""

    def copy(self) -> "Label":
        return Label(self._default, self._values)

    def to_dict(self) -> dict[str, Any]:
        return {"default": self._default, "values": dict(self._values)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Label":
        default = data.get("default")
        values = data.get("values") or {}
        if default is not None and not isinstance(default, str):
            raise ValidationError(f"Invalid label default: {default!r}")
        if not isinstance(values, Mapping) or not all(
            isinstance(locale, str) and isinstance(text, str) for locale, text in values.items()
        ):
            raise ValidationError(f"Invalid label values: {values!r}")
        return cls(default, values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self._default == other._default and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Label(default={self._default!r}, values={self._values!r})"


def resolve(label: Label | None, locale: str | None) -> str:
    """Resolve *label* for *locale*; an absent label resolves to ``""``."""
    if label is None:
        return ""
    return label.resolve(locale)


__all__ = ["Label", "normalize_locale", "resolve"]
