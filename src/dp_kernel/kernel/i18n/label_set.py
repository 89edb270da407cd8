"""LabelSet – the (name, description) pair of a labeled entity."""

from __future__ import annotations

from typing import Protocol

from dp_kernel.kernel.i18n.label import Label, resolve


class Labeled(Protocol):
    """Anything that embeds a :class:`LabelSet`."""

    @property
    def labels(self) -> "LabelSet": ...


def _concrete(label: Label | None, locale: str | None) -> Label | None:
    if label is None:
        return None
    return Label(label.resolve(locale))


class LabelSet:
    """Name and description labels, each optionally localized.

    Example::

        labels = LabelSet(name_label=Label("Sales", {"de": "Vertrieb"}))
        labels.resolve_name("de-DE")  # "Sales" (no exact entry)
        labels.resolve_name("de")     # "Vertrieb"
    """

    __slots__ = ("name_label", "desc_label")

    def __init__(
        self,
        name_label: Label | None = None,
        desc_label: Label | None = None,
    ) -> None:
        self.name_label = name_label
        self.desc_label = desc_label

    @classmethod
    def from_source(cls, source: "LabelSet | Labeled") -> "LabelSet":
        """Independent copy of *source*'s labels, locale maps included."""
        src = source if isinstance(source, LabelSet) else source.labels
        return src.copy()

    def resolve_name(self, locale: str | None) -> str:
        return resolve(self.name_label, locale)

    def resolve_desc(self, locale: str | None) -> str:
        return resolve(self.desc_label, locale)

    def concrete(self, locale: str | None) -> "LabelSet":
        """Return a new set holding only the texts resolved for *locale*."""
        target = LabelSet()
        self.concrete_into(target, locale)
        return target

    def concrete_into(self, target: "LabelSet | Labeled", locale: str | None) -> None:
        """Freeze this set's texts for *locale* into *target*.

        *target* receives fresh unlocalized labels; absent labels stay absent.
        This set is never modified.
        """
        dest = target if isinstance(target, LabelSet) else target.labels
        dest.name_label = _concrete(self.name_label, locale)
        dest.desc_label = _concrete(self.desc_label, locale)

    def copy(self) -> "LabelSet":
        return LabelSet(
            self.name_label.copy() if self.name_label is not None else None,
            self.desc_label.copy() if self.desc_label is not None else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelSet):
            return NotImplemented
        return self.name_label == other.name_label and self.desc_label == other.desc_label

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LabelSet(name_label={self.name_label!r}, desc_label={self.desc_label!r})"


__all__ = ["LabelSet", "Labeled"]
