"""LabeledEntity – a named, ordered entity carrying a :class:`LabelSet`.

Cloning for a locale freezes the labels down to the texts resolved for that
locale; the clone shares no mutable state with its source.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import ClassVar, TypeVar

from dp_kernel.kernel.i18n import Label, LabelSet
from dp_kernel.observability.logging.processors import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound="LabeledEntity")


class LabeledEntity:
    """Named entity with an ``order`` sort key and localized labels.

    ``name`` is a stable identifier; uniqueness within a collection is the
    owning collection's responsibility.
    """

    PROPERTY_NAME: ClassVar[str] = "name"
    PROPERTY_NAME_LABEL: ClassVar[str] = "nameLabel"
    PROPERTY_DESC_LABEL: ClassVar[str] = "descLabel"
    PROPERTY_ORDER: ClassVar[str] = "order"

    def __init__(
        self,
        name: str | None = None,
        *,
        order: int = 0,
        labels: LabelSet | None = None,
    ) -> None:
        self.name = name
        self.order = order
        self._labels = labels if labels is not None else LabelSet()

    @property
    def labels(self) -> LabelSet:
        return self._labels

    @property
    def name_label(self) -> Label | None:
        return self._labels.name_label

    @name_label.setter
    def name_label(self, label: Label | None) -> None:
        self._labels.name_label = label

    @property
    def desc_label(self) -> Label | None:
        return self._labels.desc_label

    @desc_label.setter
    def desc_label(self, label: Label | None) -> None:
        self._labels.desc_label = label

    @property
    def sort_key(self) -> tuple[int, str]:
        """Display ordering: ``order`` ascending, ties broken by ``name``."""
        return (self.order, self.name or "")

    def _new_instance(self: E) -> E:
        """Fresh instance with the same name and order and empty labels."""
        return type(self)(self.name, order=self.order)

    def clone(self: E, locale: str | None) -> E:
        """Return a copy whose labels are fixed to *locale*'s texts."""
        target = self._new_instance()
        self._labels.concrete_into(target, locale)
        return target

    @classmethod
    def clone_all(cls, entities: Sequence[E] | None, locale: str | None) -> list[E] | None:
        """Clone every entity for *locale*, preserving order.

        ``None`` in, ``None`` out.
        """
        if entities is None:
            return None
        clones = [entity.clone(locale) for entity in entities]
        logger.debug("labeled.cloned", entity_type=cls.__name__, count=len(clones), locale=locale)
        return clones

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, nameLabel={self.name_label!r}, "
            f"descLabel={self.desc_label!r}, order={self.order!r})"
        )


def sort_for_display(entities: Iterable[E]) -> list[E]:
    """Return *entities* sorted by ``(order, name)``."""
    return sorted(entities, key=lambda e: e.sort_key)


__all__ = ["LabeledEntity", "sort_for_display"]
