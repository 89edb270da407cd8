"""Group – the named, ordered category an analysis entity belongs to."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dp_kernel.kernel.ddd.labeled import LabeledEntity
from dp_kernel.kernel.errors.domain import ValidationError
from dp_kernel.kernel.i18n import Label, LabelSet


def _label_doc(label: Label | None) -> dict[str, Any] | None:
    return label.to_dict() if label is not None else None


def _label_from_doc(doc: Any) -> Label | None:
    if doc is None:
        return None
    if isinstance(doc, str):
        return Label(doc)
    if isinstance(doc, Mapping):
        return Label.from_dict(doc)
    raise ValidationError(f"Invalid label document: {doc!r}")


class Group(LabeledEntity):
    """Describes which group an entity (e.g. a chart plugin attribute) belongs to.

    Example::

        group = Group("sales", order=2)
        group.name_label = Label("Sales", {"de": "Vertrieb"})
        group.clone("de").name_label.resolve(None)  # "Vertrieb"
    """

    def to_dict(self) -> dict[str, Any]:
        return {
            self.PROPERTY_NAME: self.name,
            self.PROPERTY_NAME_LABEL: _label_doc(self.name_label),
            self.PROPERTY_DESC_LABEL: _label_doc(self.desc_label),
            self.PROPERTY_ORDER: self.order,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Group":
        """Build a group from a structured document.

        Labels may be given as plain strings (default text only) or as
        ``{"default": ..., "values": {locale: text}}``.
        """
        order = data.get(cls.PROPERTY_ORDER, 0)
        if not isinstance(order, int) or isinstance(order, bool):
            raise ValidationError(
                f"Group order must be an integer, got {order!r}",
                errors=[{"field": cls.PROPERTY_ORDER, "value": order}],
            )
        return cls(
            data.get(cls.PROPERTY_NAME),
            order=order,
            labels=LabelSet(
                _label_from_doc(data.get(cls.PROPERTY_NAME_LABEL)),
                _label_from_doc(data.get(cls.PROPERTY_DESC_LABEL)),
            ),
        )


__all__ = ["Group"]
