"""Entity base class – identity-based equality."""

from __future__ import annotations

from dp_kernel.kernel.types.ids import EntityId


class Entity:
    """Base entity – equality is identity-based (by ``id``).

    A plain string is accepted and wrapped in :class:`EntityId`; omitting the
    id assigns a freshly generated one.
    """

    def __init__(self, id: EntityId | str | None = None) -> None:  # noqa: A002
        if id is None:
            id = EntityId.generate()  # noqa: A001
        elif isinstance(id, str):
            id = EntityId(id)  # noqa: A001
        self._id = id

    @property
    def id(self) -> EntityId:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self._id!r})"


__all__ = ["Entity"]
