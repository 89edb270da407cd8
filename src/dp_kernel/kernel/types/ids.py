"""String-based identifier value objects."""

from __future__ import annotations

import dataclasses
import uuid

from dp_kernel.kernel.errors.domain import ValidationError


@dataclasses.dataclass(frozen=True, slots=True)
class EntityId:
    """Generic entity identifier backed by a UUID4 string.

    Examples::

        eid = EntityId.generate()           # new random id
        eid = EntityId.from_str("abc-123")  # from existing string
        eid = EntityId("abc-123")           # direct construction
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError(f"{type(self).__name__} must not be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> "EntityId":
        """Return a new random ``EntityId``."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def from_str(cls, value: str) -> "EntityId":
        """Construct from an existing string identifier."""
        return cls(value)


__all__ = ["EntityId"]
