"""DDD building blocks – public re-export surface."""

from dp_kernel.kernel.ddd.entity import Entity
from dp_kernel.kernel.ddd.invariant import Invariant, ensure
from dp_kernel.kernel.ddd.labeled import LabeledEntity, sort_for_display

__all__ = [
    "Entity",
    "Invariant",
    "LabeledEntity",
    "ensure",
    "sort_for_display",
]
