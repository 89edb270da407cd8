"""Kernel security – tiered permission bands.

A permission is a plain integer. Each resource type owns a *band*: a declared
range ``[min_value, max_value]`` cut into named tiers by strictly increasing
start thresholds. Holding a tier implies holding every lower tier, so
authorization decisions reduce to ``value >= tier.start``.

Example::

    band = PermissionBand(
        "DATA_SOURCE",
        [("TABLE_DATA_READ", 64), ("TABLE_DATA_EDIT", 68), ("TABLE_DATA_DELETE", 72)],
    )
    band.tier_of(70).name              # "TABLE_DATA_EDIT"
    band.at_least(70, "TABLE_DATA_READ")   # True
    band.at_least(70, "TABLE_DATA_DELETE") # False
"""

from __future__ import annotations

import bisect
import dataclasses
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Final, Union

from dp_kernel.kernel.ddd.invariant import ensure
from dp_kernel.kernel.errors.domain import InvalidPermissionValueError, NotFoundError
from dp_kernel.observability.logging.processors import get_logger

logger = get_logger(__name__)

#: Reserved value meaning "authorization not evaluated yet".
NOT_LOADED: Final = -99

PERMISSION_MIN: Final = 0
PERMISSION_MAX: Final = 255


@dataclasses.dataclass(frozen=True, slots=True)
class Tier:
    """A named capability level starting at ``start``."""

    name: str
    start: int

    def __str__(self) -> str:
        return self.name


TierRef = Union[Tier, str]


class PermissionBand:
    """Ordered tiers over one resource type's permission space."""

    def __init__(
        self,
        resource_type: str,
        tiers: Iterable[Tier | tuple[str, int]],
        *,
        min_value: int = PERMISSION_MIN,
        max_value: int = PERMISSION_MAX,
    ) -> None:
        parsed = tuple(t if isinstance(t, Tier) else Tier(*t) for t in tiers)

        ensure(bool(parsed), "a permission band needs at least one tier", resource_type=resource_type)
        ensure(min_value <= max_value, "min_value must not exceed max_value", resource_type=resource_type)
        ensure(
            min_value > NOT_LOADED,
            f"permission space must lie above the NOT_LOADED sentinel ({NOT_LOADED})",
            resource_type=resource_type,
        )
        names = [t.name for t in parsed]
        ensure(len(set(names)) == len(names), "tier names must be unique", resource_type=resource_type)
        for lower, upper in zip(parsed, parsed[1:]):
            ensure(
                lower.start < upper.start,
                f"tier {upper.name!r} must start above {lower.name!r}",
                resource_type=resource_type,
            )
        ensure(
            min_value <= parsed[0].start and parsed[-1].start <= max_value,
            "tiers must start inside the declared permission space",
            resource_type=resource_type,
        )

        self._resource_type = resource_type
        self._tiers = parsed
        self._starts = [t.start for t in parsed]
        self._by_name = {t.name: i for i, t in enumerate(parsed)}
        self._min_value = min_value
        self._max_value = max_value

    @property
    def resource_type(self) -> str:
        return self._resource_type

    @property
    def tiers(self) -> tuple[Tier, ...]:
        return self._tiers

    @property
    def min_value(self) -> int:
        return self._min_value

    @property
    def max_value(self) -> int:
        return self._max_value

    def __iter__(self) -> Iterator[Tier]:
        return iter(self._tiers)

    def tier(self, ref: TierRef) -> Tier:
        """Look up a tier of this band by name (or check a :class:`Tier` belongs to it)."""
        name = ref.name if isinstance(ref, Tier) else ref
        index = self._by_name.get(name)
        if index is None or (isinstance(ref, Tier) and self._tiers[index] != ref):
            raise NotFoundError(f"{self._resource_type} permission tier", name)
        return self._tiers[index]

    def contains(self, value: int) -> bool:
        """Whether *value* lies inside the declared permission space."""
        return self._min_value <= value <= self._max_value

    def validate(self, value: object) -> int:
        """Return *value* if it is ``NOT_LOADED`` or inside the space, else raise."""
        # bool is an int subclass but never a permission
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidPermissionValueError(
                value,
                resource_type=self._resource_type,
                min_value=self._min_value,
                max_value=self._max_value,
                message=f"Permission {value!r} is not an integer",
            )
        if value == NOT_LOADED or self.contains(value):
            return value
        raise InvalidPermissionValueError(
            value,
            resource_type=self._resource_type,
            min_value=self._min_value,
            max_value=self._max_value,
        )

    def tier_of(self, value: int) -> Tier | None:
        """Tier *value* falls in, or ``None`` below the first tier."""
        index = bisect.bisect_right(self._starts, value) - 1
        if index < 0:
            return None
        return self._tiers[index]

    def is_in_tier(self, value: int, tier: TierRef) -> bool:
        """Half-open membership: ``tier.start <= value < next.start``."""
        t = self.tier(tier)
        index = self._by_name[t.name]
        if value < t.start:
            return False
        if index + 1 < len(self._tiers):
            return value < self._tiers[index + 1].start
        return True

    def at_least(self, value: int, tier: TierRef) -> bool:
        """Cumulative check: holding *tier* or any tier above it."""
        return value >= self.tier(tier).start

    def __repr__(self) -> str:
        tiers = ", ".join(f"{t.name}={t.start}" for t in self._tiers)
        return (
            f"PermissionBand({self._resource_type!r}, [{tiers}], "
            f"space=[{self._min_value}, {self._max_value}])"
        )


class PermissionRegistry:
    """Resource type → :class:`PermissionBand` table.

    Values are only meaningful against the band of their own resource type, so
    lookups are always by resource type.
    """

    def __init__(self, bands: Iterable[PermissionBand] = ()) -> None:
        self._bands: dict[str, PermissionBand] = {}
        for band in bands:
            self.register(band)

    @classmethod
    def from_table(
        cls,
        table: Mapping[str, Sequence[tuple[str, int]]],
        *,
        min_value: int = PERMISSION_MIN,
        max_value: int = PERMISSION_MAX,
    ) -> "PermissionRegistry":
        """Build a registry from ``{resource_type: [(tier_name, start), ...]}``."""
        return cls(
            PermissionBand(resource_type, tiers, min_value=min_value, max_value=max_value)
            for resource_type, tiers in table.items()
        )

    def register(self, band: PermissionBand) -> None:
        ensure(
            band.resource_type not in self._bands,
            f"resource type {band.resource_type!r} already has a permission band",
        )
        self._bands[band.resource_type] = band
        logger.debug(
            "permission.band_registered",
            resource_type=band.resource_type,
            tiers={t.name: t.start for t in band.tiers},
        )

    def band_for(self, resource_type: str) -> PermissionBand:
        try:
            return self._bands[resource_type]
        except KeyError:
            raise NotFoundError("permission band", resource_type) from None

    @property
    def resource_types(self) -> tuple[str, ...]:
        return tuple(self._bands)

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._bands

    def __len__(self) -> int:
        return len(self._bands)


__all__ = [
    "NOT_LOADED",
    "PERMISSION_MAX",
    "PERMISSION_MIN",
    "PermissionBand",
    "PermissionRegistry",
    "Tier",
    "TierRef",
]
