"""Kernel security – resources carrying a single loaded permission value."""

from __future__ import annotations

from typing import Any, ClassVar

from dp_kernel.kernel.errors.application import ForbiddenError
from dp_kernel.kernel.errors.domain import InvalidPermissionValueError
from dp_kernel.kernel.security.authorization import DELETE, EDIT, READ
from dp_kernel.kernel.security.permission import NOT_LOADED, PermissionBand, TierRef
from dp_kernel.observability.logging.processors import get_logger

logger = get_logger(__name__)


class PermissionAware:
    """Mixin holding the current user's permission on a resource.

    The value starts as :data:`NOT_LOADED` and is supplied by the
    authorization layer through :meth:`set_permission`. Capability queries fail
    closed until it is loaded. Values outside the band's declared space are
    rejected with :class:`InvalidPermissionValueError`; the stored value is left
    untouched.

    Subclasses name the tiers backing read/edit/delete via ``READ_TIER``,
    ``EDIT_TIER`` and ``DELETE_TIER``.
    """

    READ_TIER: ClassVar[str] = READ
    EDIT_TIER: ClassVar[str] = EDIT
    DELETE_TIER: ClassVar[str] = DELETE

    def __init__(self, band: PermissionBand) -> None:
        self._band = band
        self._permission: int = NOT_LOADED

    @property
    def permission_band(self) -> PermissionBand:
        return self._band

    @property
    def permission(self) -> int:
        return self._permission

    @permission.setter
    def permission(self, value: int) -> None:
        self.set_permission(value)

    def is_loaded(self) -> bool:
        return self._permission != NOT_LOADED

    def set_permission(self, value: int) -> None:
        try:
            self._band.validate(value)
        except InvalidPermissionValueError:
            logger.warning(
                "permission.rejected",
                resource_type=self._band.resource_type,
                resource_id=self._log_id(),
                value=value,
            )
            raise
        self._permission = value
        logger.debug(
            "permission.assigned",
            resource_type=self._band.resource_type,
            resource_id=self._log_id(),
            value=value,
        )

    def reset_permission(self) -> None:
        """Forget the loaded value (back to :data:`NOT_LOADED`)."""
        self._permission = NOT_LOADED

    def has_capability(self, tier: TierRef) -> bool:
        resolved = self._band.tier(tier)
        if not self.is_loaded():
            return False
        return self._band.at_least(self._permission, resolved)

    def can_read(self) -> bool:
        return self.has_capability(self.READ_TIER)

    def can_edit(self) -> bool:
        return self.has_capability(self.EDIT_TIER)

    def can_delete(self) -> bool:
        return self.has_capability(self.DELETE_TIER)

    def require(self, tier: TierRef) -> None:
        """Raise :class:`ForbiddenError` unless the loaded permission reaches *tier*."""
        if self.has_capability(tier):
            return
        name = str(self._band.tier(tier))
        reason = "permission not loaded" if not self.is_loaded() else f"permission {self._permission} below {name}"
        raise ForbiddenError(
            f"{self._band.resource_type} access denied: {reason}",
            permission=name,
            detail={"resource_id": self._log_id(), "permission": self._permission},
        )

    def _log_id(self) -> Any:
        resource_id = getattr(self, "id", None)
        return str(resource_id) if resource_id is not None else None


__all__ = ["PermissionAware"]
