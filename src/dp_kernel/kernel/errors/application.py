"""Application-layer errors – authorization decisions at use-case level."""

from __future__ import annotations

from typing import Any

from dp_kernel.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ForbiddenError(ApplicationError):
    """The resource's loaded permission does not reach the required tier."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        permission: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.permission = permission


__all__ = ["ApplicationError", "ForbiddenError"]
