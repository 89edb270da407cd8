"""Domain errors – business rule and invariant violations."""

from __future__ import annotations

from typing import Any

from dp_kernel.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A structural invariant (e.g. a tier table) was violated."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidPermissionValueError(ValidationError):
    """A permission value is not an integer inside the resource type's permission space."""

    default_code = "invalid_permission_value"

    def __init__(
        self,
        value: Any,
        *,
        resource_type: str,
        min_value: int,
        max_value: int,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message
            or f"Permission {value!r} is outside the {resource_type} permission "
            f"space [{min_value}, {max_value}]",
            errors=[{"field": "permission", "value": value}],
            detail={
                "resource_type": resource_type,
                "min_value": min_value,
                "max_value": max_value,
            },
            **kwargs,
        )
        self.value = value
        self.resource_type = resource_type


class NotFoundError(DomainError):
    """The requested tier / resource type does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = [
    "DomainError",
    "InvalidPermissionValueError",
    "InvariantViolationError",
    "NotFoundError",
    "ValidationError",
]
