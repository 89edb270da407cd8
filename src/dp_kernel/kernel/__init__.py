"""Kernel – framework-agnostic building blocks of the entity layer."""

from dp_kernel.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    InvalidPermissionValueError,
    InvariantViolationError,
    NotFoundError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "InvalidPermissionValueError",
    "InvariantViolationError",
    "NotFoundError",
    "SerializationError",
    "ValidationError",
]
