"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   │   └── InvalidPermissionValueError
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    │   └── ForbiddenError
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
"""

from dp_kernel.kernel.errors.application import ApplicationError, ForbiddenError
from dp_kernel.kernel.errors.base import BaseError
from dp_kernel.kernel.errors.domain import (
    DomainError,
    InvalidPermissionValueError,
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from dp_kernel.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
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
