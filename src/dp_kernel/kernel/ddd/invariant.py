"""Invariant helpers for asserting structural domain rules."""

from __future__ import annotations

from typing import Any

from dp_kernel.kernel.errors.domain import InvariantViolationError


class Invariant:
    """Namespace for invariant assertions."""

    @staticmethod
    def require(condition: bool, message: str, **detail: Any) -> None:
        """Raise ``InvariantViolationError`` when *condition* is False.

        Keyword arguments end up in the error's ``detail``.
        """
        if not condition:
            raise InvariantViolationError(message, detail=detail or None)


def ensure(condition: bool, message: str, **detail: Any) -> None:
    """Shorthand for ``Invariant.require``."""
    Invariant.require(condition, message, **detail)


__all__ = ["Invariant", "ensure"]
