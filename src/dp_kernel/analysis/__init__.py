"""Analysis entities."""

from dp_kernel.analysis.group import Group

__all__ = ["Group"]
