"""Kernel value-object types – public re-export surface.

Modules:
  ids.py – EntityId
"""

from dp_kernel.kernel.types.ids import EntityId

__all__ = ["EntityId"]
