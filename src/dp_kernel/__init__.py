"""
dp_kernel – entity layer of the data platform.

Import path convention::

    from dp_kernel.kernel.i18n import Label, LabelSet
    from dp_kernel.kernel.security import PermissionBand, PermissionAware
    from dp_kernel.analysis import Group
    from dp_kernel.management import Schema
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
