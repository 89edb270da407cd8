"""Kernel i18n – localized labels and locale-scoped freezing."""

from dp_kernel.kernel.i18n.label import Label, normalize_locale, resolve
from dp_kernel.kernel.i18n.label_set import LabelSet, Labeled

__all__ = ["Label", "LabelSet", "Labeled", "normalize_locale", "resolve"]
