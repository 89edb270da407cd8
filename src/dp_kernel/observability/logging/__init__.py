"""Observability – structured logging helpers."""
from dp_kernel.observability.logging.filters import RedactSensitiveFields, SensitiveFieldsFilter
from dp_kernel.observability.logging.processors import get_logger
from dp_kernel.observability.logging.factory import JsonLoggerFactory

__all__ = [
    "JsonLoggerFactory",
    "RedactSensitiveFields",
    "SensitiveFieldsFilter",
    "get_logger",
]
