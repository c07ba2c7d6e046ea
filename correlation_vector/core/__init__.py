"""Core infrastructure modules for logging and the current-vector context."""

from correlation_vector.core.correlation import (
    current_vector_var,
    get_current_vector,
    reset_current_vector,
    set_current_vector,
)
from correlation_vector.core.logging_config import configure_logging

__all__ = [
    "configure_logging",
    "current_vector_var",
    "get_current_vector",
    "reset_current_vector",
    "set_current_vector",
]
