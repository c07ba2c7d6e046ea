"""
Context-local current correlation vector.

Lets log records carry the vector of the operation being processed without
passing it through every call.
"""

from contextvars import ContextVar, Token
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from correlation_vector.services.base_vector import CorrelationVector

CurrentVector = Union["CorrelationVector", str, None]

# Context variable for the correlation vector of the current operation
current_vector_var: ContextVar[CurrentVector] = ContextVar(
    "correlation_vector", default=None
)


def get_current_vector() -> str:
    """
    Get the current operation's correlation vector value.

    Vectors are rendered when read, so increments made after the vector was
    set are visible.

    Returns:
        The current vector value, or empty string if not set.
    """
    vector = current_vector_var.get()
    if vector is None:
        return ""
    return str(vector)


def set_current_vector(vector: CurrentVector) -> Token[CurrentVector]:
    """
    Set the correlation vector for the current context.

    Args:
        vector: A vector instance or its string value.

    Returns:
        Token restoring the previous value via ``reset_current_vector``.
    """
    return current_vector_var.set(vector)


def reset_current_vector(token: Token[CurrentVector]) -> None:
    """Restore the vector that was current before ``set_current_vector``."""
    current_vector_var.reset(token)
