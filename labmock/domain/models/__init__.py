"""Domain Models - Bindings and errors of the mocking framework."""

from .binding import (
    MethodBinding,
    args_equal,
    kwargs_equal,
)
from .errors import MockAssertionError

__all__ = [
    # Bindings
    "MethodBinding",
    "args_equal",
    "kwargs_equal",
    # Errors
    "MockAssertionError",
]
