"""
Precondition Validators for the Mock Entry Points.

Design:
- Pure functions, no side effects
- Raise MockAssertionError with descriptive messages, so misuse in test code
  fails the test the same way a failed ``assert`` would
"""

import re
from typing import Any, Callable, Optional

from labmock.domain.models.errors import MockAssertionError


# ═══════════════════════════════════════════════════════════════════════════════
# Callable Validators
# ═══════════════════════════════════════════════════════════════════════════════


def validate_callable(value: Any, field_name: str = "value") -> Callable[..., Any]:
    """
    Validate that a value can be called.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        The validated callable

    Raises:
        MockAssertionError: If value is not callable
    """
    if not callable(value):
        raise MockAssertionError(
            f"{field_name} must be callable, got {type(value).__name__}"
        )
    return value


def validate_substitute(substitute: Any) -> Callable[..., Any]:
    """Validate a stub substitute handed to StubBinder.then()."""
    return validate_callable(substitute, "substitute")


# ═══════════════════════════════════════════════════════════════════════════════
# Method Name Validators
# ═══════════════════════════════════════════════════════════════════════════════


IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def validate_method_name(method_name: Optional[str]) -> Optional[str]:
    """
    Validate a binding's method name.

    None is the method name of function mocks; anything else must be a
    valid Python identifier.

    Raises:
        MockAssertionError: If the name is not None and not an identifier
    """
    if method_name is None:
        return None

    if not isinstance(method_name, str):
        raise MockAssertionError("method_name must be a string or None")

    if not IDENTIFIER_PATTERN.match(method_name):
        raise MockAssertionError(
            f"Invalid method_name: '{method_name}' is not a valid identifier"
        )

    return method_name


# ═══════════════════════════════════════════════════════════════════════════════
# Mock Target Validators
# ═══════════════════════════════════════════════════════════════════════════════


def validate_mock_target(target: Any) -> Any:
    """
    Validate the object or class handed to mock().

    Raises:
        MockAssertionError: If there is nothing to mock
    """
    if target is None:
        raise MockAssertionError("Cannot mock None: pass an object or a class")
    return target


def validate_mocked_object(mocked_item: Any) -> Any:
    """Check that an object manager produced an object-shaped mock."""
    # Local import: managers import this module.
    from labmock.application.managers.object_manager import MockedObject

    if not isinstance(mocked_item, MockedObject):
        raise MockAssertionError(
            f"Mocked item must be a MockedObject, got {type(mocked_item).__name__}"
        )
    return mocked_item


def validate_mocked_function(mocked_item: Any) -> Callable[..., Any]:
    """Check that a function manager produced a callable mock."""
    return validate_callable(mocked_item, "mocked function")


def validate_recorder(recorder: Any) -> Any:
    """
    Validate the recording handle looked up for when().

    Raises:
        MockAssertionError: If the item was not produced by mock()/mock_function()
    """
    if recorder is None:
        raise MockAssertionError(
            "Stub binder cannot be None: the item was not created by "
            "mock() or mock_function()"
        )
    return recorder


__all__ = [
    # Callable validators
    "validate_callable",
    "validate_substitute",
    # Method name validators
    "validate_method_name",
    # Mock target validators
    "validate_mock_target",
    "validate_mocked_object",
    "validate_mocked_function",
    "validate_recorder",
]
