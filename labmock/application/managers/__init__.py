"""Mock managers for objects, classes and functions."""

from .base import MockManager
from .object_manager import (
    BASE_OBJECT_METHODS,
    MockedObject,
    ObjectMockManager,
    StubRecorder,
    discover_methods,
    instantiate_without_init,
)
from .function_manager import FunctionMockManager

__all__ = [
    "MockManager",
    "ObjectMockManager",
    "FunctionMockManager",
    "MockedObject",
    "StubRecorder",
    "BASE_OBJECT_METHODS",
    "discover_methods",
    "instantiate_without_init",
]
