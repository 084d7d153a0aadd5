"""
Application Layer - Mock managers, stub binders and the handle registry.

This layer contains the concrete implementations of the domain interfaces
and everything the entry points in labmock.api are built from.
"""

from .managers import (
    MockManager,
    ObjectMockManager,
    FunctionMockManager,
    MockedObject,
    StubRecorder,
)
from .registry import ManagerRegistry, manager_registry
from .stub_binder import StubBinder

__all__ = [
    "MockManager",
    "ObjectMockManager",
    "FunctionMockManager",
    "MockedObject",
    "StubRecorder",
    "ManagerRegistry",
    "manager_registry",
    "StubBinder",
]
