"""
Centralized Test Subjects for labmock Tests.

Real classes and functions that the tests mock. They deliberately carry the
shapes a mock has to cope with:

- subjects.py: Plain classes, abstract interfaces, classes whose constructor
  or properties must never run, and free functions

Usage:
    from tests.mocks import Greeter, AbstractRepository, add
"""

from tests.mocks.subjects import (
    Greeter,
    ExplodingService,
    AbstractRepository,
    PrintableValue,
    PropertyProbe,
    Singleton,
    CachingLoader,
    add,
    explode,
)

__all__ = [
    # Classes
    "Greeter",
    "ExplodingService",
    "AbstractRepository",
    "PrintableValue",
    "PropertyProbe",
    "Singleton",
    "CachingLoader",
    # Functions
    "add",
    "explode",
]
