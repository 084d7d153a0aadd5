"""
labmock - method and function stubbing for unit tests.

Replace the methods of any object, class or function with programmable
substitutes without touching the original:

    from labmock import mock, when

    m = mock(greeter)
    when(m).greet("bob").then_return("hello bob")
    m.greet("bob")    # "hello bob"
    m.greet("alice")  # None
"""

from .api import mock, mock_function, when
from .application import (
    FunctionMockManager,
    MockedObject,
    MockManager,
    ObjectMockManager,
    StubBinder,
    StubRecorder,
)
from .config import LabMockConfig, get_config, reset_config, set_config
from .domain.models import MethodBinding, MockAssertionError

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "mock",
    "mock_function",
    "when",
    # Stubbing
    "StubBinder",
    "StubRecorder",
    "MethodBinding",
    "MockedObject",
    # Managers
    "MockManager",
    "ObjectMockManager",
    "FunctionMockManager",
    # Errors
    "MockAssertionError",
    # Configuration
    "LabMockConfig",
    "get_config",
    "set_config",
    "reset_config",
]
