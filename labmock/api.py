"""
Mocking Entry Points.

Usage:
    from labmock import mock, mock_function, when

    repo = mock(UserRepository)
    when(repo).get_by_id(42).then_return(user)
    assert repo.get_by_id(42) is user
    assert repo.get_by_id(7) is None      # unstubbed calls return None

    fetch = mock_function(http_get)
    when(fetch)("https://example.test").then_raise(TimeoutError)
"""

from typing import Any, Callable, Optional

from labmock.application.managers import FunctionMockManager, MockedObject, ObjectMockManager
from labmock.application.registry import manager_registry
from labmock.application.validators import (
    validate_mock_target,
    validate_mocked_function,
    validate_mocked_object,
    validate_recorder,
)
from labmock.config import LabMockConfig


def mock(object_or_class: Any, config: Optional[LabMockConfig] = None) -> MockedObject:
    """
    Mock an object or a class.

    Every public method of the target, plus the base-object methods, is
    replaced by a stub returning None until stubbed with when(). Classes are
    never constructed.

    Args:
        object_or_class: Instance, or class, to mock
        config: Configuration (uses global config if None)

    Returns:
        The mocked object

    Raises:
        MockAssertionError: If there is nothing to mock
    """
    validate_mock_target(object_or_class)
    manager = ObjectMockManager(object_or_class, config)
    mocked = validate_mocked_object(manager.get_mocked_item())
    manager_registry.register(manager)
    return mocked


def mock_function(func: Callable[..., Any], config: Optional[LabMockConfig] = None) -> Callable[..., Any]:
    """
    Mock a function.

    Args:
        func: Callable to mock (never invoked)
        config: Configuration (uses global config if None)

    Returns:
        The mocked function

    Raises:
        MockAssertionError: If func is not callable
    """
    manager = FunctionMockManager(func, config)
    mocked = validate_mocked_function(manager.get_mocked_item())
    manager_registry.register(manager)
    return mocked


def when(mocked_item: Any) -> Any:
    """
    Start declaring a stub on a mock.

    For object mocks, call the method to stub on the returned handle; for
    function mocks, call the handle itself. Either way the result is a
    StubBinder to finish the declaration with then(), then_return() or
    then_raise():

        when(repo).get_by_id(42).then_return(user)
        when(fetch)("https://example.test").then_return(response)

    Args:
        mocked_item: Object returned by mock() or mock_function()

    Returns:
        The recording handle of the mock (always the same one)

    Raises:
        MockAssertionError: If mocked_item was not created by mock() or
            mock_function()
    """
    return validate_recorder(manager_registry.recorder_for(mocked_item))
