"""
Function Mock Manager.

A bare function has no method name, so every binding and every call uses
None as its name.
"""

import functools
import logging
from typing import Any, Callable, Optional

from labmock.application.managers.base import MockManager
from labmock.application.validators import validate_callable
from labmock.config import LabMockConfig

logger = logging.getLogger(__name__)


class FunctionMockManager(MockManager):
    """
    Mock manager for a single callable.

    The original callable is only checked for being callable; it is never
    invoked. The mocked function copies its name and docstring so it reads
    well in test output.
    """

    def __init__(self, func: Callable[..., Any], config: Optional[LabMockConfig] = None):
        super().__init__(config)
        validate_callable(func, "func")

        def mocked_function(*args, **kwargs):
            return self.resolve_call(None, args, kwargs)

        def record(*args, **kwargs):
            return self.record_call(None, args, kwargs)

        self._mocked_item = functools.update_wrapper(mocked_function, func, updated=())
        self._recorder = record

        logger.debug("Mocked function %s", getattr(func, "__qualname__", repr(func)))
