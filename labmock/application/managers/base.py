"""
Mock Manager Base.

Creating, storing and finding bindings, plus the resolution step every
execution trampoline ends in. Subclasses build the mocked item and the
recording handle.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional, Tuple

from labmock.application.stub_binder import StubBinder
from labmock.application.validators import validate_method_name
from labmock.config import LabMockConfig, get_config
from labmock.domain.interfaces.mock_manager import IMockManager
from labmock.domain.models.binding import MethodBinding

logger = logging.getLogger(__name__)


class MockManager(IMockManager):
    """
    Owns the ordered binding list of one mocked entity.

    Bindings are only ever appended and are scanned in insertion order, so the
    first registered matching binding always wins. Calls matching no binding
    resolve to None.
    """

    def __init__(self, config: Optional[LabMockConfig] = None):
        self._config = config or get_config()
        self._bindings: List[MethodBinding] = []
        self._mocked_item: Any = None
        self._recorder: Any = None

    @property
    def config(self) -> LabMockConfig:
        """Configuration this manager was built with."""
        return self._config

    @property
    def bindings(self) -> Tuple[MethodBinding, ...]:
        """Registered bindings, in registration order."""
        return tuple(self._bindings)

    def record_call(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> StubBinder:
        return StubBinder(self, validate_method_name(method_name), args, kwargs)

    def add_binding(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        substitute: Callable[..., Any],
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> MethodBinding:
        binding = MethodBinding(
            method_name=validate_method_name(method_name),
            args=tuple(args),
            substitute=substitute,
            kwargs=kwargs or {},
        )
        self._bindings.append(binding)
        logger.debug("Stubbed %s (binding #%d)", binding.describe(), len(self._bindings))
        return binding

    def find_binding(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> Optional[MethodBinding]:
        for binding in self._bindings:
            if binding.matches(method_name, args, kwargs):
                return binding
        return None

    def resolve_call(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        binding = self.find_binding(method_name, args, kwargs)
        if binding is None:
            self._log_unmatched(method_name, args, kwargs)
            return None
        return binding.get_substitute()(*args, **(kwargs or {}))

    def get_mocked_item(self) -> Any:
        return self._mocked_item

    def get_recorder(self) -> Any:
        return self._recorder

    def _log_unmatched(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        kwargs: Optional[Mapping[str, Any]],
    ) -> None:
        level = logging.WARNING if self._config.warn_on_unmatched else logging.DEBUG
        if logger.isEnabledFor(level):
            parts = [repr(a) for a in args]
            parts.extend(f"{k}={v!r}" for k, v in (kwargs or {}).items())
            name = method_name if method_name is not None else "<function>"
            logger.log(level, "No stub matches %s(%s); returning None", name, ", ".join(parts))
