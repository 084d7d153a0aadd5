"""
Stub Binder.

Short-lived handle produced by a recording call. It remembers which method
and which arguments were recorded and turns them into a binding once the
test author says what the stub should do.

Usage:
    when(mocked).get_user(42).then_return(user)
    when(mocked).get_user(7).then(lambda user_id: make_user(user_id))
    when(mocked).get_user(-1).then_raise(KeyError("no such user"))
"""

from typing import Any, Callable, Mapping, Optional, Tuple, TYPE_CHECKING

from labmock.application.validators import validate_substitute

if TYPE_CHECKING:
    from labmock.domain.interfaces.mock_manager import IMockManager


def constant(value: Any) -> Callable[..., Any]:
    """Create a substitute that ignores its arguments and returns value."""
    def substitute(*args: Any, **kwargs: Any) -> Any:
        return value
    return substitute


def raising(exception: Any) -> Callable[..., Any]:
    """Create a substitute that raises exception on every call."""
    def substitute(*args: Any, **kwargs: Any) -> Any:
        raise exception
    return substitute


class StubBinder:
    """
    Binds a recorded method name and arguments to a substitute.

    Each finalizing call (then, then_return, then_raise) appends one binding
    to the owning manager. Finalizing the same binder twice appends two.

    Attributes:
        method_name: Recorded method name (None for function mocks)
        args: Recorded positional arguments
        kwargs: Recorded keyword arguments
    """

    def __init__(
        self,
        manager: "IMockManager",
        method_name: Optional[str],
        args: Tuple[Any, ...],
        kwargs: Optional[Mapping[str, Any]] = None,
    ):
        self._manager = manager
        self.method_name = method_name
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})

    def then(self, substitute: Callable[..., Any]) -> None:
        """
        Define the substitute called for the recorded method and arguments.

        The substitute receives exactly the arguments of each matching call
        and its return value becomes the call's result.

        Args:
            substitute: Callable answering matching calls

        Raises:
            MockAssertionError: If substitute is not callable
        """
        validate_substitute(substitute)
        self._manager.add_binding(self.method_name, self.args, substitute, self.kwargs)

    def then_return(self, value: Any) -> None:
        """Make matching calls return value."""
        self.then(constant(value))

    def then_raise(self, exception: Any) -> None:
        """Make matching calls raise exception (an instance or a class)."""
        self.then(raising(exception))

    def __repr__(self) -> str:
        parts = [repr(a) for a in self.args]
        parts.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        name = self.method_name if self.method_name is not None else "<function>"
        return f"StubBinder({name}({', '.join(parts)}))"
