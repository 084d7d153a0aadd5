"""
Method Binding Domain Model.

A MethodBinding is the stored association between a matcher (method name plus
call arguments) and the substitute function that answers matching calls.

Design Philosophy:
- Immutable once created; managers only ever append new bindings
- Matching is shallow: positional arguments are compared one by one by
  identity or ``==``, never by walking nested structures
- Function mocks have no method name and use ``None`` on both sides
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple


_NO_KWARGS: Mapping[str, Any] = MappingProxyType({})


def args_equal(expected: Tuple[Any, ...], actual: Tuple[Any, ...]) -> bool:
    """Element-wise equality of two argument sequences of the same length."""
    if len(expected) != len(actual):
        return False
    return all(e is a or e == a for e, a in zip(expected, actual))


def kwargs_equal(expected: Mapping[str, Any], actual: Mapping[str, Any]) -> bool:
    """Keyword arguments match when both carry the same names and values."""
    if expected.keys() != actual.keys():
        return False
    return all(
        expected[name] is actual[name] or expected[name] == actual[name]
        for name in expected
    )


@dataclass(frozen=True, eq=False)
class MethodBinding:
    """
    Binding between a method name, its recorded arguments and a substitute.
    
    Attributes:
        method_name: Name of the stubbed method (None for function mocks)
        args: Positional arguments recorded when the stub was declared
        substitute: Callable invoked with the call-time arguments on a match
        kwargs: Keyword arguments recorded when the stub was declared
    
    Example:
        binding = MethodBinding("greet", ("bob",), lambda name: "hi " + name)
        binding.matches("greet", ("bob",))    # True
        binding.matches("greet", ("alice",))  # False
    """
    
    method_name: Optional[str]
    args: Tuple[Any, ...]
    substitute: Callable[..., Any]
    kwargs: Optional[Mapping[str, Any]] = None
    
    def __post_init__(self):
        # Freeze the recorded arguments so later changes to the caller's
        # containers cannot alter what this binding matches.
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(
            self, "kwargs", MappingProxyType(dict(self.kwargs)) if self.kwargs else _NO_KWARGS
        )
    
    def matches(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        """
        Check whether a call is answered by this binding.
        
        Args:
            method_name: Name of the called method (None for function mocks)
            args: Positional arguments of the call
            kwargs: Keyword arguments of the call
            
        Returns:
            True if the name, every positional argument and every keyword
            argument are equal to the recorded ones
        """
        return (
            self.method_name == method_name
            and args_equal(self.args, tuple(args))
            and kwargs_equal(self.kwargs, kwargs or _NO_KWARGS)
        )
    
    def get_substitute(self) -> Callable[..., Any]:
        """Get the substitute to execute for a matching call."""
        return self.substitute
    
    def describe(self) -> str:
        """Human-readable call signature, used in log records."""
        parts = [repr(a) for a in self.args]
        parts.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        name = self.method_name if self.method_name is not None else "<function>"
        return f"{name}({', '.join(parts)})"
