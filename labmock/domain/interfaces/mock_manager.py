"""
Mock Manager Interface.

Design Principles:
==================
- SRP: A manager owns the bindings of exactly one mocked entity
- OCP: New kinds of mocked entities are new managers, not new branches
- LSP: Entry points and stub binders only talk to IMockManager

Lifecycle:
==========
1. A manager is built for an object, a class or a function
2. Recording calls produce StubBinder handles (record_call)
3. Finalizing a StubBinder appends a binding (add_binding)
4. Calls on the mocked item are answered by the first matching binding
   (resolve_call), or by None when nothing matches
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from labmock.domain.models.binding import MethodBinding
    from labmock.application.stub_binder import StubBinder


class IMockManager(ABC):
    """
    Owns the bindings of one mocked entity and answers calls made on it.
    
    Implementations:
    - ObjectMockManager: objects and classes, dispatch by method name
    - FunctionMockManager: single callables, method name is always None
    """
    
    @abstractmethod
    def record_call(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> "StubBinder":
        """
        Capture a recording call and return the handle that finalizes it.
        
        Args:
            method_name: Name of the recorded method (None for functions)
            args: Positional arguments of the recording call
            kwargs: Keyword arguments of the recording call
            
        Returns:
            A fresh StubBinder bound to this manager
        """
        pass
    
    @abstractmethod
    def add_binding(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        substitute: Callable[..., Any],
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> "MethodBinding":
        """
        Append a binding to the ordered binding list.
        
        Returns:
            The binding that was appended
        """
        pass
    
    @abstractmethod
    def find_binding(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> Optional["MethodBinding"]:
        """Get the first binding matching a call, or None."""
        pass
    
    @abstractmethod
    def resolve_call(
        self,
        method_name: Optional[str],
        args: Tuple[Any, ...],
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Answer a call made on the mocked item.
        
        Returns:
            Result of the first matching substitute, or None if no binding
            matches. Exceptions raised by the substitute propagate unchanged.
        """
        pass
    
    @abstractmethod
    def get_mocked_item(self) -> Any:
        """Get the proxy handed out to callers."""
        pass
    
    @abstractmethod
    def get_recorder(self) -> Any:
        """Get the recording handle returned by when()."""
        pass
