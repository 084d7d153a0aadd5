"""
Object Mock Manager.

Mocks an object, or a class without running its constructor, by building a
dispatch table from the methods the target exposes:

- Methods are found with ``dir()`` and looked up statically, so properties
  and other descriptors are never executed. Underscore helpers are included;
  dunder names are not, unless listed below
- Protocol dunders the target's own classes define (``__len__``,
  ``__call__``, ``__enter__``, ...) are added, since ``len(m)``, ``m(x)`` or
  ``with m:`` only work when the mock's class defines them
- The base-object methods (``__eq__``, ``__str__``, ...) are always added,
  because they are inherited rather than defined and mocking them is
  sometimes needed
- Each method gets an execution trampoline on the mocked item and a
  recording trampoline on the recorder returned by when()

Execution trampolines live on a class created for each mock, so Python's
special method lookup (``str(m)``, ``m == other``, ``len(m)``) reaches them.
"""

import inspect
import logging
import types
from typing import Any, Callable, List, Optional, Sequence, Set

from labmock.application.managers.base import MockManager
from labmock.config import LabMockConfig

logger = logging.getLogger(__name__)


# Methods every Python object inherits from ``object`` that tests commonly
# need to stub. Unstubbed calls fall back to ``object``'s behavior.
BASE_OBJECT_METHODS = (
    "__eq__",
    "__ne__",
    "__hash__",
    "__repr__",
    "__str__",
    "__format__",
    "__sizeof__",
)

# Dunders never copied from the target: they drive construction, attribute
# access, pickling, annotations or descriptor binding of the mock itself.
EXCLUDED_DUNDERS = frozenset({
    "__new__",
    "__init__",
    "__del__",
    "__init_subclass__",
    "__subclasshook__",
    "__class_getitem__",
    "__set_name__",
    "__getattr__",
    "__getattribute__",
    "__setattr__",
    "__delattr__",
    "__dir__",
    "__get__",
    "__set__",
    "__delete__",
    "__reduce__",
    "__reduce_ex__",
    "__getstate__",
    "__setstate__",
    "__getnewargs__",
    "__getnewargs_ex__",
    "__annotate__",
})


class MockedObject:
    """Base class of every object produced by mock()."""


class StubRecorder:
    """
    Recording proxy returned by when() for object mocks.

    Carries one recording trampoline per mocked method; calling one returns a
    StubBinder for that method and those arguments.
    """

    def __init__(self, target_name: str):
        self._target_name = target_name

    def __repr__(self) -> str:
        return f"<StubRecorder for {self._target_name}>"


def _inert_init(self, *args, **kwargs):
    pass


def instantiate_without_init(cls: type) -> Any:
    """
    Create an instance of cls without running its constructor.

    Allocates an inert subclass with ``object.__new__``, so neither the
    class's ``__new__`` nor its ``__init__`` runs. Abstract methods are
    cleared on the subclass so interfaces can be mocked too.
    """
    def exec_body(namespace):
        namespace["__init__"] = _inert_init
        namespace["__module__"] = cls.__module__

    inert = types.new_class(f"Inert{cls.__name__}", (cls,), exec_body=exec_body)
    inert.__abstractmethods__ = frozenset()
    try:
        return object.__new__(inert)
    except TypeError:
        # Builtin bases (dict, Exception, ...) must be allocated by their own __new__.
        return inert()


def _unwrap(value: Any) -> Any:
    if isinstance(value, (staticmethod, classmethod)):
        return value.__func__
    return value


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def class_dunders(target: Any) -> Set[str]:
    """Callable dunders defined by the target's classes below ``object``."""
    names = set()
    for klass in type(target).__mro__:
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if is_dunder(name) and name not in EXCLUDED_DUNDERS and callable(_unwrap(value)):
                names.add(name)
    return names


def discover_methods(target: Any, include_base_methods: bool = True) -> List[str]:
    """
    List the names of the methods to mock on target.

    Args:
        target: Instance to inspect
        include_base_methods: Also include BASE_OBJECT_METHODS

    Returns:
        Callable non-dunder attribute names in ``dir()`` order, then the
        protocol dunders defined by the target's classes, then the
        base-object methods
    """
    names = [
        name for name in dir(target)
        if name.isidentifier() and not is_dunder(name)
    ]
    names.extend(sorted(
        name for name in class_dunders(target) if name not in BASE_OBJECT_METHODS
    ))
    if include_base_methods:
        names.extend(BASE_OBJECT_METHODS)

    return [
        name for name in names
        if callable(_unwrap(inspect.getattr_static(target, name, None)))
    ]


def _execution_method(manager: MockManager, name: str) -> Callable[..., Any]:
    def method(self, *args, **kwargs):
        return manager.resolve_call(name, args, kwargs)
    method.__name__ = method.__qualname__ = name
    return method


def _base_execution_method(manager: MockManager, name: str) -> Callable[..., Any]:
    fallback = getattr(object, name)

    def method(self, *args, **kwargs):
        binding = manager.find_binding(name, args, kwargs)
        if binding is None:
            return fallback(self, *args, **kwargs)
        return binding.get_substitute()(*args, **kwargs)
    method.__name__ = method.__qualname__ = name
    return method


def _recording_trampoline(manager: MockManager, name: str) -> Callable[..., Any]:
    def record(*args, **kwargs):
        return manager.record_call(name, args, kwargs)
    record.__name__ = record.__qualname__ = name
    return record


class ObjectMockManager(MockManager):
    """
    Mock manager for objects and classes.

    Usage:
        manager = ObjectMockManager(UserRepository)
        mocked = manager.get_mocked_item()
        manager.get_recorder().get_by_id(42).then_return(user)
        mocked.get_by_id(42)  # -> user
    """

    def __init__(self, obj_or_class: Any, config: Optional[LabMockConfig] = None):
        """
        Introspect obj_or_class and build the mocked item and its recorder.

        Args:
            obj_or_class: Live instance, or a class to mock without
                constructing it
            config: Configuration (uses global config if None)
        """
        super().__init__(config)

        if isinstance(obj_or_class, type):
            target = instantiate_without_init(obj_or_class)
            self._target_name = obj_or_class.__name__
        else:
            target = obj_or_class
            self._target_name = type(obj_or_class).__name__

        self._method_names = discover_methods(target, self._config.include_base_methods)

        # The class keeps the manager alive for as long as the mock exists.
        namespace = {"_mock_manager": self}
        recorder = StubRecorder(self._target_name)
        for name in self._method_names:
            if name in BASE_OBJECT_METHODS:
                namespace[name] = _base_execution_method(self, name)
            else:
                namespace[name] = _execution_method(self, name)
            setattr(recorder, name, _recording_trampoline(self, name))

        mock_class = type(f"Mock{self._target_name}", (MockedObject,), namespace)
        self._mocked_item = mock_class()
        self._recorder = recorder

        logger.debug(
            "Mocked %s with %d methods", self._target_name, len(self._method_names)
        )

    @property
    def method_names(self) -> Sequence[str]:
        """Names of the mocked methods, in discovery order."""
        return tuple(self._method_names)
