"""
Recording Handle Registry.

Side table from a mocked item's identity to the manager that produced it, so
when() can find the recording handle without a magic attribute on the mock.

Managers are held weakly: a mocked item and its manager reference each other
and are collected together, at which point the entry disappears.
"""

import threading
import weakref
from typing import Any, Optional

from labmock.domain.interfaces.mock_manager import IMockManager


class ManagerRegistry:
    """
    Registry of live mock managers keyed by mocked-item identity.

    Thread-safe so mocks can be created from parallel test workers.
    """

    def __init__(self):
        self._managers: "weakref.WeakValueDictionary[int, IMockManager]" = (
            weakref.WeakValueDictionary()
        )
        self._lock = threading.Lock()

    def register(self, manager: IMockManager) -> None:
        """Register a manager under the identity of its mocked item."""
        with self._lock:
            self._managers[id(manager.get_mocked_item())] = manager

    def manager_for(self, mocked_item: Any) -> Optional[IMockManager]:
        """Get the manager of a mocked item, or None if it is not a mock."""
        with self._lock:
            manager = self._managers.get(id(mocked_item))
        # Guard against an unrelated object reusing the id of a dead mock.
        if manager is None or manager.get_mocked_item() is not mocked_item:
            return None
        return manager

    def recorder_for(self, mocked_item: Any) -> Optional[Any]:
        """Get the recording handle of a mocked item, or None."""
        manager = self.manager_for(mocked_item)
        return manager.get_recorder() if manager is not None else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._managers)


manager_registry = ManagerRegistry()
