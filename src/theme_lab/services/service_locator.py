"""Process-wide registry for the editor's infrastructure services.

Only infrastructure lives here (event bus, settings, logging service, error
hook). The selection state is owned by ``AppContext`` and handed to the
window explicitly.
"""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T")

__all__ = ["ServiceLocator", "services", "ServiceAlreadyRegisteredError", "ServiceNotFoundError"]


class ServiceAlreadyRegisteredError(RuntimeError):
    """A key was registered twice without ``allow_override``."""


class ServiceNotFoundError(KeyError):
    """No service is registered under the requested key."""


class ServiceLocator:
    def __init__(self) -> None:
        self._lock = RLock()
        self._entries: Dict[str, Any] = {}

    def register(self, key: str, value: Any, *, allow_override: bool = False) -> None:
        with self._lock:
            if not allow_override and key in self._entries:
                raise ServiceAlreadyRegisteredError(f"Service '{key}' already registered")
            self._entries[key] = value

    def get(self, key: str) -> Any:
        with self._lock:
            if key not in self._entries:
                raise ServiceNotFoundError(key)
            return self._entries[key]

    def get_typed(self, key: str, expected_type: Type[T]) -> T:
        value = self.get(key)
        if not isinstance(value, expected_type):
            raise TypeError(f"Service '{key}' is {type(value).__name__}, expected {expected_type.__name__}")
        return value

    def try_get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._entries.get(key, default)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


services = ServiceLocator()
