from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Protocol


class KeyValueStore(Protocol):
    """
    get/put/invalidate over string keys.

    A completed put is visible to every get that starts after it.
    Nothing is atomic across keys or across a get followed by a put.
    """

    def get(self, key: str) -> Optional[Any]: ...

    def put(self, key: str, value: Any) -> Any: ...

    def invalidate(self, key: str) -> None: ...

    def clear(self) -> None: ...

    def __len__(self) -> int: ...

    def __contains__(self, key: object) -> bool: ...


class InMemoryStore:
    """Process-wide map, unbounded, no expiry, gone on restart."""

    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._data.get(key)

    def put(self, key: str, value: Any) -> Any:
        with self._lock:
            self._data[key] = value
        return value

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data
