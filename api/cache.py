from __future__ import annotations

import hashlib
import json
import threading
from collections import OrderedDict
from typing import Any, Dict, Optional


def hash_input(data: Dict[str, Any]) -> str:
    """Stable content hash of a normalized request body."""
    try:
        raw = json.dumps(data or {}, ensure_ascii=True, sort_keys=True, separators=(",", ":"))
    except Exception:
        raw = str(data or "")
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


class ResponseCache:
    """Bounded in-memory response cache; evicts the oldest insert once `capacity` is exceeded."""

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = max(1, int(capacity))
        self._items: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._items.get(key)

    def set(self, key: str, value: Dict[str, Any]) -> None:
        with self._lock:
            self._items[key] = value
            while len(self._items) > self.capacity:
                self._items.popitem(last=False)


__all__ = ["ResponseCache", "hash_input"]
