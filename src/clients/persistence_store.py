import json
import threading
import time
from typing import Any, Callable, Dict, List, Optional
from clients.key_value_store import KeyValueStore


class PersistenceStore:
    """Collections of JSON records kept under top-level keys.

    Records are dicts carrying an ``id``. Newly created records go to the
    front of their collection so reads return the most recent first.
    """

    def __init__(self, kv: KeyValueStore):
        self.kv = kv
        self._lock = threading.RLock()
        self._last_id = 0

    def _write(self, key: str, items: List[Dict[str, Any]]) -> None:
        self.kv.set(key, json.dumps(items))

    def _next_id(self) -> str:
        with self._lock:
            candidate = time.time_ns()
            if candidate <= self._last_id:
                candidate = self._last_id + 1
            self._last_id = candidate
            return str(candidate)

    def transaction(self) -> threading.RLock:
        """Hold the store lock across a read-then-write sequence."""
        return self._lock

    def initialize_if_absent(self, key: str, seed: Any) -> None:
        with self._lock:
            if self.kv.get(key) is None:
                self.kv.set(key, json.dumps(seed))

    def read_all(self, key: str) -> List[Dict[str, Any]]:
        raw = self.kv.get(key)
        if not raw:
            return []
        return json.loads(raw) or []

    def read_by_id(self, key: str, item_id: str) -> Optional[Dict[str, Any]]:
        return self.find_one(key, lambda item: item.get("id") == item_id)

    def find_one(
        self, key: str, predicate: Callable[[Dict[str, Any]], bool]
    ) -> Optional[Dict[str, Any]]:
        return next((item for item in self.read_all(key) if predicate(item)), None)

    def create(self, key: str, item: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            items = self.read_all(key)
            new_item = {**item, "id": self._next_id()}
            items.insert(0, new_item)
            self._write(key, items)
            return new_item

    def remove(self, key: str, item_id: str) -> bool:
        with self._lock:
            items = self.read_all(key)
            kept = [item for item in items if item.get("id") != item_id]
            self._write(key, kept)
            return len(kept) != len(items)

    def get_scalar(self, key: str) -> Optional[str]:
        return self.kv.get(key)

    def set_scalar(self, key: str, value: str) -> None:
        self.kv.set(key, value)

    def delete_key(self, key: str) -> None:
        self.kv.delete(key)
