"""In-memory key-value store with expiry, lists and hashes."""

from __future__ import annotations

from dataclasses import dataclass

from kvstash.utils import current_time_ms
from kvstash.values import DataType, Value, hash_value, list_value


@dataclass
class _Entry:
    value: Value
    expiry: int  # 0 means no expiry


class DataStore:
    """A key-value store whose keys may carry a time to live."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def set(self, key: str, value: Value, ttl_ms: int = 0) -> None:
        """Store ``value`` under ``key``, expiring after ``ttl_ms`` if positive."""
        if ttl_ms < 0:
            raise ValueError("ttl_ms must not be negative")
        expiry = current_time_ms() + ttl_ms if ttl_ms > 0 else 0
        self._entries[key] = _Entry(value, expiry)

    def get(self, key: str) -> Value | None:
        """Return the value for ``key``, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expiry > 0 and entry.expiry < current_time_ms():
            del self._entries[key]
            return None
        return entry.value

    def delete(self, key: str) -> None:
        """Remove ``key``; a missing key is ignored."""
        self._entries.pop(key, None)

    def exists(self, key: str) -> bool:
        """Tell whether ``key`` holds a live value."""
        return self.get(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __len__(self) -> int:
        for key in list(self._entries):
            self.get(key)
        return len(self._entries)

    def _typed(self, key: str, kind: DataType) -> Value | None:
        value = self.get(key)
        if value is None or value.type is not kind:
            return None
        return value

    def list_push(self, key: str, value: Value) -> bool:
        """Push onto the list at ``key``, creating it; False if ``key`` is not a list."""
        target = self.get(key)
        if target is None:
            target = list_value()
            self.set(key, target)
        elif target.type is not DataType.LIST:
            return False
        target.data.append(value)
        return True

    def list_pop(self, key: str) -> Value | None:
        """Remove and return the most recently pushed value, or None."""
        target = self._typed(key, DataType.LIST)
        if target is None or not target.data:
            return None
        return target.data.pop()

    def list_peek(self, key: str) -> Value | None:
        """Return the most recently pushed value without removing it, or None."""
        target = self._typed(key, DataType.LIST)
        if target is None or not target.data:
            return None
        return target.data[-1]

    def list_size(self, key: str) -> int:
        """Return the length of the list at ``key``, 0 if there is none."""
        target = self._typed(key, DataType.LIST)
        return 0 if target is None else len(target.data)

    def hash_set(self, key: str, field: str, value: Value) -> bool:
        """Set ``field`` in the hash at ``key``, creating it; False if not a hash."""
        target = self.get(key)
        if target is None:
            target = hash_value()
            self.set(key, target)
        elif target.type is not DataType.HASH:
            return False
        target.data[field] = value
        return True

    def hash_get(self, key: str, field: str) -> Value | None:
        """Return ``field`` of the hash at ``key``, or None."""
        target = self._typed(key, DataType.HASH)
        if target is None:
            return None
        return target.data.get(field)

    def hash_del(self, key: str, field: str) -> bool:
        """Remove ``field`` from the hash at ``key``; False if nothing was removed."""
        target = self._typed(key, DataType.HASH)
        if target is None or field not in target.data:
            return False
        del target.data[field]
        return True