"""
Thread-safe string-keyed map with per-shard locking.

Keys are spread over a fixed number of shards, each a plain dict guarded by
its own lock. Readers and writers of keys in different shards never wait on
each other, and no operation holds more than one shard lock at a time.
There is no whole-map snapshot: `clear`, `keys` and `len` visit the shards
one after another.
"""

import threading
from typing import Any, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar


V = TypeVar("V")

DEFAULT_SHARDS = 16


class _Shard(Generic[V]):
    __slots__ = ("lock", "items")

    def __init__(self):
        self.lock = threading.RLock()
        self.items: Dict[str, V] = {}


class ShardedMap(Generic[V]):
    """
    Concurrent map from names to values.

    Usage:
        variables = ShardedMap()
        variables.set("name", "World")
        variables.get("name")       # "World"
        "name" in variables         # True
    """

    def __init__(self, shards: int = DEFAULT_SHARDS):
        if shards < 1:
            raise ValueError("shard count must be at least 1")
        self._shards: List[_Shard[V]] = [_Shard() for _ in range(shards)]

    def _shard(self, key: str) -> _Shard[V]:
        return self._shards[hash(key) % len(self._shards)]

    @property
    def shard_count(self) -> int:
        return len(self._shards)

    def get(self, key: str, default: Optional[V] = None) -> Optional[V]:
        """Look up `key`, returning `default` if absent."""
        shard = self._shard(key)
        with shard.lock:
            return shard.items.get(key, default)

    def set(self, key: str, value: V) -> None:
        """Insert or overwrite `key`."""
        shard = self._shard(key)
        with shard.lock:
            shard.items[key] = value

    def update(self, pairs: Iterable[Tuple[str, V]]) -> None:
        """Insert several pairs, one key at a time."""
        for key, value in pairs:
            self.set(key, value)

    def remove(self, key: str) -> Optional[V]:
        """Delete `key`; returns the removed value or None."""
        shard = self._shard(key)
        with shard.lock:
            return shard.items.pop(key, None)

    def contains(self, key: str) -> bool:
        shard = self._shard(key)
        with shard.lock:
            return key in shard.items

    def clear(self) -> None:
        """Remove every entry, shard by shard."""
        for shard in self._shards:
            with shard.lock:
                shard.items.clear()

    def keys(self) -> List[str]:
        """Snapshot of the keys (each shard read under its own lock)."""
        result: List[str] = []
        for shard in self._shards:
            with shard.lock:
                result.extend(shard.items.keys())
        return result

    def items(self) -> List[Tuple[str, V]]:
        result: List[Tuple[str, V]] = []
        for shard in self._shards:
            with shard.lock:
                result.extend(shard.items.items())
        return result

    def __contains__(self, key: Any) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __len__(self) -> int:
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.items)
        return total

    def __repr__(self) -> str:
        return f"ShardedMap({len(self)} entries, {len(self._shards)} shards)"
