"""Fixed-size hash table with separate chaining."""

from __future__ import annotations

from typing import Any

__all__ = ["HashTable"]


class HashTable:
    """Maps string keys to values using a small array of chained buckets.

    Setting a key that is already present adds another entry to the chain;
    lookups return the earliest one.
    """

    SIZE = 7

    def __init__(self, size: int = SIZE) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._buckets: list[list[tuple[str, Any]]] = [[] for _ in range(size)]

    def hash_key(self, key: str) -> int:
        """Return the bucket index for ``key``."""
        size = len(self._buckets)
        result = 0
        for char in key:
            result = (result + ord(char) * 23) % size
        return result

    def set(self, key: str, value: Any) -> None:
        """Append a ``key``/``value`` entry to the key's bucket."""
        self._buckets[self.hash_key(key)].append((key, value))

    def get(self, key: str, default: Any = 0) -> Any:
        """Return the value first stored under ``key``, else ``default``."""
        bucket = self._buckets[self.hash_key(key)]
        return next((value for stored, value in bucket if stored == key), default)

    def keys(self) -> list[str]:
        """Return every stored key, bucket by bucket, in insertion order."""
        return [key for bucket in self._buckets for key, _ in bucket]

    def __str__(self) -> str:
        lines = []
        for index, bucket in enumerate(self._buckets):
            lines.append(f"{index}:")
            lines.extend(f"  {{{key}, {value}}}" for key, value in bucket)
        return "\n".join(lines)