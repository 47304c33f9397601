"""A separately chained hash map with pluggable hashing and key comparison."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Iterator, Optional, Union

__all__ = ["KeyType", "HashMap", "fnv1a_hash", "int_hash", "string_cmp", "int_cmp"]

_MASK64 = (1 << 64) - 1
_FNV_OFFSET_BASIS = 14695981039346656037
_FNV_PRIME = 1099511628211


def fnv1a_hash(key: Union[str, bytes]) -> int:
    """64-bit FNV-1a hash of a string (UTF-8) or bytes.

    Bytes above 0x7F are mixed in as signed characters, sign-extended.
    """
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    value = _FNV_OFFSET_BASIS
    for byte in data:
        signed = byte - 256 if byte >= 0x80 else byte
        value ^= signed & _MASK64
        value = (value * _FNV_PRIME) & _MASK64
    return value


def int_hash(key: int) -> int:
    """Identity hash for integer keys, as an unsigned 64-bit value."""
    return key & _MASK64


def string_cmp(a: str, b: str) -> bool:
    """True when two string keys are equal."""
    return a == b


def int_cmp(a: int, b: int) -> bool:
    """True when two integer keys are equal."""
    return a == b


class KeyType(Enum):
    """Kind of key a map holds."""

    INT = auto()
    STRING = auto()


_DEFAULTS = {
    KeyType.INT: (int_hash, int_cmp),
    KeyType.STRING: (fnv1a_hash, string_cmp),
}


@dataclass
class _Entry:
    __slots__ = ("key", "data")
    key: Any
    data: Any


class HashMap:
    """Hash map with a fixed number of buckets.

    An optional deleter is called on a value when it is replaced, erased or
    when the map is destroyed.
    """

    def __init__(
        self,
        key_type: KeyType,
        bucket_count: int = 64,
        hash_function: Optional[Callable[[Any], int]] = None,
        key_comparator: Optional[Callable[[Any, Any], bool]] = None,
        deleter: Optional[Callable[[Any], None]] = None,
    ) -> None:
        if not isinstance(key_type, KeyType):
            raise ValueError(f"invalid key type: {key_type!r}")
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        default_hash, default_cmp = _DEFAULTS[key_type]
        self.key_type = key_type
        self.bucket_count = bucket_count
        self.hash_function = hash_function or default_hash
        self.key_comparator = key_comparator or default_cmp
        self.deleter = deleter
        self._buckets: list[list[_Entry]] = [[] for _ in range(bucket_count)]

    def _check_key(self, key: Any) -> None:
        if key is None:
            raise ValueError("key cannot be None")
        if self.key_type is KeyType.STRING and not isinstance(key, str):
            raise TypeError(f"expected a str key, got {type(key).__name__}")
        if self.key_type is KeyType.INT and not isinstance(key, int):
            raise TypeError(f"expected an int key, got {type(key).__name__}")

    def _bucket(self, key: Any) -> list[_Entry]:
        self._check_key(key)
        return self._buckets[self.hash_function(key) % self.bucket_count]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def insert(self, key: Any, data: Any) -> None:
        """Store data under key, replacing (and deleting) any previous value."""
        if data is None:
            raise ValueError("data cannot be None")
        bucket = self._bucket(key)
        for entry in bucket:
            if self.key_comparator(key, entry.key):
                if self.deleter is not None:
                    self.deleter(entry.data)
                entry.data = data
                return
        bucket.append(_Entry(key, data))

    def get(self, key: Any) -> Any:
        """Return the value stored under key, or None when absent."""
        for entry in self._bucket(key):
            if self.key_comparator(entry.key, key):
                return entry.data
        return None

    def erase(self, key: Any) -> None:
        """Remove key if present; the last entry of its bucket takes its place."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if self.key_comparator(entry.key, key):
                if self.deleter is not None:
                    self.deleter(entry.data)
                last = bucket.pop()
                if position < len(bucket):
                    bucket[position] = last
                return

    def contains(self, key: Any) -> bool:
        """True when a value is stored under key."""
        return self.get(key) is not None

    def for_each(self, func: Callable[[Any, Any, Any], None], ctx: Any = None) -> None:
        """Call func(key, value, ctx) for every entry, bucket by bucket."""
        for key, data in list(self.items()):
            func(key, data, ctx)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in bucket order."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.data

    def destroy(self) -> None:
        """Run the deleter on every value and remove all entries."""
        buckets = self._buckets
        self._buckets = [[] for _ in range(self.bucket_count)]
        if self.deleter is not None:
            for bucket in buckets:
                for entry in bucket:
                    self.deleter(entry.data)