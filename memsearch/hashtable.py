"""An automatically resizing chained hash table keyed by 64-bit integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Union

from memsearch.linkedlist import LinkedList, LLIterator

ValueFree = Callable[[Any], None]

_FNV1_64_INIT = 0xCBF29CE484222325
_FNV_64_PRIME = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF

# The table grows once the load factor reaches this value...
_MAX_LOAD_FACTOR = 3
# ...by multiplying its bucket count by this factor.
_GROWTH_FACTOR = 9


def fnv_hash64(data: Union[bytes, bytearray, memoryview, str]) -> int:
    """Return the 64-bit FNV-1a hash of data (strings are UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    hval = _FNV1_64_INIT
    for octet in bytes(data):
        hval ^= octet
        hval = (hval * _FNV_64_PRIME) & _MASK_64
    return hval


@dataclass(frozen=True)
class KeyValue:
    """A (key, value) pair stored in a HashTable."""

    key: int
    value: Any


def _find_in_chain(chain: LinkedList, key: int) -> Optional[LLIterator]:
    """Return a cursor on the pair with this key in chain, or None."""
    cursor = chain.iterator()
    while cursor.is_valid():
        if cursor.get().key == key:
            return cursor
        cursor.next()
    return None


class HashTable:
    """A chained hash table that grows when its load factor reaches 3."""

    def __init__(self, num_buckets: int) -> None:
        if num_buckets <= 0:
            raise ValueError("num_buckets must be greater than zero")
        self._buckets = [LinkedList() for _ in range(num_buckets)]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[KeyValue]:
        for chain in self._buckets:
            yield from chain

    def __repr__(self) -> str:
        return (f"HashTable(num_buckets={len(self._buckets)}, "
                f"num_elements={self._size})")

    def num_buckets(self) -> int:
        """Return the current number of buckets."""
        return len(self._buckets)

    def bucket_for(self, key: int) -> int:
        """Return the index of the bucket that holds key."""
        return key % len(self._buckets)

    def insert(self, key: int, value: Any) -> Optional[KeyValue]:
        """Store value under key.

        Returns the pair that was replaced, or None if the key was new.
        """
        self._maybe_resize()
        chain = self._buckets[self.bucket_for(key)]
        new_pair = KeyValue(key, value)
        cursor = _find_in_chain(chain, key)
        if cursor is not None:
            old_pair = cursor.get()
            cursor.remove()
            chain.append(new_pair)
            return old_pair
        chain.append(new_pair)
        self._size += 1
        return None

    def find(self, key: int) -> Optional[KeyValue]:
        """Return the pair stored under key, or None if it is absent."""
        chain = self._buckets[self.bucket_for(key)]
        cursor = _find_in_chain(chain, key)
        return cursor.get() if cursor is not None else None

    def remove(self, key: int) -> Optional[KeyValue]:
        """Remove and return the pair stored under key, or None if absent."""
        chain = self._buckets[self.bucket_for(key)]
        cursor = _find_in_chain(chain, key)
        if cursor is None:
            return None
        pair = cursor.get()
        cursor.remove()
        self._size -= 1
        return pair

    def clear(self, value_free: Optional[ValueFree] = None) -> None:
        """Empty the table, passing each value to value_free."""
        for chain in self._buckets:
            chain.clear(
                None if value_free is None
                else (lambda pair: value_free(pair.value)))
        self._size = 0

    def iterator(self) -> HTIterator:
        """Return a cursor positioned at the first pair of the table."""
        return HTIterator(self)

    def _maybe_resize(self) -> None:
        if self._size < _MAX_LOAD_FACTOR * len(self._buckets):
            return
        pairs = list(self)
        self._buckets = [LinkedList() for _ in
                         range(len(self._buckets) * _GROWTH_FACTOR)]
        for pair in pairs:
            self._buckets[self.bucket_for(pair.key)].append(pair)


class HTIterator:
    """A cursor over the pairs of a HashTable.

    Mutating the table other than through this cursor invalidates it.
    """

    def __init__(self, table: HashTable) -> None:
        self._table = table
        self._bucket_idx: Optional[int] = None
        self._bucket_it: Optional[LLIterator] = None
        self._seek_from(0)

    def _seek_from(self, start: int) -> bool:
        buckets = self._table._buckets
        for idx in range(start, len(buckets)):
            if len(buckets[idx]) > 0:
                self._bucket_idx = idx
                self._bucket_it = buckets[idx].iterator()
                return True
        self._bucket_idx = None
        self._bucket_it = None
        return False

    def is_valid(self) -> bool:
        """Return True while the cursor points at a pair."""
        return self._bucket_idx is not None

    def next(self) -> bool:
        """Advance the cursor; return False once it has moved past the end."""
        if self._bucket_idx is None or self._bucket_it is None:
            return False
        if self._bucket_it.next():
            return True
        return self._seek_from(self._bucket_idx + 1)

    def get(self) -> Optional[KeyValue]:
        """Return the pair under the cursor, or None if it is past the end."""
        if self._bucket_it is None:
            return None
        return self._bucket_it.get()

    def remove(self) -> Optional[KeyValue]:
        """Remove and return the pair under the cursor, then advance.

        Returns None if the cursor is past the end.
        """
        pair = self.get()
        if pair is None:
            return None
        self.next()
        removed = self._table.remove(pair.key)
        if removed is None or removed != pair:
            raise RuntimeError("hash table changed under its iterator")
        return removed