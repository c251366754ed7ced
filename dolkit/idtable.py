"""Hash table from 32-bit identifiers to arbitrary data, with 101 buckets."""

from __future__ import annotations

from typing import Any, Iterator

BUCKET_COUNT = 101
_MAX_ID = 0xFFFFFFFF


def bucket_of(ident: int) -> int:
    """The bucket index an identifier hashes to."""
    return ident % BUCKET_COUNT


def _check(ident: int) -> int:
    if not 0 <= ident <= _MAX_ID:
        raise ValueError(f"identifier out of 32-bit range: {ident}")
    return ident


class IDTable:
    """Chained hash table; new entries go to the front of their bucket."""

    def __init__(self) -> None:
        self._buckets: list[list[list[Any]]] = [[] for _ in range(BUCKET_COUNT)]

    def insert(self, ident: int, data: Any) -> None:
        """Store data under ident, replacing any data already stored there."""
        bucket = self._buckets[bucket_of(_check(ident))]
        for entry in bucket:
            if entry[0] == ident:
                entry[1] = data
                return
        bucket.insert(0, [ident, data])

    def remove(self, ident: int) -> None:
        """Forget ident; nothing happens if it is not present."""
        bucket = self._buckets[bucket_of(_check(ident))]
        for position, entry in enumerate(bucket):
            if entry[0] == ident:
                del bucket[position]
                return

    def get(self, ident: int, default: Any = None) -> Any:
        """The data stored under ident, or default if there is none."""
        for entry_id, data in self._buckets[bucket_of(_check(ident))]:
            if entry_id == ident:
                return data
        return default

    def clear(self) -> None:
        """Drop every entry."""
        for bucket in self._buckets:
            bucket.clear()

    def __contains__(self, ident: object) -> bool:
        if not isinstance(ident, int) or not 0 <= ident <= _MAX_ID:
            return False
        return any(entry[0] == ident for entry in self._buckets[bucket_of(ident)])

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        for bucket in self._buckets:
            for entry_id, data in bucket:
                yield entry_id, data


_DEFAULT_TABLE = IDTable()


def default_table() -> IDTable:
    """The shared table used when no table is given."""
    return _DEFAULT_TABLE