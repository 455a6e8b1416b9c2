"""A bucketed key-value store guarded by per-bucket locks."""

from __future__ import annotations

import threading
from dataclasses import dataclass

NUM_SERVERS = 1
SERVER_INDEX = 0
READ_RATIO = 50
TARGET_BUCKET_NUM = 16777216
TAG_BITS = 11
BKT_BITS = 24
BKT_MASK = (1 << BKT_BITS) - 1
UNIT_BUCKET_NUM = (16777216 - 1) // NUM_SERVERS + 1
BUCKET_NUM = UNIT_BUCKET_NUM * NUM_SERVERS
THREAD_NUM = 1
UNIT_THREAD_BUCKET_NUM = (UNIT_BUCKET_NUM - 1) // THREAD_NUM + 1

VALUE_SIZE = 32
_LOCK_STRIPES = 64


def bucket(key: int) -> int:
    """Bucket a key falls into."""
    return (key >> TAG_BITS) & BKT_MASK


@dataclass(frozen=True)
class GlobalEntry:
    """The key and value last written to a bucket."""

    key: int = 0
    value: bytes = bytes(VALUE_SIZE)


class KVStore:
    """Fixed number of buckets, each holding one entry; colliding keys overwrite."""

    def __init__(self, bucket_num: int = BUCKET_NUM):
        self.bucket_num = bucket_num
        self._entries: dict[int, GlobalEntry] = {}
        self._locks = [threading.Lock() for _ in range(_LOCK_STRIPES)]

    def _bucket_of(self, key: int) -> int:
        bucket_id = bucket(key)
        if bucket_id >= self.bucket_num:
            raise IndexError(f"bucket {bucket_id} outside store of {self.bucket_num}")
        return bucket_id

    def get(self, key: int) -> bytes:
        """Value held by the key's bucket."""
        bucket_id = self._bucket_of(key)
        with self._locks[bucket_id % _LOCK_STRIPES]:
            entry = self._entries.get(bucket_id)
        return entry.value if entry is not None else GlobalEntry().value

    def put(self, key: int, value: bytes) -> None:
        """Store ``value`` in the key's bucket."""
        if len(value) != VALUE_SIZE:
            raise ValueError(f"value must be {VALUE_SIZE} bytes")
        bucket_id = self._bucket_of(key)
        with self._locks[bucket_id % _LOCK_STRIPES]:
            self._entries[bucket_id] = GlobalEntry(key, bytes(value))