from enum import IntEnum
from typing import Any, Callable, Hashable, List, Optional

from hashtable.config import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR_THRESHOLD
from hashtable.exceptions import IllegalNullKeyError, KeyNotFoundError
from hashtable.logger.log_types import LogEvent
from hashtable.logger.logger import log_rehash_event, log_table_event


class CollisionResolution(IntEnum):
    """Collision-scheme codes reported by hash tables, in the range 1-9."""
    CHAINED_BUCKETS = 5  # array of linked nodes


class _Node:
    __slots__ = ("key", "value", "next")

    def __init__(self, key: Hashable, value: Any):
        self.key = key
        self.value = value
        self.next: Optional[_Node] = None


class ChainedHashTable:
    """
    Separate-chaining hash table.

    Each bucket holds the head of a singly linked chain; new keys are
    prepended. Inserting an existing key replaces its value. Once
    num_keys / capacity reaches the load factor threshold the bucket
    array grows to 2 * capacity + 1 before insert() returns.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        load_factor_threshold: float = DEFAULT_LOAD_FACTOR_THRESHOLD,
        hash_function: Optional[Callable[[Hashable], int]] = None,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        if load_factor_threshold <= 0:
            raise ValueError(
                f"load_factor_threshold must be positive, got {load_factor_threshold}"
            )

        self._capacity = capacity
        self._load_factor_threshold = load_factor_threshold
        self._num_keys = 0
        self._hash = hash_function or hash

        self._buckets: List[Optional[_Node]] = [None] * self._capacity

        log_table_event(LogEvent.TABLE_CREATED, capacity, load_factor_threshold)

    def _bucket_index(self, key: Hashable, capacity: int) -> int:
        # Python's % takes the sign of the divisor, so negative hashes still land in [0, capacity)
        return self._hash(key) % capacity

    def _link(self, buckets: List[Optional[_Node]], key: Hashable, value: Any) -> bool:
        """Upsert into the given bucket array. Returns True if a node was added."""
        idx = self._bucket_index(key, len(buckets))
        head = buckets[idx]

        node = head
        while node:
            if node.key == key:
                node.value = value
                return False
            node = node.next

        new_node = _Node(key, value)
        new_node.next = head
        buckets[idx] = new_node
        return True

    def _rehash(self) -> None:
        old_capacity = self._capacity
        new_capacity = 2 * old_capacity + 1
        new_buckets: List[Optional[_Node]] = [None] * new_capacity

        for head in self._buckets:
            node = head
            while node:
                self._link(new_buckets, node.key, node.value)
                node = node.next

        self._buckets = new_buckets
        self._capacity = new_capacity

        log_rehash_event(LogEvent.TABLE_REHASHED, old_capacity, new_capacity, self._num_keys)

    def insert(self, key: Hashable, value: Any) -> None:
        if key is None:
            raise IllegalNullKeyError("insert")

        if not self._link(self._buckets, key, value):
            return

        self._num_keys += 1
        while self.get_load_factor() >= self._load_factor_threshold:
            self._rehash()

    def remove(self, key: Hashable) -> bool:
        if key is None:
            raise IllegalNullKeyError("remove")

        idx = self._bucket_index(key, self._capacity)
        prev: Optional[_Node] = None
        node = self._buckets[idx]
        while node:
            if node.key == key:
                break
            prev = node
            node = node.next

        if node is None:
            return False

        if prev:
            prev.next = node.next
        else:
            self._buckets[idx] = node.next
        self._num_keys -= 1
        return True

    def _find(self, key: Hashable) -> Optional[_Node]:
        node = self._buckets[self._bucket_index(key, self._capacity)]
        while node:
            if node.key == key:
                return node
            node = node.next
        return None

    def get(self, key: Hashable) -> Any:
        if key is None:
            raise IllegalNullKeyError("get")

        node = self._find(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def contains(self, key: Hashable) -> bool:
        if key is None:
            raise IllegalNullKeyError("contains")
        return self._find(key) is not None

    def num_keys(self) -> int:
        return self._num_keys

    def get_load_factor_threshold(self) -> float:
        return self._load_factor_threshold

    def get_load_factor(self) -> float:
        return self._num_keys / self._capacity

    def get_capacity(self) -> int:
        return self._capacity

    def get_collision_resolution(self) -> CollisionResolution:
        return CollisionResolution.CHAINED_BUCKETS

    def __len__(self) -> int:
        return self._num_keys

    def __contains__(self, key: Hashable) -> bool:
        return key is not None and self._find(key) is not None

    def __getitem__(self, key: Hashable) -> Any:
        return self.get(key)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Hashable) -> None:
        if not self.remove(key):
            raise KeyNotFoundError(key)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_keys={self._num_keys}, "
            f"capacity={self._capacity}, "
            f"load_factor_threshold={self._load_factor_threshold})"
        )
