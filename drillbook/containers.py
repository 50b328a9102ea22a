"""Growable buffer, bounded queue and stack, and a chained string hash set."""

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

DEFAULT_TABLE_SIZE = 100
_UINT32_MASK = 0xFFFFFFFF


class Buffer:
    """A growable sequence that can be consumed from both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def push_back(self, item: Any) -> None:
        self._items.append(item)

    def pop_back(self) -> Any:
        if not self._items:
            raise IndexError("pop_back from an empty buffer")
        return self._items.pop()

    def pop_front(self) -> Any:
        if not self._items:
            raise IndexError("pop_front from an empty buffer")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def duplicate(self) -> "Buffer":
        """Return an independent buffer holding the remaining items."""
        return Buffer(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Buffer({list(self._items)!r})"


class BoundedQueue:
    """A first-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, item: Any) -> None:
        if self.is_full():
            raise OverflowError("queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def rear(self) -> Any:
        if not self._items:
            raise IndexError("rear of an empty queue")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class BoundedStack:
    """A last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> None:
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


def string_hash(key: str, table_size: int = DEFAULT_TABLE_SIZE) -> int:
    """Hash ``key`` with a 32-bit multiply-by-31 rolling hash, reduced modulo ``table_size``."""
    if table_size <= 0:
        raise ValueError("table_size must be positive")
    value = 0
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 31 + signed) & _UINT32_MASK
    return value % table_size


class StringHashSet:
    """A set of strings stored in a fixed number of chained buckets."""

    def __init__(self, table_size: int = DEFAULT_TABLE_SIZE) -> None:
        if table_size <= 0:
            raise ValueError("table_size must be positive")
        self.table_size = table_size
        self._buckets: list[list[str]] = [[] for _ in range(table_size)]

    def insert(self, key: str) -> None:
        self._buckets[string_hash(key, self.table_size)].insert(0, key)

    def find(self, key: str) -> bool:
        return key in self._buckets[string_hash(key, self.table_size)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key)