from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Binary min-heap ordered by an injected key function.

    The key is evaluated once, when an item is enqueued, so an entry keeps the
    priority it had at that moment. Equal keys come out in insertion order.

    Entries are never decreased in place: when a better priority is found the
    caller simply enqueues the item again. Callers must treat a dequeued item
    that they already finalized as stale and skip it.
    """

    def __init__(self, key: Callable[[T], Any]) -> None:
        self._key = key
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()

    def enqueue(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def dequeue(self) -> Optional[T]:
        """Pop the lowest-priority item, or None when the queue is empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Optional[T]:
        return self._heap[0][2] if self._heap else None

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
