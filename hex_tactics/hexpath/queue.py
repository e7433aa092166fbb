"""Binary min-heap used as the A* frontier."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Generic, List, Tuple, TypeVar

from ..errors import QueueUnderflowError

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-priority queue keyed by an explicit integer priority.

    Items sharing a priority come back in no guaranteed order; the push
    counter only keeps ``heapq`` from comparing the items themselves.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, T]] = []
        self._counter = count()

    def push(self, item: T, priority: int) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> T:
        """Remove and return the item with the lowest priority."""

        if not self._heap:
            raise QueueUnderflowError("pop from an empty priority queue")
        _, _, item = heapq.heappop(self._heap)
        return item

    def peek(self) -> T:
        if not self._heap:
            raise QueueUnderflowError("peek into an empty priority queue")
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def clear(self) -> None:
        self._heap.clear()
        self._counter = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
