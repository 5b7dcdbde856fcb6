"""Binary heaps, a running median and a max-priority queue with key increases."""

from __future__ import annotations

import heapq
import operator
from collections.abc import Hashable, Iterable
from typing import Any, Callable


class _BinaryHeap:
    """Array-backed binary heap ordered by ``_before``."""

    _before: Callable[[Any, Any], bool] = staticmethod(operator.gt)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for item in items:
            self._push(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not self._before(items[index], items[parent]):
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            best = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._before(items[child], items[best]):
                    best = child
            if best == index:
                return
            items[index], items[best] = items[best], items[index]
            index = best

    def _push(self, key: Any) -> None:
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def _pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> Any:
        """Return the top key without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]


class MaxHeap(_BinaryHeap):
    """Binary heap that pops the largest key first."""

    _before = staticmethod(operator.gt)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, key: Any) -> None:
        """Add a key to the heap."""
        self._push(key)

    def pop(self) -> Any:
        """Remove and return the largest key; raise IndexError when empty."""
        return self._pop()


class MinHeap(_BinaryHeap):
    """Binary heap that pops the smallest key first."""

    _before = staticmethod(operator.lt)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, key: Any) -> None:
        """Add a key to the heap."""
        self._push(key)

    def pop(self) -> Any:
        """Remove and return the smallest key; raise IndexError when empty."""
        return self._pop()


class MedianFinder:
    """Running median of a stream of numbers, kept in two heaps."""

    def __init__(self) -> None:
        self._low: list[Any] = []  # max-heap of the lower half, stored negated
        self._high: list[Any] = []  # min-heap of the upper half

    def __len__(self) -> int:
        return len(self._low) + len(self._high)

    def add(self, num: Any) -> None:
        """Add a number to the stream."""
        if not self._low or num <= -self._low[0]:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)
        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        if len(self._high) > len(self._low):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def median(self) -> float:
        """Return the median of the numbers added so far."""
        if not self._low:
            raise ValueError("median of an empty stream")
        if len(self._low) == len(self._high):
            return (-self._low[0] + self._high[0]) / 2
        return -self._low[0]


class IndexedMaxPriorityQueue:
    """Max-priority queue of ``(key, item_id)`` pairs whose keys can be raised."""

    def __init__(self) -> None:
        self._heap: list[tuple[Any, Hashable]] = []
        self._index: dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._index

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i][1]] = i
        self._index[heap[j][1]] = j

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if not heap[index][0] > heap[parent][0]:
                return
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child][0] > heap[largest][0]:
                    largest = child
            if largest == index:
                return
            self._swap(index, largest)
            index = largest

    def insert(self, key: Any, item_id: Hashable) -> None:
        """Add ``item_id`` with priority ``key``; ids must be unique."""
        if item_id in self._index:
            raise ValueError(f"item {item_id!r} is already queued")
        self._heap.append((key, item_id))
        position = len(self._heap) - 1
        self._index[item_id] = position
        self._sift_up(position)

    def increase_key(self, item_id: Hashable, new_key: Any) -> None:
        """Raise the priority of a queued item.

        Raises KeyError for an unknown id and ValueError for a lower key.
        """
        position = self._index[item_id]
        if new_key < self._heap[position][0]:
            raise ValueError("new key is smaller than the current key")
        self._heap[position] = (new_key, item_id)
        self._sift_up(position)

    def pop(self) -> tuple[Any, Hashable]:
        """Remove and return the ``(key, item_id)`` pair with the largest key."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        top = self._heap[0]
        del self._index[top[1]]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._index[last[1]] = 0
            self._sift_down(0)
        return top