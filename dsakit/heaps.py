"""Array-backed binary heap algorithms and heap-based list utilities."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def _sift_down(heap: list[Any], index: int, size: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and heap[child] > heap[largest]:
                largest = child
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def build_max_heap(items: Iterable[Any]) -> list[Any]:
    """Return the items arranged as a binary max-heap, built bottom-up."""
    heap = list(items)
    size = len(heap)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(heap, index, size)
    return heap


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order using an in-place max-heap."""
    arr = build_max_heap(items)
    for end in range(len(arr) - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, 0, end)
    return arr


def is_valid_min_heap(items: Iterable[Any]) -> bool:
    """Tell whether no element is greater than either of its children."""
    arr = list(items)
    return not any(arr[(child - 1) // 2] > arr[child] for child in range(1, len(arr)))


def k_largest(items: Iterable[Any], k: int) -> list[Any]:
    """Return the ``k`` largest items in ascending order.

    Raises ValueError when ``k`` is negative or exceeds the number of items.
    """
    arr = list(items)
    if not 0 <= k <= len(arr):
        raise ValueError(f"k must be between 0 and {len(arr)}, got {k}")
    if k == 0:
        return []
    heap = arr[:k]
    heapq.heapify(heap)
    for value in arr[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return [heapq.heappop(heap) for _ in range(len(heap))]


def merge_sorted_lists(lists: Iterable[Iterable[Any]]) -> list[Any]:
    """Merge ascending sequences into one ascending list with a min-heap."""
    return list(heapq.merge(*lists))