"""Sorting algorithms that return a new sorted list and leave the input untouched."""

from __future__ import annotations

import heapq
import math
import random
from collections.abc import Iterable
from typing import Any

_RUN = 32
_INSERTION_THRESHOLD = 16
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _insertion_sort(arr: list[Any], left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        key = arr[i]
        j = i - 1
        while j >= left and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key


def three_way_quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort with Dijkstra's three-way partition around the first element."""
    arr = list(items)
    pending = [(0, len(arr) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot = arr[left]
        lt, i, gt = left, left, right
        while i <= gt:
            if arr[i] < pivot:
                arr[lt], arr[i] = arr[i], arr[lt]
                lt += 1
                i += 1
            elif arr[i] > pivot:
                arr[i], arr[gt] = arr[gt], arr[i]
                gt -= 1
            else:
                i += 1
        pending.append((left, lt - 1))
        pending.append((gt + 1, right))
    return arr


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) using one bucket per value.

    Raises ValueError for a value outside that range.
    """
    data = list(values)
    count = len(data)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in data:
        if not 0.0 <= value < 1.0:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[min(int(count * value), count - 1)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _merge_in_place(arr: list[Any], left: int, mid: int, right: int) -> None:
    start2 = mid + 1
    if arr[mid] <= arr[start2]:
        return
    while left <= mid and start2 <= right:
        if arr[left] <= arr[start2]:
            left += 1
        else:
            # Rotate the smaller element from the right run into place.
            arr.insert(left, arr.pop(start2))
            left += 1
            mid += 1
            start2 += 1


def in_place_merge_sort(items: Iterable[Any]) -> list[Any]:
    """Merge sort whose merge step shifts elements instead of using a buffer."""
    arr = list(items)

    def sort_range(left: int, right: int) -> None:
        if left < right:
            mid = left + (right - left) // 2
            sort_range(left, mid)
            sort_range(mid + 1, right)
            _merge_in_place(arr, left, mid, right)

    sort_range(0, len(arr) - 1)
    return arr


def _hoare_partition(arr: list[Any], left: int, right: int, pivot: Any) -> int:
    while left <= right:
        while arr[left] < pivot:
            left += 1
        while arr[right] > pivot:
            right -= 1
        if left <= right:
            arr[left], arr[right] = arr[right], arr[left]
            left += 1
            right -= 1
    return left


def _heap_sort_range(arr: list[Any], left: int, right: int) -> None:
    segment = arr[left : right + 1]
    heapq.heapify(segment)
    arr[left : right + 1] = [heapq.heappop(segment) for _ in range(len(segment))]


def _introsort(arr: list[Any], left: int, right: int, depth_limit: int) -> None:
    size = right - left + 1
    if size <= _INSERTION_THRESHOLD:
        _insertion_sort(arr, left, right)
        return
    if depth_limit == 0:
        _heap_sort_range(arr, left, right)
        return
    pivot = arr[left + size // 2]
    split = _hoare_partition(arr, left, right, pivot)
    _introsort(arr, left, split - 1, depth_limit - 1)
    _introsort(arr, split, right, depth_limit - 1)


def intro_sort(items: Iterable[Any]) -> list[Any]:
    """Introsort: quicksort that falls back to heap sort and insertion sort."""
    arr = list(items)
    if arr:
        _introsort(arr, 0, len(arr) - 1, int(2 * math.log(len(arr))))
    return arr


def lsd_radix_sort(values: Iterable[int]) -> list[int]:
    """Byte-wise LSD radix sort of 32-bit signed integers.

    Keys are the two's-complement bit patterns, so negative numbers come
    after all non-negative ones. Raises ValueError outside the 32-bit range.
    """
    arr = list(values)
    for value in arr:
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError(f"{value!r} does not fit in a signed 32-bit integer")
    for shift in range(0, 32, 8):
        buckets: list[list[int]] = [[] for _ in range(256)]
        for value in arr:
            buckets[(value >> shift) & 0xFF].append(value)
        arr = [value for bucket in buckets for value in bucket]
    return arr


def randomized_quick_sort(
    items: Iterable[Any], rng: random.Random | None = None
) -> list[Any]:
    """Lomuto quicksort with a pivot drawn from ``rng``."""
    arr = list(items)
    rng = rng if rng is not None else random.Random()
    pending = [(0, len(arr) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot_index = rng.randint(left, right)
        pivot = arr[pivot_index]
        arr[pivot_index], arr[right] = arr[right], arr[pivot_index]
        store = left
        for i in range(left, right):
            if arr[i] < pivot:
                arr[i], arr[store] = arr[store], arr[i]
                store += 1
        arr[store], arr[right] = arr[right], arr[store]
        pending.append((left, store - 1))
        pending.append((store + 1, right))
    return arr


def radix_sort_strings(words: Iterable[str]) -> list[str]:
    """LSD radix sort of strings of differing length; shorter prefixes sort first."""
    arr = list(words)
    max_length = max(map(len, arr), default=0)
    for index in reversed(range(max_length)):
        buckets: dict[int, list[str]] = {}
        for word in arr:
            key = ord(word[index]) + 1 if index < len(word) else 0
            buckets.setdefault(key, []).append(word)
        arr = [word for key in sorted(buckets) for word in buckets[key]]
    return arr


def _sift_down_max(arr: list[Any], root: int, size: int) -> None:
    while 2 * root + 1 < size:
        child = 2 * root + 1
        target = root
        if arr[target] < arr[child]:
            target = child
        if child + 1 < size and arr[target] < arr[child + 1]:
            target = child + 1
        if target == root:
            return
        arr[root], arr[target] = arr[target], arr[root]
        root = target


def smooth_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with a binary max-heap built bottom-up."""
    arr = list(items)
    size = len(arr)
    for start in range(size // 2 - 1, -1, -1):
        _sift_down_max(arr, start, size)
    for end in range(size - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down_max(arr, 0, end)
    return arr


def _precedes(a: tuple[Any, int], b: tuple[Any, int]) -> bool:
    return a[0] < b[0] or (a[0] == b[0] and a[1] < b[1])


def _sift_down_min(heap: list[tuple[Any, int]], root: int, size: int) -> None:
    while True:
        smallest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and _precedes(heap[child], heap[smallest]):
                smallest = child
        if smallest == root:
            return
        heap[root], heap[smallest] = heap[smallest], heap[root]
        root = smallest


def stable_heap_sort(items: Iterable[Any]) -> list[Any]:
    """Heap sort made stable by breaking ties on original position."""
    heap = [(value, position) for position, value in enumerate(items)]
    size = len(heap)
    for start in range(size // 2 - 1, -1, -1):
        _sift_down_min(heap, start, size)
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down_min(heap, 0, end)
    return [value for value, _ in reversed(heap)]


def _merge_runs(arr: list[Any], left: int, mid: int, right: int) -> None:
    left_run = arr[left : mid + 1]
    right_run = arr[mid + 1 : right + 1]
    merged: list[Any] = []
    i = j = 0
    while i < len(left_run) and j < len(right_run):
        if left_run[i] <= right_run[j]:
            merged.append(left_run[i])
            i += 1
        else:
            merged.append(right_run[j])
            j += 1
    merged.extend(left_run[i:])
    merged.extend(right_run[j:])
    arr[left : right + 1] = merged


def tim_sort(items: Iterable[Any]) -> list[Any]:
    """Simplified Timsort: insertion-sorted runs of 32 merged bottom-up."""
    arr = list(items)
    n = len(arr)
    for start in range(0, n, _RUN):
        _insertion_sort(arr, start, min(start + _RUN - 1, n - 1))
    size = _RUN
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                _merge_runs(arr, left, mid, right)
        size *= 2
    return arr