"""Greedy algorithms: scheduling, covering, knapsack, coding and spanning trees."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any, Union

from .weighted_graphs import DisjointSet

_HuffmanTree = Union[str, tuple["_HuffmanTree", "_HuffmanTree"]]


def activity_selection(activities: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Pick a largest set of ``(start, finish)`` activities that do not overlap.

    Activities are taken by earliest finish; one may start only strictly after
    the previous chosen one finishes. Returns the chosen pairs in that order.
    """
    ordered = sorted((finish, start) for start, finish in activities)
    selected: list[tuple[int, int]] = []
    last_finish: int | None = None
    for finish, start in ordered:
        if last_finish is None or start > last_finish:
            selected.append((start, finish))
            last_finish = finish
    return selected


def min_arrows(balloons: Iterable[Sequence[int]]) -> int:
    """Fewest arrows that burst every ``(start, end)`` balloon."""
    arrows = 0
    last_point = -math.inf
    for start, end in sorted(balloons, key=lambda balloon: balloon[1]):
        if start > last_point:
            arrows += 1
            last_point = end
    return arrows


def fractional_knapsack(items: Iterable[Sequence[float]], capacity: float) -> float:
    """Largest value that fits in ``capacity`` when items may be split.

    ``items`` holds ``(weight, value)`` pairs; weights must be positive.
    """
    entries = []
    for weight, value in items:
        if weight <= 0:
            raise ValueError(f"item weight must be positive, got {weight!r}")
        entries.append((value / weight, weight, value))
    entries.sort(reverse=True)
    total = 0.0
    remaining = capacity
    for ratio, weight, value in entries:
        if remaining <= 0:
            break
        if weight <= remaining:
            remaining -= weight
            total += value
        else:
            total += ratio * remaining
            remaining = 0
    return total


def gas_station_start(gas: Sequence[int], cost: Sequence[int]) -> int | None:
    """Index of the station from which a full circuit is possible, or None."""
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    start = 0
    total = 0
    current = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost)):
        current += fuel - spend
        total += fuel - spend
        if current < 0:
            start = index + 1
            current = 0
    return start if total >= 0 else None


def huffman_codes(text: str) -> dict[str, str]:
    """Huffman code for every character of ``text``.

    A text with a single distinct character gives it the empty code.
    """
    frequencies = Counter(text)
    if not frequencies:
        return {}
    heap: list[tuple[int, int, _HuffmanTree]] = [
        (count, order, symbol)
        for order, (symbol, count) in enumerate(frequencies.items())
    ]
    heapq.heapify(heap)
    order = len(heap)
    while len(heap) > 1:
        left_count, _, left = heapq.heappop(heap)
        right_count, _, right = heapq.heappop(heap)
        heapq.heappush(heap, (left_count + right_count, order, (left, right)))
        order += 1
    codes: dict[str, str] = {}
    stack: list[tuple[_HuffmanTree, str]] = [(heap[0][2], "")]
    while stack:
        node, code = stack.pop()
        if isinstance(node, str):
            codes[node] = code
        else:
            stack.append((node[1], code + "1"))
            stack.append((node[0], code + "0"))
    return codes


def interval_point_cover(intervals: Iterable[Sequence[int]]) -> list[int]:
    """Fewest points such that every ``(start, end)`` interval holds one."""
    points: list[int] = []
    for start, end in sorted(intervals, key=lambda interval: interval[1]):
        if not points or start > points[-1]:
            points.append(end)
    return points


def job_sequencing(jobs: Iterable[Sequence[int]]) -> tuple[int, int]:
    """Schedule unit-time ``(deadline, profit)`` jobs for the most profit.

    Returns the number of jobs done and the total profit.
    """
    ordered = sorted(((profit, deadline) for deadline, profit in jobs), reverse=True)
    latest = max((deadline for _, deadline in ordered), default=0)
    taken = [False] * (max(latest, 0) + 1)
    count = 0
    total = 0
    for profit, deadline in ordered:
        for slot in range(deadline, 0, -1):
            if not taken[slot]:
                taken[slot] = True
                total += profit
                count += 1
                break
    return count, total


def kruskal_total_weight(num_vertices: int, edges: Iterable[Sequence[Any]]) -> Any:
    """Total weight of a minimum spanning forest of ``(u, v, weight)`` edges."""
    components = DisjointSet(num_vertices)
    total = 0
    for u, v, weight in sorted(edges, key=lambda edge: edge[2]):
        if components.union(u, v):
            total += weight
    return total


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Most trains present at once; a train arriving as another leaves clashes."""
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    arriving = sorted(arrivals)
    leaving = sorted(departures)
    count = len(arriving)
    i = j = 0
    present = most = 0
    while i < count and j < count:
        if arriving[i] <= leaving[j]:
            present += 1
            most = max(most, present)
            i += 1
        else:
            present -= 1
            j += 1
    return most


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Least total cost of merging files pairwise, a merge costing their sum."""
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


def prim_total_weight(num_vertices: int, edges: Iterable[Sequence[Any]]) -> Any:
    """Total weight of a minimum spanning tree of an undirected graph.

    Raises ValueError if the graph is not connected.
    """
    adjacency: list[list[tuple[int, Any]]] = [[] for _ in range(num_vertices)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    key: list[Any] = [math.inf] * num_vertices
    in_tree = [False] * num_vertices
    if num_vertices:
        key[0] = 0
    for _ in range(num_vertices):
        candidates = [
            vertex
            for vertex in range(num_vertices)
            if not in_tree[vertex] and key[vertex] < math.inf
        ]
        if not candidates:
            raise ValueError("graph is not connected")
        vertex = min(candidates, key=key.__getitem__)
        in_tree[vertex] = True
        for neighbor, weight in adjacency[vertex]:
            if not in_tree[neighbor] and weight < key[neighbor]:
                key[neighbor] = weight
    return sum(key)


def greedy_set_cover(universe_size: int, sets: Iterable[Iterable[int]]) -> list[int]:
    """Indices of sets chosen greedily until ``universe_size`` elements are covered.

    Each step takes the set adding the most new elements, the first on ties.
    Raises ValueError when no set adds anything before the cover is complete.
    """
    remaining = [set(members) for members in sets]
    covered: set[int] = set()
    chosen: list[int] = []
    while len(covered) < universe_size:
        best: int | None = None
        best_gain = 0
        for index, members in enumerate(remaining):
            gain = len(members - covered)
            if gain > best_gain:
                best, best_gain = index, gain
        if best is None:
            raise ValueError("the sets do not cover the universe")
        chosen.append(best)
        covered |= remaining[best]
        remaining[best] = set()
    return chosen