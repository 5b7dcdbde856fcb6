"""Shortest paths and minimum spanning trees on weighted graphs.

Distances to unreachable vertices are ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple


class Edge(NamedTuple):
    """A weighted edge from ``u`` to ``v``."""

    u: int
    v: int
    weight: float


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return False if already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True


def bellman_ford(
    source: int, num_vertices: int, edges: Iterable[Sequence[float]]
) -> list[float]:
    """Single-source shortest distances allowing negative edge weights.

    Raises ValueError if a negative cycle is reachable from ``source``.
    """
    edge_list = [Edge(*edge) for edge in edges]
    distance = [math.inf] * num_vertices
    distance[source] = 0
    for _ in range(num_vertices - 1):
        changed = False
        for u, v, weight in edge_list:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edge_list:
        if distance[u] != math.inf and distance[u] + weight < distance[v]:
            raise ValueError("graph has a negative cycle reachable from the source")
    return distance


def dijkstra(
    source: int, adjacency: Sequence[Iterable[tuple[int, float]]]
) -> list[float]:
    """Single-source shortest distances for non-negative weights.

    ``adjacency[u]`` holds ``(neighbor, weight)`` pairs.
    """
    distance = [math.inf] * len(adjacency)
    distance[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        current_distance, vertex = heapq.heappop(heap)
        if current_distance > distance[vertex]:
            continue
        for neighbor, weight in adjacency[vertex]:
            candidate = current_distance + weight
            if candidate < distance[neighbor]:
                distance[neighbor] = candidate
                heapq.heappush(heap, (candidate, neighbor))
    return distance


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix.

    Missing edges are ``math.inf``. Returns a new matrix.
    """
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(size):
        row_k = dist[k]
        for row in dist:
            through_k = row[k]
            if through_k == math.inf:
                continue
            for j, onward in enumerate(row_k):
                if onward != math.inf and through_k + onward < row[j]:
                    row[j] = through_k + onward
    return dist


def kruskal_mst(num_vertices: int, edges: Iterable[Sequence[float]]) -> list[Edge]:
    """Edges of a minimum spanning forest, in the order they were chosen."""
    ordered = sorted((Edge(*edge) for edge in edges), key=lambda edge: edge.weight)
    components = DisjointSet(num_vertices)
    return [edge for edge in ordered if components.union(edge.u, edge.v)]


def prim_mst(
    num_vertices: int, adjacency: Sequence[Iterable[tuple[int, float]]]
) -> list[tuple[int, int]]:
    """Minimum spanning tree grown from vertex 0.

    Returns ``(parent, vertex)`` for every vertex but 0, in vertex order.
    Raises ValueError if the graph is not connected.
    """
    if num_vertices == 0:
        return []
    in_tree = [False] * num_vertices
    key = [math.inf] * num_vertices
    parent: list[int | None] = [None] * num_vertices
    key[0] = 0
    heap: list[tuple[float, int]] = [(0, 0)]
    while heap:
        _, vertex = heapq.heappop(heap)
        if in_tree[vertex]:
            continue
        in_tree[vertex] = True
        for neighbor, weight in adjacency[vertex]:
            if not in_tree[neighbor] and weight < key[neighbor]:
                key[neighbor] = weight
                parent[neighbor] = vertex
                heapq.heappush(heap, (weight, neighbor))
    if not all(in_tree):
        raise ValueError("graph is not connected")
    return [(parent[vertex], vertex) for vertex in range(1, num_vertices)]