"""Traversals, connectivity, cycle checks and orderings on unweighted graphs.

Graphs are given as adjacency lists: ``adjacency[u]`` holds the neighbours
of vertex ``u``, and vertices are the integers ``0 .. len(adjacency) - 1``.
An undirected graph lists every edge in both directions.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Adjacency = Sequence[Iterable[int]]


class DirectedGraph:
    """Directed graph over vertices ``0 .. num_vertices - 1``."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices cannot be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is not in the graph")

    def add_edge(self, source: int, destination: int) -> None:
        """Add an edge from ``source`` to ``destination``."""
        self._check(source)
        self._check(destination)
        self._adjacency[source].append(destination)

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Return the vertices ``vertex`` has edges to, in insertion order."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    @property
    def adjacency(self) -> list[list[int]]:
        """A copy of the adjacency lists."""
        return [list(row) for row in self._adjacency]

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex}: {' '.join(map(str, row))}".rstrip()
            for vertex, row in enumerate(self._adjacency)
        )


def _lists(adjacency: Adjacency) -> list[list[int]]:
    return [list(row) for row in adjacency]


def _preorder(start: int, adj: list[list[int]], visited: list[bool]) -> Iterator[int]:
    visited[start] = True
    yield start
    stack = [iter(adj[start])]
    while stack:
        for neighbor in stack[-1]:
            if not visited[neighbor]:
                visited[neighbor] = True
                yield neighbor
                stack.append(iter(adj[neighbor]))
                break
        else:
            stack.pop()


def _postorder(start: int, adj: list[list[int]], visited: list[bool]) -> Iterator[int]:
    visited[start] = True
    stack = [(start, iter(adj[start]))]
    while stack:
        vertex, neighbors = stack[-1]
        for neighbor in neighbors:
            if not visited[neighbor]:
                visited[neighbor] = True
                stack.append((neighbor, iter(adj[neighbor])))
                break
        else:
            stack.pop()
            yield vertex


def bfs_order(start: int, adjacency: Adjacency) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first order."""
    adj = _lists(adjacency)
    visited = [False] * len(adj)
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbor in adj[vertex]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)
    return order


def dfs_order(start: int, adjacency: Adjacency) -> list[int]:
    """Vertices reachable from ``start`` in depth-first preorder."""
    adj = _lists(adjacency)
    return list(_preorder(start, adj, [False] * len(adj)))


def is_bipartite(adjacency: Adjacency) -> bool:
    """Tell whether the undirected graph can be two-coloured."""
    adj = _lists(adjacency)
    color: list[int | None] = [None] * len(adj)
    for source in range(len(adj)):
        if color[source] is not None:
            continue
        color[source] = 1
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for neighbor in adj[vertex]:
                if color[neighbor] is None:
                    color[neighbor] = 1 - color[vertex]
                    queue.append(neighbor)
                elif color[neighbor] == color[vertex]:
                    return False
    return True


def count_connected_components(adjacency: Adjacency) -> int:
    """Number of connected components of the undirected graph."""
    adj = _lists(adjacency)
    visited = [False] * len(adj)
    count = 0
    for vertex in range(len(adj)):
        if not visited[vertex]:
            count += 1
            for _ in _preorder(vertex, adj, visited):
                pass
    return count


def has_cycle_directed(adjacency: Adjacency) -> bool:
    """Tell whether the directed graph contains a cycle (self-loops count)."""
    adj = _lists(adjacency)
    visited = [False] * len(adj)
    on_path = [False] * len(adj)
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if not visited[neighbor]:
                    visited[neighbor] = on_path[neighbor] = True
                    stack.append((neighbor, iter(adj[neighbor])))
                    break
                if on_path[neighbor]:
                    return True
            else:
                on_path[vertex] = False
                stack.pop()
    return False


def has_cycle_undirected(adjacency: Adjacency) -> bool:
    """Tell whether the undirected graph contains a cycle.

    An edge straight back to the vertex a search arrived from is not a cycle.
    """
    adj = _lists(adjacency)
    visited = [False] * len(adj)
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, int | None, Iterator[int]]] = [
            (root, None, iter(adj[root]))
        ]
        while stack:
            vertex, parent, neighbors = stack[-1]
            for neighbor in neighbors:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    stack.append((neighbor, vertex, iter(adj[neighbor])))
                    break
                if neighbor != parent:
                    return True
            else:
                stack.pop()
    return False


def path_exists(adjacency: Adjacency, source: int, destination: int) -> bool:
    """Tell whether ``destination`` can be reached from ``source``."""
    adj = _lists(adjacency)
    if not 0 <= destination < len(adj):
        raise IndexError(f"vertex {destination} is not in the graph")
    return any(
        vertex == destination for vertex in _preorder(source, adj, [False] * len(adj))
    )


def unweighted_distances(source: int, adjacency: Adjacency) -> list[int | None]:
    """Fewest edges from ``source`` to each vertex; None where unreachable."""
    adj = _lists(adjacency)
    distance: list[int | None] = [None] * len(adj)
    distance[source] = 0
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for neighbor in adj[vertex]:
            if distance[neighbor] is None:
                distance[neighbor] = distance[vertex] + 1
                queue.append(neighbor)
    return distance


def topological_sort_dfs(adjacency: Adjacency) -> list[int]:
    """Reverse depth-first postorder of all vertices.

    For an acyclic graph this is a topological order; cycles are not reported.
    """
    adj = _lists(adjacency)
    visited = [False] * len(adj)
    finished: list[int] = []
    for vertex in range(len(adj)):
        if not visited[vertex]:
            finished.extend(_postorder(vertex, adj, visited))
    finished.reverse()
    return finished


def topological_sort_kahn(adjacency: Adjacency) -> list[int]:
    """Topological order by repeatedly removing vertices of in-degree zero.

    Vertices on or behind a cycle never reach in-degree zero and are left out,
    so a result shorter than the graph means the graph has a cycle.
    """
    adj = _lists(adjacency)
    in_degree = [0] * len(adj)
    for row in adj:
        for neighbor in row:
            in_degree[neighbor] += 1
    queue = deque(vertex for vertex, degree in enumerate(in_degree) if degree == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbor in adj[vertex]:
            in_degree[neighbor] -= 1
            if in_degree[neighbor] == 0:
                queue.append(neighbor)
    return order


def kosaraju_scc(adjacency: Adjacency) -> list[list[int]]:
    """Strongly connected components of a directed graph (Kosaraju).

    Components come in order of decreasing finish time of the first pass;
    each lists its vertices in depth-first order on the transposed graph.
    """
    adj = _lists(adjacency)
    visited = [False] * len(adj)
    finished: list[int] = []
    for vertex in range(len(adj)):
        if not visited[vertex]:
            finished.extend(_postorder(vertex, adj, visited))
    transpose: list[list[int]] = [[] for _ in adj]
    for u, row in enumerate(adj):
        for v in row:
            transpose[v].append(u)
    visited = [False] * len(adj)
    return [
        list(_preorder(vertex, transpose, visited))
        for vertex in reversed(finished)
        if not visited[vertex]
    ]