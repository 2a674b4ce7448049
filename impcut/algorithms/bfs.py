from collections import deque
from typing import AbstractSet, FrozenSet, Iterable, Tuple

from impcut.graph.indexed import EdgeID, IndexedGraph


def reachable(
    graph: IndexedGraph,
    sources: Iterable[int],
    removed: AbstractSet[EdgeID] = frozenset(),
) -> FrozenSet[int]:
    """
    Breadth-first search from all ``sources`` at once, skipping ``removed`` edges.
    """
    visited = set(sources)
    queue = deque(visited)
    while queue:
        node = queue.popleft()
        for neighbor, edge in graph.adjacency[node]:
            if edge in removed or neighbor in visited:
                continue
            visited.add(neighbor)
            queue.append(neighbor)
    return frozenset(visited)


def boundary_edges(
    graph: IndexedGraph,
    vertex_set: AbstractSet[int],
    removed: AbstractSet[EdgeID] = frozenset(),
) -> Tuple[EdgeID, ...]:
    """
    Sorted indices of the edges with exactly one endpoint in ``vertex_set``.
    """
    boundary = set()
    for node in vertex_set:
        for neighbor, edge in graph.adjacency[node]:
            if neighbor not in vertex_set and edge not in removed:
                boundary.add(edge)
    return tuple(sorted(boundary))


def is_minimal_boundary(
    graph: IndexedGraph,
    vertex_set: AbstractSet[int],
    sinks: Iterable[int],
    removed: AbstractSet[EdgeID] = frozenset(),
) -> bool:
    """Check that every boundary edge of ``vertex_set`` is needed to cut off ``sinks``.

    An edge is needed when its outer endpoint still reaches a sink without
    re-entering ``vertex_set``. Edges into dead ends fail this check.
    """
    boundary = boundary_edges(graph, vertex_set, removed)
    outside = reachable(graph, sinks, removed | frozenset(boundary))
    for edge in boundary:
        u, v = graph.edges[edge]
        if (v if u in vertex_set else u) not in outside:
            return False
    return True
