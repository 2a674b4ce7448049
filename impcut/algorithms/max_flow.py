"""Bounded maximum flow via shortest augmenting paths.

Implements an Edmonds-Karp procedure on the unit-capacity flow network of an
undirected graph: every edge carries one unit of capacity in each direction.
Each BFS finds a shortest augmenting path and adds exactly one unit of flow,
so a run capped at ``cap`` costs ``O((V + E) * min(flow, cap))``. The search
treats the source and sink sets as if they were contracted into a single
super-source and super-sink.
"""

from __future__ import annotations

from collections import deque
from typing import AbstractSet, Dict, FrozenSet, Iterable, List, Optional

from impcut.algorithms.bfs import boundary_edges
from impcut.algorithms.types import FlowSummary
from impcut.errors import InternalConsistencyError
from impcut.graph.indexed import EdgeID, IndexedGraph


def calc_max_flow(
    graph: IndexedGraph,
    sources: Iterable[int],
    sinks: Iterable[int],
    *,
    cap: Optional[int] = None,
    removed: AbstractSet[EdgeID] = frozenset(),
) -> FlowSummary:
    """Compute a maximum flow from a set of sources to a set of sinks.

    Args:
        graph: The indexed graph. It is never modified.
        sources: Source node indices.
        sinks: Sink node indices; must be disjoint from ``sources``.
        cap: Stop once the flow value reaches this many units. ``None``
            computes the true maximum flow.
        removed: Edge indices that carry no capacity.

    Returns:
        FlowSummary: Flow value, per-edge net flow, residual reachability and
        the minimum cut closest to the sources. Residual sets are only
        populated when the cap was not reached.

    Raises:
        InternalConsistencyError: If ``sources`` and ``sinks`` overlap.

    Examples:
        >>> from impcut.graph import IndexedGraph
        >>> g = IndexedGraph(["a", "b", "c"], [(0, 1), (1, 2), (0, 2)])
        >>> calc_max_flow(g, {0}, {2}).total_flow
        2
    """
    src = frozenset(sources)
    dst = frozenset(sinks)
    overlap = src & dst
    if overlap:
        raise InternalConsistencyError(
            f"Source and sink sets overlap on {sorted(overlap)}"
        )

    flow: List[int] = [0] * graph.number_of_edges
    total = 0
    if src and dst:
        while cap is None or total < cap:
            pred = _find_augmenting_path(graph, src, dst, flow, removed)
            if pred is None:
                break
            sink, parents = pred
            _augment(graph, src, sink, parents, flow)
            total += 1

    saturated = cap is not None and total >= cap
    if saturated:
        return FlowSummary(
            total_flow=total,
            edge_flow=tuple(flow),
            reachable=frozenset(),
            sink_reachable=frozenset(),
            min_cut=(),
            saturated=True,
        )

    reachable = _residual_reachable(graph, src, flow, removed)
    return FlowSummary(
        total_flow=total,
        edge_flow=tuple(flow),
        reachable=reachable,
        sink_reachable=_residual_sink_reachable(graph, dst, flow, removed),
        min_cut=boundary_edges(graph, reachable, removed),
        saturated=False,
    )


def residual_capacity(
    graph: IndexedGraph, flow: List[int], edge: EdgeID, tail: int
) -> int:
    """Residual capacity of ``edge`` when traversed starting at ``tail``.

    With one unit of capacity per direction and net flow ``f`` along the stored
    orientation, the forward residual is ``1 - f`` and the backward one ``1 + f``.
    """
    if tail == graph.edges[edge][0]:
        return 1 - flow[edge]
    return 1 + flow[edge]


def _find_augmenting_path(
    graph: IndexedGraph,
    sources: FrozenSet[int],
    sinks: FrozenSet[int],
    flow: List[int],
    removed: AbstractSet[EdgeID],
):
    """BFS for a shortest augmenting path from any source to any sink.

    Returns ``(sink, parents)`` where ``parents`` maps every discovered node to
    the edge it was entered through, or ``None`` when no path exists.
    """
    parents: Dict[int, EdgeID] = {}
    visited = set(sources)
    queue = deque(sources)
    while queue:
        node = queue.popleft()
        for neighbor, edge in graph.adjacency[node]:
            if neighbor in visited or edge in removed:
                continue
            if residual_capacity(graph, flow, edge, node) <= 0:
                continue
            parents[neighbor] = edge
            if neighbor in sinks:
                return neighbor, parents
            visited.add(neighbor)
            queue.append(neighbor)
    return None


def _augment(
    graph: IndexedGraph,
    sources: FrozenSet[int],
    sink: int,
    parents: Dict[int, EdgeID],
    flow: List[int],
) -> None:
    """Push one unit along the path recorded in ``parents``."""
    node = sink
    while node not in sources:
        edge = parents[node]
        prev = graph.other_end(edge, node)
        if prev == graph.edges[edge][0]:
            flow[edge] += 1
        else:
            flow[edge] -= 1
        if abs(flow[edge]) > 1:
            raise InternalConsistencyError(f"Edge {edge} carries more than one unit")
        node = prev


def _residual_reachable(
    graph: IndexedGraph,
    sources: FrozenSet[int],
    flow: List[int],
    removed: AbstractSet[EdgeID],
) -> FrozenSet[int]:
    # Forward search along arcs with spare capacity
    visited = set(sources)
    queue = deque(sources)
    while queue:
        node = queue.popleft()
        for neighbor, edge in graph.adjacency[node]:
            if neighbor in visited or edge in removed:
                continue
            if residual_capacity(graph, flow, edge, node) > 0:
                visited.add(neighbor)
                queue.append(neighbor)
    return frozenset(visited)


def _residual_sink_reachable(
    graph: IndexedGraph,
    sinks: FrozenSet[int],
    flow: List[int],
    removed: AbstractSet[EdgeID],
) -> FrozenSet[int]:
    # Backward search: neighbor reaches node if the arc neighbor -> node has spare capacity
    visited = set(sinks)
    queue = deque(sinks)
    while queue:
        node = queue.popleft()
        for neighbor, edge in graph.adjacency[node]:
            if neighbor in visited or edge in removed:
                continue
            if residual_capacity(graph, flow, edge, neighbor) > 0:
                visited.add(neighbor)
                queue.append(neighbor)
    return frozenset(visited)
