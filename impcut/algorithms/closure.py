"""Closure of a source-side vertex set.

The closure of ``X`` with respect to the sinks ``T`` is the source side of the
minimum (X,T)-cut lying furthest from ``X``: every node connected to ``X``
that cannot reach ``T`` in the residual graph of a maximum flow. It contains
the source side of every minimum (X,T)-cut, so the closure of a closure is the
closure itself.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable

from impcut.algorithms.bfs import boundary_edges, is_minimal_boundary, reachable
from impcut.algorithms.max_flow import calc_max_flow
from impcut.algorithms.types import Closure
from impcut.errors import BudgetExceededError, InternalConsistencyError
from impcut.graph.indexed import EdgeID, IndexedGraph


def close(
    graph: IndexedGraph,
    sources: Iterable[int],
    sinks: Iterable[int],
    budget: int,
    *,
    removed: AbstractSet[EdgeID] = frozenset(),
) -> Closure:
    """Close ``sources`` against ``sinks`` within a cut-size budget.

    Args:
        graph: The indexed graph.
        sources: Current source-side node indices.
        sinks: Sink node indices, disjoint from ``sources``.
        budget: Largest acceptable cut size.
        removed: Edge indices already forced into the cut.

    Returns:
        Closure: The minimum cut size and the furthest minimum-cut source side.

    Raises:
        BudgetExceededError: If the minimum cut is larger than ``budget``.
        InternalConsistencyError: If the sets overlap or the residual state
            does not describe a minimum cut.
    """
    src = frozenset(sources)
    dst = frozenset(sinks)
    summary = calc_max_flow(graph, src, dst, cap=max(budget + 1, 0), removed=removed)
    if summary.saturated:
        raise BudgetExceededError(summary.total_flow, budget)

    side = reachable(graph, src, removed) - summary.sink_reachable
    if not src <= side:
        raise InternalConsistencyError("Closure lost part of its source set")

    cut_size = len(boundary_edges(graph, side, removed))
    if cut_size != summary.total_flow:
        raise InternalConsistencyError(
            f"Closure boundary has {cut_size} edges but flow value is "
            f"{summary.total_flow}"
        )
    return Closure(cut_size=cut_size, reachable=side)


def is_important(
    graph: IndexedGraph,
    sources: Iterable[int],
    sinks: Iterable[int],
    edge_ids: Iterable[EdgeID],
) -> bool:
    """Check whether ``edge_ids`` form an important (sources, sinks)-cut.

    The cut is important when it separates the sets, it is exactly the
    boundary of the set ``R`` of nodes still reachable from the sources, every
    edge of it is needed (its outer endpoint still reaches a sink), and ``R``
    is its own closure at cut size ``|C|``: then no cut of at most the same
    size leaves a strictly larger set reachable.
    """
    cut = frozenset(edge_ids)
    dst = frozenset(sinks)
    side = reachable(graph, sources, cut)
    if side & dst:
        return False
    if frozenset(boundary_edges(graph, side)) != cut:
        return False
    if not is_minimal_boundary(graph, side, dst):
        return False

    try:
        closure = close(graph, side, dst, len(cut))
    except BudgetExceededError as exc:
        # The boundary of `side` is itself a cut of size |C|
        raise InternalConsistencyError(
            f"Cut of size {len(cut)} exceeded its own budget"
        ) from exc
    return closure.cut_size == len(cut) and closure.reachable == side
