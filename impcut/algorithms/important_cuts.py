"""Branching search for important cuts.

The search walks a binary tree of states ``(S', k, removed, forced)``. At each
state it closes ``S'`` against the sinks, emits the cut made of the forced
edges plus the boundary of the closure as a candidate, and splits on the
boundary edge with the lowest index:

- include: the far endpoint joins the source side, budget unchanged;
- cut: the edge is forced into the cut and removed, budget minus one.

Including an endpoint strictly increases the minimum cut (the closure is the
furthest minimum cut), and cutting lowers both the budget and the minimum cut
by one, so ``2k - lambda`` drops on every step and the tree has at most
``4^k`` leaves. Candidates are deduplicated and checked for importance before
they are reported.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from impcut.algorithms.bfs import boundary_edges
from impcut.algorithms.closure import close, is_important
from impcut.errors import BudgetExceededError, InternalConsistencyError
from impcut.graph.indexed import EdgeID, IndexedGraph
from impcut.logging import get_logger

logger = get_logger(__name__)

Candidate = Tuple[EdgeID, ...]


@dataclass(frozen=True)
class SearchState:
    """One node of the branching tree.

    Attributes:
        sources: Current source side ``S'``.
        budget: Edges that may still be added to the cut.
        removed: Edges forced into the cut so far, as a set.
        forced: The same edges in the order they were forced.
    """

    sources: FrozenSet[int]
    budget: int
    removed: FrozenSet[EdgeID] = frozenset()
    forced: Tuple[EdgeID, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.forced)


def expand(
    graph: IndexedGraph, sinks: FrozenSet[int], state: SearchState
) -> Tuple[Optional[Candidate], List[SearchState]]:
    """Perform one branching step.

    Args:
        graph: The indexed graph.
        sinks: Sink node indices.
        state: The state to expand.

    Returns:
        ``(candidate, children)``. ``candidate`` is the sorted edge-index tuple
        of the cut found at this state, or ``None`` if the branch is pruned.
        ``children`` lists the states to explore next, include branch first.

    Raises:
        InternalConsistencyError: If the state's source side meets the sinks.
    """
    if state.budget < 0:
        return None, []
    overlap = state.sources & sinks
    if overlap:
        raise InternalConsistencyError(
            f"Source side overlaps sinks on {sorted(overlap)} at depth {state.depth}"
        )

    try:
        closure = close(graph, state.sources, sinks, state.budget, removed=state.removed)
    except BudgetExceededError as exc:
        logger.debug(f"Pruned branch at depth {state.depth}: {exc}")
        return None, []

    side = closure.reachable
    boundary = boundary_edges(graph, side, state.removed)
    candidate = tuple(sorted(state.forced + boundary))
    if not boundary or len(boundary) == state.budget:
        return candidate, []

    edge = boundary[0]
    u, v = graph.edges[edge]
    head = v if u in side else u

    children = []
    if head not in sinks:
        children.append(
            SearchState(side | {head}, state.budget, state.removed, state.forced)
        )
    children.append(
        SearchState(
            side, state.budget - 1, state.removed | {edge}, state.forced + (edge,)
        )
    )
    return candidate, children


def iter_candidates(
    graph: IndexedGraph, sinks: FrozenSet[int], root: SearchState
) -> Iterator[Candidate]:
    """Depth-first walk of the subtree under ``root``, yielding raw candidates.

    Candidates may repeat and may be dominated; see ``search_important_cuts``.
    """
    stack = [root]
    while stack:
        state = stack.pop()
        candidate, children = expand(graph, sinks, state)
        if candidate is not None:
            yield candidate
        stack.extend(reversed(children))


def split_frontier(
    graph: IndexedGraph, sinks: FrozenSet[int], root: SearchState, width: int
) -> Tuple[List[Candidate], List[SearchState]]:
    """Expand breadth-first until ``width`` open subtrees exist.

    The returned subtrees are independent of each other and together with the
    returned candidates cover the whole tree under ``root``.

    Returns:
        ``(candidates, open_states)``.
    """
    candidates: List[Candidate] = []
    queue = deque([root])
    while queue and len(queue) < width:
        state = queue.popleft()
        candidate, children = expand(graph, sinks, state)
        if candidate is not None:
            candidates.append(candidate)
        queue.extend(children)
    return candidates, list(queue)


def search_important_cuts(
    graph: IndexedGraph,
    sources: FrozenSet[int],
    sinks: FrozenSet[int],
    k: int,
    *,
    seen: Optional[Set[Candidate]] = None,
) -> Iterator[Candidate]:
    """Yield every important (sources, sinks)-cut of size at most ``k``.

    Args:
        graph: The indexed graph.
        sources: Source node indices.
        sinks: Sink node indices, disjoint from ``sources``.
        k: Maximum cut size.
        seen: Candidates already handled, shared with the caller when the
            search is resumed from several roots.

    Yields:
        Sorted edge-index tuples, each at most once.
    """
    yield from filter_candidates(
        graph,
        sources,
        sinks,
        iter_candidates(graph, sinks, SearchState(sources, k)),
        seen=seen,
    )


def filter_candidates(
    graph: IndexedGraph,
    sources: FrozenSet[int],
    sinks: FrozenSet[int],
    candidates: Iterable[Candidate],
    *,
    seen: Optional[Set[Candidate]] = None,
) -> Iterator[Candidate]:
    """Drop repeated and non-important candidates."""
    if seen is None:
        seen = set()
    for candidate in candidates:
        if candidate in seen:
            continue
        seen.add(candidate)
        if is_important(graph, sources, sinks, candidate):
            yield candidate
