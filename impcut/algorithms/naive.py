"""Brute-force cut enumeration.

Exponential reference implementation used to cross-check the branching
search on small graphs. Every inclusion-minimal (S,T)-cut is the boundary of
the set ``R`` of nodes still reachable from ``S`` after removing it, so
enumerating candidate sets ``R`` with ``S <= R`` and ``R & T`` empty and
keeping those whose boundary leaves exactly ``R`` reachable, and whose
boundary edges all lead to nodes that still reach ``T``, yields each minimal
cut exactly once.
"""

from __future__ import annotations

from itertools import combinations
from typing import Hashable, Iterable, List, Optional

import networkx as nx

from impcut.algorithms.bfs import boundary_edges, is_minimal_boundary, reachable
from impcut.algorithms.types import Cut
from impcut.algorithms.validation import prepare_problem
from impcut.config import SEARCH_CONFIG, SearchConfig
from impcut.errors import InvalidInputError


def generate_cuts(
    graph: nx.Graph,
    sources: Iterable[Hashable],
    sinks: Iterable[Hashable],
    k: int,
    *,
    config: Optional[SearchConfig] = None,
) -> List[Cut]:
    """Return every inclusion-minimal (sources, sinks)-cut of size at most ``k``.

    Args:
        graph: Undirected NetworkX graph.
        sources: Source nodes.
        sinks: Sink nodes.
        k: Maximum cut size.
        config: Supplies ``brute_force_max_nodes``.

    Returns:
        List[Cut]: Cuts sorted by size then edge indices.

    Raises:
        InvalidInputError: On invalid input or graphs above the size limit.
    """
    cfg = config or SEARCH_CONFIG
    indexed, src, dst = prepare_problem(graph, sources, sinks, k)
    if indexed.number_of_nodes > cfg.brute_force_max_nodes:
        raise InvalidInputError(
            f"Brute force is limited to {cfg.brute_force_max_nodes} nodes, "
            f"graph has {indexed.number_of_nodes}."
        )

    free = [i for i in range(indexed.number_of_nodes) if i not in src and i not in dst]
    cuts = []
    for size in range(len(free) + 1):
        for extra in combinations(free, size):
            side = src.union(extra)
            boundary = boundary_edges(indexed, side)
            if len(boundary) > k:
                continue
            if reachable(indexed, src, frozenset(boundary)) != side:
                continue
            if not is_minimal_boundary(indexed, side, dst):
                continue
            cuts.append(Cut.from_edge_ids(indexed, boundary, side))
    return sorted(cuts)


def filter_important_cuts(cuts: Iterable[Cut]) -> List[Cut]:
    """Keep the cuts that no other cut dominates.

    A cut is dominated when another cut of at most the same size leaves a
    strictly larger set of nodes reachable from the sources. Applied to the
    output of ``generate_cuts`` this yields exactly the important cuts of size
    at most ``k``.
    """
    cuts = list(cuts)
    return [
        cut
        for cut in cuts
        if not any(
            other.size <= cut.size and other.source_side > cut.source_side
            for other in cuts
        )
    ]
