"""Types and data structures for algorithm outputs.

Defines immutable result containers shared by the flow engine, the closure
operator and the cut enumerators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Hashable, Iterable, Tuple

from impcut.graph.indexed import EdgeID, IndexedGraph, NodeID


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a bounded max-flow computation.

    When ``saturated`` is True the search stopped at the cap before reaching a
    maximum flow; the residual sets and ``min_cut`` are then left empty.

    Attributes:
        total_flow: Flow value placed from the source set to the sink set.
        edge_flow: Net flow per edge, in ``{-1, 0, 1}``; positive values run
            along the stored edge orientation.
        reachable: Node indices reachable from the sources in the residual graph.
        sink_reachable: Node indices that can reach a sink in the residual graph.
        min_cut: Edge indices leaving ``reachable`` (the cut closest to the sources).
        saturated: Whether the flow value hit the cap.
    """

    total_flow: int
    edge_flow: Tuple[int, ...]
    reachable: FrozenSet[int]
    sink_reachable: FrozenSet[int]
    min_cut: Tuple[EdgeID, ...]
    saturated: bool


@dataclass(frozen=True)
class Closure:
    """Result of closing a source-side vertex set against the sinks.

    Attributes:
        cut_size: Size of the minimum cut between the set and the sinks.
        reachable: Source side of the minimum cut furthest from the set.
    """

    cut_size: int
    reachable: FrozenSet[int]


@dataclass(frozen=True, order=True)
class Cut:
    """An (S,T) edge cut expressed in node names.

    Ordering and identity follow ``(size, edge_ids)``; ``edge_ids`` is the
    sorted tuple of edge indices in the indexed graph and serves as the
    canonical key.

    Attributes:
        size: Number of edges in the cut.
        edge_ids: Sorted edge indices.
        edges: Edges as ``(u, v)`` node-name pairs, in ``edge_ids`` order.
        source_side: Nodes reachable from the sources once the cut is removed.
    """

    size: int
    edge_ids: Tuple[EdgeID, ...]
    edges: Tuple[Tuple[NodeID, NodeID], ...]
    source_side: FrozenSet[Hashable]

    @classmethod
    def from_edge_ids(
        cls,
        graph: IndexedGraph,
        edge_ids: Iterable[EdgeID],
        source_side: Iterable[int],
    ) -> Cut:
        """Build a cut from edge indices and source-side node indices."""
        ids = tuple(sorted(edge_ids))
        return cls(
            size=len(ids),
            edge_ids=ids,
            edges=tuple(graph.edge_names(e) for e in ids),
            source_side=graph.names(source_side),
        )

    def __contains__(self, edge: Tuple[NodeID, NodeID]) -> bool:
        u, v = edge
        return (u, v) in self.edges or (v, u) in self.edges


# Cuts yielded by the enumerator are important cuts.
ImportantCut = Cut
