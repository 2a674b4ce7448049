"""Conversion utilities between NetworkX graphs and `IndexedGraph`.

The search only supports simple undirected graphs. Conversion simplifies
what it safely can: self-loops never belong to a cut and parallel edges of a
multigraph are merged into one. Directed graphs are rejected.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Optional, Sequence

import networkx as nx

from impcut.errors import InvalidInputError
from impcut.graph.indexed import IndexedGraph
from impcut.logging import get_logger

logger = get_logger(__name__)


def from_networkx(graph: nx.Graph) -> IndexedGraph:
    """Convert an undirected NetworkX graph to an `IndexedGraph`.

    Node indices follow ``graph.nodes`` order and edge indices follow
    ``graph.edges`` order. Edge attributes (weights included) are ignored.

    Args:
        graph: An ``nx.Graph`` or ``nx.MultiGraph``.

    Returns:
        The indexed, simplified graph.

    Raises:
        InvalidInputError: If ``graph`` is not an undirected NetworkX graph.
    """
    if not isinstance(graph, nx.Graph):
        raise InvalidInputError(
            f"Expected a networkx graph, got {type(graph).__name__}."
        )
    if graph.is_directed():
        raise InvalidInputError("Important cuts are defined on undirected graphs.")

    nodes = list(graph.nodes)
    node_index = {name: i for i, name in enumerate(nodes)}

    edges = []
    seen = set()
    self_loops = 0
    parallel = 0
    for u, v in graph.edges():
        iu, iv = node_index[u], node_index[v]
        if iu == iv:
            self_loops += 1
            continue
        pair = (iu, iv) if iu < iv else (iv, iu)
        if pair in seen:
            parallel += 1
            continue
        seen.add(pair)
        edges.append((iu, iv))

    if self_loops or parallel:
        logger.debug(
            f"Simplified input graph: dropped {self_loops} self-loop(s), "
            f"merged {parallel} parallel edge(s)"
        )
    return IndexedGraph(nodes, edges)


def graph_from_edge_list(
    edges: Iterable[Sequence[Hashable]],
    nodes: Optional[Iterable[Hashable]] = None,
) -> nx.Graph:
    """Build an ``nx.Graph`` from an edge list and optional extra nodes.

    Args:
        edges: Two-item sequences ``(u, v)``.
        nodes: Nodes to add before the edges, e.g. isolated ones. Their order
            fixes the node indices of the resulting graph.

    Returns:
        The NetworkX graph.

    Raises:
        InvalidInputError: If an edge entry does not have exactly two endpoints.
    """
    graph = nx.Graph()
    if nodes is not None:
        graph.add_nodes_from(nodes)
    for entry in edges:
        if len(entry) != 2:
            raise InvalidInputError(
                f"Each edge must have exactly two endpoints, got {list(entry)!r}."
            )
        u, v = entry
        graph.add_edge(u, v)
    return graph
