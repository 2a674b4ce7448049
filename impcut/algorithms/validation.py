"""Input validation shared by the enumerators."""

from __future__ import annotations

from typing import FrozenSet, Hashable, Iterable, Tuple

import networkx as nx

from impcut.errors import InvalidInputError
from impcut.graph.convert import from_networkx
from impcut.graph.indexed import IndexedGraph


def validate_budget(k: int) -> int:
    """Return ``k`` if it is a non-negative integer.

    Raises:
        InvalidInputError: For booleans, non-integers and negative values.
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidInputError(f"k must be an integer, got {type(k).__name__}.")
    if k < 0:
        raise InvalidInputError(f"k must be non-negative, got {k}.")
    return k


def prepare_problem(
    graph: nx.Graph,
    sources: Iterable[Hashable],
    sinks: Iterable[Hashable],
    k: int,
) -> Tuple[IndexedGraph, FrozenSet[int], FrozenSet[int]]:
    """Validate a cut problem and convert it to indexed form.

    Args:
        graph: Undirected NetworkX graph.
        sources: Source nodes ``S``.
        sinks: Sink nodes ``T``.
        k: Maximum cut size.

    Returns:
        ``(indexed_graph, source_indices, sink_indices)``.

    Raises:
        InvalidInputError: If the graph is directed, a node is unknown, ``S``
            and ``T`` intersect, or ``k`` is not a non-negative integer.
    """
    validate_budget(k)
    if isinstance(sources, (str, bytes)) or isinstance(sinks, (str, bytes)):
        raise InvalidInputError("sources and sinks must be collections of nodes.")
    indexed = from_networkx(graph)
    src = indexed.index_of(sources)
    dst = indexed.index_of(sinks)
    overlap = src & dst
    if overlap:
        raise InvalidInputError(
            f"Sources and sinks must be disjoint; both contain "
            f"{sorted(map(str, indexed.names(overlap)))}."
        )
    return indexed, src, dst
