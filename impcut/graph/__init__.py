"""Graph primitives and helpers.

This package provides the immutable, integer-indexed undirected graph
`IndexedGraph` used by the search, and conversion helpers from NetworkX
graphs (`convert`).
"""

from impcut.graph.convert import from_networkx, graph_from_edge_list
from impcut.graph.indexed import IndexedGraph

__all__ = ["IndexedGraph", "from_networkx", "graph_from_edge_list"]
