"""impcut: important cut enumeration for undirected graphs.

An important (S,T)-cut is an inclusion-minimal edge cut separating S from T
such that no cut of at most the same size leaves a strictly larger set of
nodes reachable from S. impcut enumerates all important cuts of size at most
k with a bounded branching search driven by unit-capacity max flow.

Primary API:
    enumerate_important_cuts() - Lazy iterator over important cuts
    important_cuts() - Sorted list of important cuts
    Cut - Result type (alias ImportantCut)
    SearchConfig - Search configuration

Example:
    import networkx as nx
    from impcut import important_cuts

    g = nx.cycle_graph(["s", "a", "t", "b"])
    for cut in important_cuts(g, {"s"}, {"t"}, 2):
        print(cut.edges)
"""

from __future__ import annotations

from impcut import cli, logging
from impcut.algorithms.closure import close, is_important
from impcut.algorithms.max_flow import calc_max_flow
from impcut.algorithms.naive import filter_important_cuts, generate_cuts
from impcut.algorithms.types import Closure, Cut, FlowSummary, ImportantCut
from impcut.config import SEARCH_CONFIG, SearchConfig
from impcut.cuts import enumerate_important_cuts, important_cuts
from impcut.errors import (
    BudgetExceededError,
    ImpCutError,
    InternalConsistencyError,
    InvalidInputError,
)
from impcut.graph import IndexedGraph, from_networkx, graph_from_edge_list

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Enumeration (primary API)
    "enumerate_important_cuts",
    "important_cuts",
    # Building blocks
    "calc_max_flow",
    "close",
    "is_important",
    # Reference
    "generate_cuts",
    "filter_important_cuts",
    # Types
    "Cut",
    "ImportantCut",
    "Closure",
    "FlowSummary",
    "IndexedGraph",
    "SearchConfig",
    "SEARCH_CONFIG",
    # Errors
    "ImpCutError",
    "InvalidInputError",
    "BudgetExceededError",
    "InternalConsistencyError",
    # Graph helpers
    "from_networkx",
    "graph_from_edge_list",
    # Utilities
    "cli",
    "logging",
]
