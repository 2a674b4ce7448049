"""Immutable integer-indexed undirected graph.

`IndexedGraph` maps arbitrary hashable node names to contiguous indices and
stores each undirected edge once, with a stable edge index. The search and
flow routines operate purely on indices; names are only needed at the API
boundary.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Hashable, Iterable, Iterator, List, Sequence, Tuple

from impcut.errors import InvalidInputError

NodeID = Hashable
EdgeID = int
# Adjacency entry: (neighbor_index, edge_index)
AdjEntry = Tuple[int, EdgeID]


class IndexedGraph:
    """A simple undirected graph with indexed nodes and edges.

    Instances are never mutated after construction. Edge ``i`` connects
    ``edges[i][0]`` and ``edges[i][1]``; the orientation is the one in which
    the edge was supplied and only matters for reporting.

    Attributes:
        nodes: Node names in index order.
        edges: ``(u, v)`` index pairs in edge-index order.
        adjacency: Per node, the ``(neighbor, edge)`` pairs incident to it.
    """

    __slots__ = ("nodes", "edges", "adjacency", "_node_index")

    def __init__(
        self, nodes: Sequence[NodeID], edges: Iterable[Tuple[int, int]]
    ) -> None:
        self.nodes: Tuple[NodeID, ...] = tuple(nodes)
        self._node_index: Dict[NodeID, int] = {
            name: i for i, name in enumerate(self.nodes)
        }
        if len(self._node_index) != len(self.nodes):
            raise InvalidInputError("Duplicate node names.")

        n = len(self.nodes)
        adjacency: List[List[AdjEntry]] = [[] for _ in range(n)]
        edge_list: List[Tuple[int, int]] = []
        seen = set()
        for u, v in edges:
            if not (0 <= u < n and 0 <= v < n):
                raise InvalidInputError(f"Edge ({u}, {v}) references a missing node.")
            if u == v:
                raise InvalidInputError(f"Self-loop on node '{self.nodes[u]}'.")
            pair = (u, v) if u < v else (v, u)
            if pair in seen:
                raise InvalidInputError(
                    f"Duplicate edge between '{self.nodes[u]}' and '{self.nodes[v]}'."
                )
            seen.add(pair)
            e = len(edge_list)
            edge_list.append((u, v))
            adjacency[u].append((v, e))
            adjacency[v].append((u, e))

        self.edges: Tuple[Tuple[int, int], ...] = tuple(edge_list)
        self.adjacency: Tuple[Tuple[AdjEntry, ...], ...] = tuple(
            tuple(entries) for entries in adjacency
        )

    def __repr__(self) -> str:
        return f"IndexedGraph(nodes={len(self.nodes)}, edges={len(self.edges)})"

    def __getstate__(self):
        return (self.nodes, self.edges)

    def __setstate__(self, state) -> None:
        nodes, edges = state
        self.__init__(nodes, edges)

    @property
    def number_of_nodes(self) -> int:
        return len(self.nodes)

    @property
    def number_of_edges(self) -> int:
        return len(self.edges)

    def index(self, node: NodeID) -> int:
        """Return the index of ``node``.

        Raises:
            InvalidInputError: If the node is not part of the graph.
        """
        try:
            return self._node_index[node]
        except (KeyError, TypeError):
            raise InvalidInputError(f"Node '{node}' does not exist.") from None

    def index_of(self, nodes: Iterable[NodeID]) -> FrozenSet[int]:
        """Return the indices of ``nodes`` as a frozenset."""
        return frozenset(self.index(node) for node in nodes)

    def names(self, indices: Iterable[int]) -> FrozenSet[NodeID]:
        """Return the node names of ``indices`` as a frozenset."""
        return frozenset(self.nodes[i] for i in indices)

    def edge_names(self, edge: EdgeID) -> Tuple[NodeID, NodeID]:
        """Return the edge as a pair of node names."""
        u, v = self.edges[edge]
        return self.nodes[u], self.nodes[v]

    def other_end(self, edge: EdgeID, node: int) -> int:
        """Return the endpoint of ``edge`` that is not ``node``."""
        u, v = self.edges[edge]
        if node == u:
            return v
        if node == v:
            return u
        raise ValueError(f"Node {node} is not an endpoint of edge {edge}.")

    def neighbors(self, node: int) -> Iterator[int]:
        """Iterate over neighbor indices of ``node``."""
        for neighbor, _ in self.adjacency[node]:
            yield neighbor
