"""Sample graphs shared across test folders as pytest fixtures."""

from __future__ import annotations

import networkx as nx
import pytest


@pytest.fixture
def path5():
    #  1 ─── 2 ─── 3 ─── 4 ─── 5
    return nx.path_graph([1, 2, 3, 4, 5])


@pytest.fixture
def cycle4():
    #       a
    #     /   \
    #    s     t
    #     \   /
    #       b
    return nx.cycle_graph(["s", "a", "t", "b"])


@pytest.fixture
def tree7():
    #         0
    #       /   \
    #      1     2
    #     / \   / \
    #    3   4 5   6
    g = nx.Graph()
    g.add_edges_from([(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6)])
    return g


@pytest.fixture
def triangle():
    return nx.Graph([("A", "B"), ("B", "C"), ("A", "C")])


@pytest.fixture
def funnel():
    #    ┌── a ──┐
    #  s ┤       c ── t
    #    └── b ──┘
    return nx.Graph([("s", "a"), ("s", "b"), ("a", "c"), ("b", "c"), ("c", "t")])


@pytest.fixture
def k5():
    return nx.complete_graph(["A", "B", "C", "D", "E"])
