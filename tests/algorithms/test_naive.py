import networkx as nx
import pytest

from impcut.algorithms.naive import filter_important_cuts, generate_cuts
from impcut.config import SearchConfig
from impcut.errors import InvalidInputError


def edge_sets(cuts):
    return {frozenset(frozenset(e) for e in cut.edges) for cut in cuts}


def test_generate_cuts_path(path5):
    cuts = generate_cuts(path5, {1}, {5}, 1)
    assert edge_sets(cuts) == {
        frozenset({frozenset({1, 2})}),
        frozenset({frozenset({2, 3})}),
        frozenset({frozenset({3, 4})}),
        frozenset({frozenset({4, 5})}),
    }
    assert all(cut.size == 1 for cut in cuts)


def test_generate_cuts_only_minimal(path5):
    # No pair of path edges is a minimal cut
    assert all(cut.size == 1 for cut in generate_cuts(path5, {1}, {5}, 4))


def test_generate_cuts_cycle(cycle4):
    cuts = generate_cuts(cycle4, {"s"}, {"t"}, 2)
    assert len(cuts) == 4
    assert {cut.source_side for cut in cuts} == {
        frozenset({"s"}),
        frozenset({"s", "a"}),
        frozenset({"s", "b"}),
        frozenset({"s", "a", "b"}),
    }


def test_generate_cuts_sorted(tree7):
    cuts = generate_cuts(tree7, {0}, {3, 4, 5, 6}, 4)
    assert cuts == sorted(cuts)
    assert [cut.size for cut in cuts] == [2, 3, 3, 4]


def test_filter_important_cuts_path(path5):
    important = filter_important_cuts(generate_cuts(path5, {1}, {5}, 1))
    assert [cut.edges for cut in important] == [((4, 5),)]


def test_filter_important_cuts_cycle(cycle4):
    important = filter_important_cuts(generate_cuts(cycle4, {"s"}, {"t"}, 2))
    assert len(important) == 1
    assert important[0].source_side == frozenset({"s", "a", "b"})


def test_filter_keeps_incomparable_cuts(tree7):
    important = filter_important_cuts(generate_cuts(tree7, {0}, {3, 4, 5, 6}, 3))
    assert {cut.source_side for cut in important} == {
        frozenset({0}),
        frozenset({0, 1}),
        frozenset({0, 2}),
    }


def test_brute_force_refuses_large_graphs():
    g = nx.path_graph(17)
    with pytest.raises(InvalidInputError, match="limited to"):
        generate_cuts(g, {0}, {16}, 2)
    cuts = generate_cuts(g, {0}, {16}, 1, config=SearchConfig(brute_force_max_nodes=17))
    assert len(cuts) == 16


def test_generate_cuts_skips_edges_into_dead_ends():
    #  a ── s ── t
    g = nx.Graph([("s", "a"), ("s", "t")])
    cuts = generate_cuts(g, {"s"}, {"t"}, 2)
    assert [cut.edges for cut in cuts] == [(("s", "t"),)]
    assert cuts[0].source_side == frozenset({"s", "a"})
