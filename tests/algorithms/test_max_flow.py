import networkx as nx
import pytest

from impcut.algorithms.max_flow import calc_max_flow, residual_capacity
from impcut.errors import InternalConsistencyError
from impcut.graph.convert import from_networkx


class TestMaxFlowBasic:
    """
    Tests that directly verify flow values on known small graphs.
    """

    def test_triangle_two_paths(self, triangle):
        g = from_networkx(triangle)
        summary = calc_max_flow(g, {g.index("A")}, {g.index("C")})
        assert summary.total_flow == 2
        assert not summary.saturated

    def test_k5_connectivity(self, k5):
        g = from_networkx(k5)
        summary = calc_max_flow(g, {g.index("A")}, {g.index("B")})
        assert summary.total_flow == 4

    def test_path_min_cut_is_closest_to_source(self, path5):
        g = from_networkx(path5)
        summary = calc_max_flow(g, {g.index(1)}, {g.index(5)})
        assert summary.total_flow == 1
        assert summary.reachable == frozenset({g.index(1)})
        assert summary.sink_reachable == frozenset({g.index(5)})
        assert [g.edge_names(e) for e in summary.min_cut] == [(1, 2)]

    def test_disconnected_terminals(self):
        g = from_networkx(nx.Graph([("a", "b"), ("c", "d")]))
        summary = calc_max_flow(g, {g.index("a")}, {g.index("d")})
        assert summary.total_flow == 0
        assert summary.reachable == g.index_of(["a", "b"])
        assert summary.sink_reachable == g.index_of(["c", "d"])
        assert summary.min_cut == ()

    def test_multi_terminal_sets(self, tree7):
        g = from_networkx(tree7)
        summary = calc_max_flow(g, g.index_of([0]), g.index_of([3, 4, 5, 6]))
        assert summary.total_flow == 2
        # Unsaturated leaf edges keep both inner nodes on the sink side
        assert summary.sink_reachable == g.index_of([1, 2, 3, 4, 5, 6])

    def test_empty_sets_carry_no_flow(self, triangle):
        g = from_networkx(triangle)
        assert calc_max_flow(g, set(), {0}).total_flow == 0
        assert calc_max_flow(g, {0}, set()).total_flow == 0


class TestMaxFlowBounds:
    def test_cap_stops_early(self, k5):
        g = from_networkx(k5)
        summary = calc_max_flow(g, {g.index("A")}, {g.index("B")}, cap=2)
        assert summary.total_flow == 2
        assert summary.saturated
        assert summary.reachable == frozenset()
        assert summary.min_cut == ()

    def test_cap_above_flow_is_not_saturated(self, triangle):
        g = from_networkx(triangle)
        summary = calc_max_flow(g, {0}, {2}, cap=3)
        assert summary.total_flow == 2
        assert not summary.saturated

    def test_zero_cap(self, triangle):
        g = from_networkx(triangle)
        summary = calc_max_flow(g, {0}, {2}, cap=0)
        assert summary.total_flow == 0
        assert summary.saturated

    def test_removed_edges_carry_nothing(self, cycle4):
        g = from_networkx(cycle4)
        s, t = g.index("s"), g.index("t")
        full = calc_max_flow(g, {s}, {t})
        assert full.total_flow == 2

        first = full.min_cut[0]
        reduced = calc_max_flow(g, {s}, {t}, removed=frozenset({first}))
        assert reduced.total_flow == 1
        assert first not in reduced.min_cut
        assert reduced.edge_flow[first] == 0


def test_overlapping_sets_are_a_consistency_fault(triangle):
    g = from_networkx(triangle)
    with pytest.raises(InternalConsistencyError, match="overlap"):
        calc_max_flow(g, {0, 1}, {1, 2})


def test_edge_flow_is_conserved(k5):
    g = from_networkx(k5)
    s, t = g.index("A"), g.index("E")
    summary = calc_max_flow(g, {s}, {t})
    balance = [0] * g.number_of_nodes
    for e, f in enumerate(summary.edge_flow):
        assert f in (-1, 0, 1)
        u, v = g.edges[e]
        balance[u] -= f
        balance[v] += f
    assert balance[s] == -summary.total_flow
    assert balance[t] == summary.total_flow
    assert all(b == 0 for i, b in enumerate(balance) if i not in (s, t))


def test_residual_capacity_convention(triangle):
    g = from_networkx(triangle)
    u, v = g.edges[0]
    flow = [1, 0, 0]
    assert residual_capacity(g, flow, 0, u) == 0
    assert residual_capacity(g, flow, 0, v) == 2
    flow = [0, 0, 0]
    assert residual_capacity(g, flow, 0, u) == 1


@pytest.mark.parametrize("seed", range(10))
def test_matches_networkx_edge_connectivity(seed):
    nxg = nx.gnp_random_graph(9, 0.45, seed=seed)
    g = from_networkx(nxg)
    summary = calc_max_flow(g, {g.index(0)}, {g.index(8)})
    assert summary.total_flow == nx.edge_connectivity(nxg, 0, 8)
    # The boundary of the residual-reachable set is a minimum cut
    assert len(summary.min_cut) == summary.total_flow
