import networkx as nx
import pytest

from impcut.errors import InvalidInputError
from impcut.graph.convert import from_networkx, graph_from_edge_list


def test_from_networkx_preserves_order(funnel):
    g = from_networkx(funnel)
    assert g.nodes == tuple(funnel.nodes)
    assert [g.edge_names(e) for e in range(g.number_of_edges)] == list(funnel.edges)


def test_from_networkx_keeps_isolated_nodes():
    nxg = nx.Graph()
    nxg.add_nodes_from(["lonely", "a", "b"])
    nxg.add_edge("a", "b")
    g = from_networkx(nxg)
    assert g.number_of_nodes == 3
    assert g.adjacency[g.index("lonely")] == ()


def test_from_networkx_simplifies_multigraph():
    nxg = nx.MultiGraph()
    nxg.add_edge("a", "b")
    nxg.add_edge("a", "b")
    nxg.add_edge("b", "a")
    nxg.add_edge("b", "b")
    nxg.add_edge("b", "c")
    g = from_networkx(nxg)
    assert g.number_of_edges == 2
    assert g.edge_names(0) == ("a", "b")
    assert g.edge_names(1) == ("b", "c")


def test_from_networkx_drops_self_loops():
    nxg = nx.Graph([(1, 1), (1, 2)])
    g = from_networkx(nxg)
    assert g.edges == ((0, 1),)


@pytest.mark.parametrize("graph", [nx.DiGraph([(1, 2)]), nx.MultiDiGraph([(1, 2)])])
def test_from_networkx_rejects_directed(graph):
    with pytest.raises(InvalidInputError, match="undirected"):
        from_networkx(graph)


def test_from_networkx_rejects_non_graph():
    with pytest.raises(InvalidInputError, match="networkx graph"):
        from_networkx([(1, 2)])


def test_graph_from_edge_list_with_nodes():
    g = graph_from_edge_list([["a", "b"], ["b", "c"]], nodes=["z", "a"])
    assert list(g.nodes) == ["z", "a", "b", "c"]
    assert g.number_of_edges() == 2


def test_graph_from_edge_list_rejects_bad_entries():
    with pytest.raises(InvalidInputError, match="exactly two endpoints"):
        graph_from_edge_list([["a", "b", "c"]])
