import pytest

from impcut.errors import InvalidInputError
from impcut.loader import load_problem_yaml

CYCLE_YAML = """
edges:
  - [s, a]
  - [a, t]
  - [t, b]
  - [b, s]
sources: [s]
sinks: [t]
k: 2
"""


def test_load_problem():
    problem = load_problem_yaml(CYCLE_YAML)
    assert problem.k == 2
    assert problem.sources == frozenset({"s"})
    assert problem.sinks == frozenset({"t"})
    assert problem.graph.number_of_nodes() == 4
    assert problem.graph.number_of_edges() == 4


def test_k_is_optional():
    problem = load_problem_yaml("edges: [[1, 2]]\nsources: [1]\nsinks: [2]\n")
    assert problem.k is None
    assert set(problem.graph.nodes) == {1, 2}


def test_isolated_nodes_from_nodes_section():
    problem = load_problem_yaml(
        "nodes: [x]\nedges: [[a, b]]\nsources: [x]\nsinks: [b]\nk: 0\n"
    )
    assert "x" in problem.graph


@pytest.mark.parametrize(
    "text, match",
    [
        ("- just\n- a list\n", "dictionary"),
        ("edges: [[a, b]]\nsinks: [b]\n", "sources"),
        ("edges: [[a, b, c]]\nsources: [a]\nsinks: [b]\n", "edges"),
        ("edges: [[a, b]]\nsources: [a]\nsinks: [b]\nk: -1\n", "k"),
        ("edges: [[a, b]]\nsources: [a]\nsinks: [b]\nextra: 1\n", "extra"),
        ("edges: [[a, b]]\nsources: [a]\nsinks: [z]\n", "Unknown node"),
        ("edges: [[a, b]\nsources: [a]\nsinks: [b]\n", "Malformed YAML"),
    ],
)
def test_invalid_documents(text, match):
    with pytest.raises(InvalidInputError, match=match):
        load_problem_yaml(text)


def test_empty_document_is_invalid():
    with pytest.raises(InvalidInputError):
        load_problem_yaml("")
