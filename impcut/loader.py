"""YAML loader + schema validation for cut problems.

Provides a single entrypoint to parse a YAML string, validate it against the
packaged JSON schema, and return a `Problem` ready for enumeration.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from typing import Any, Dict, FrozenSet, Hashable, Optional

import jsonschema
import networkx as nx
import yaml

from impcut.errors import InvalidInputError
from impcut.graph.convert import graph_from_edge_list


@dataclass(frozen=True)
class Problem:
    """An important-cut problem loaded from YAML.

    Attributes:
        graph: The undirected graph.
        sources: Source nodes.
        sinks: Sink nodes.
        k: Maximum cut size, or ``None`` when the document does not set one.
    """

    graph: nx.Graph
    sources: FrozenSet[Hashable]
    sinks: FrozenSet[Hashable]
    k: Optional[int] = None


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("impcut.schemas")
        .joinpath("problem.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_problem_yaml(yaml_str: str) -> Problem:
    """Load and validate a problem YAML string.

    Raises:
        InvalidInputError: If the document is not valid YAML, is not a
            mapping, violates the schema, or references nodes missing from
            the graph.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise InvalidInputError(f"Malformed YAML: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidInputError("The provided YAML must map to a dictionary at top-level.")

    try:
        jsonschema.validate(data, _load_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise InvalidInputError(f"Invalid problem at {location}: {exc.message}") from exc

    graph = graph_from_edge_list(data["edges"], data.get("nodes"))
    sources = frozenset(data["sources"])
    sinks = frozenset(data["sinks"])
    missing = sorted(str(n) for n in (sources | sinks) if n not in graph)
    if missing:
        raise InvalidInputError(f"Unknown node(s) in sources/sinks: {', '.join(missing)}")
    return Problem(graph=graph, sources=sources, sinks=sinks, k=data.get("k"))
