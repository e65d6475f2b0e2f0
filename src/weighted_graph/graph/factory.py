"""Pick a graph representation at construction time.

Both representations satisfy the same contract, so the choice only
changes cost profile:

  VERTICES  targets() is one record lookup; sources() visits every vertex
  EDGES     both targets() and sources() scan the whole edge list
"""
from __future__ import annotations

from enum import Enum

from weighted_graph.graph.base import Graph, L
from weighted_graph.graph.edges_graph import EdgesGraph
from weighted_graph.graph.vertices_graph import VerticesGraph


class GraphKind(Enum):
    VERTICES = "vertices"
    EDGES = "edges"

    @classmethod
    def parse(cls, value: GraphKind | str) -> GraphKind:
        """Accept a GraphKind or its name, case-insensitively."""
        if isinstance(value, cls):
            return value
        accepted = ", ".join(k.value for k in cls)
        message = f"Unknown graph kind {value!r} (expected one of: {accepted})"
        if not isinstance(value, str):
            raise ValueError(message)
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(message) from None


DEFAULT_KIND = GraphKind.VERTICES

_IMPLEMENTATIONS: dict[GraphKind, type[Graph]] = {
    GraphKind.VERTICES: VerticesGraph,
    GraphKind.EDGES: EdgesGraph,
}


def empty(kind: GraphKind | str = DEFAULT_KIND) -> Graph[L]:
    """Return a new empty graph backed by the requested representation."""
    return _IMPLEMENTATIONS[GraphKind.parse(kind)]()
