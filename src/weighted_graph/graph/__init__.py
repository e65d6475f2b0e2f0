"""Weighted directed graph ADT with two interchangeable representations."""

from weighted_graph.graph.base import (
    Graph,
    GraphError,
    InvalidWeightError,
    MissingLabelError,
)
from weighted_graph.graph.edges_graph import Edge, EdgesGraph
from weighted_graph.graph.factory import DEFAULT_KIND, GraphKind, empty
from weighted_graph.graph.vertices_graph import Vertex, VerticesGraph

__all__ = [
    "DEFAULT_KIND",
    "Edge",
    "EdgesGraph",
    "Graph",
    "GraphError",
    "GraphKind",
    "InvalidWeightError",
    "MissingLabelError",
    "Vertex",
    "VerticesGraph",
    "empty",
]
