"""Shared fixtures for the weighted graph tests."""
from __future__ import annotations

import pytest

from weighted_graph.graph.base import Graph
from weighted_graph.graph.factory import GraphKind, empty

SEED = 42


@pytest.fixture(params=list(GraphKind), ids=lambda k: k.value)
def kind(request: pytest.FixtureRequest) -> GraphKind:
    return request.param


@pytest.fixture
def graph(kind: GraphKind) -> Graph[str]:
    """A new empty graph, once per representation."""
    return empty(kind)


@pytest.fixture
def chain_graph(graph: Graph[str]) -> Graph[str]:
    """A -1-> B -2-> C -3-> D"""
    for src, dst, w in [("A", "B", 1), ("B", "C", 2), ("C", "D", 3)]:
        graph.set(src, dst, w)
    return graph


@pytest.fixture
def hub_graph(graph: Graph[str]) -> Graph[str]:
    """
    A -> H (1), D -> H (3), H -> C (2), H -> H (5)
    """
    for src, dst, w in [("A", "H", 1), ("H", "C", 2), ("D", "H", 3), ("H", "H", 5)]:
        graph.set(src, dst, w)
    return graph
