"""Edge-centric graph: a vertex set plus a flat list of immutable edges.

Vertices and edges live in two independent collections.  Edges are
small frozen value objects; changing a weight means dropping the old
Edge and appending a new one, never mutating in place.

Edge deliberately has no structural __eq__/__hash__ (eq=False), so
edges are never put in sets or used as dict keys.  Every lookup is a
field-by-field scan of the list:

  set(s, t, w):     scan for (s, t), drop it, append a new Edge if w > 0
  remove(v):        discard v, rebuild the list without edges touching v
  sources/targets:  full scan, collect matches into a dict

Rep invariant (checked after every mutation, stripped under -O):
  - every edge's source and target are in the vertex set
  - every weight is an int > 0
  - no two edges share the same (source, target) pair
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic

from weighted_graph.graph.base import (
    Graph,
    InvalidWeightError,
    L,
    MissingLabelError,
    is_weight,
    require_label,
    require_weight,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Edge(Generic[L]):
    """Immutable directed edge source -> target with a positive weight."""
    source: L
    target: L
    weight: int

    def __post_init__(self) -> None:
        if self.source is None:
            raise MissingLabelError("source")
        if self.target is None:
            raise MissingLabelError("target")
        if not is_weight(self.weight):
            raise TypeError(
                f"weight must be an int, not {type(self.weight).__name__}"
            )
        if self.weight <= 0:
            raise InvalidWeightError(
                self.weight, f"weight must be positive: {self.weight}"
            )

    def connects(self, source: L, target: L) -> bool:
        return self.source == source and self.target == target

    def touches(self, vertex: L) -> bool:
        return self.source == vertex or self.target == vertex

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class EdgesGraph(Graph[L]):
    """Graph stored as set[L] of vertices and list[Edge[L]] of edges."""

    __slots__ = ("_vertices", "_edges")

    def __init__(self) -> None:
        self._vertices: set[L] = set()
        self._edges: list[Edge[L]] = []
        self._check_rep()

    def _check_rep(self) -> None:
        assert None not in self._vertices, "vertex cannot be None"
        pairs: set[tuple[L, L]] = set()
        for edge in self._edges:
            assert edge.source in self._vertices, (
                f"edge source must be in vertices: {edge.source!r}"
            )
            assert edge.target in self._vertices, (
                f"edge target must be in vertices: {edge.target!r}"
            )
            assert is_weight(edge.weight), f"edge weight must be an int: {edge.weight!r}"
            assert edge.weight > 0, f"edge weight must be positive: {edge.weight}"
            pair = (edge.source, edge.target)
            assert pair not in pairs, f"duplicate edge: {edge.source!r} -> {edge.target!r}"
            pairs.add(pair)

    # ---- mutation --------------------------------------------------------

    def add(self, vertex: L) -> bool:
        require_label(vertex, "vertex")
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        log.debug("add vertex %r", vertex)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        require_label(source, "source")
        require_label(target, "target")
        require_weight(weight)

        self._vertices.add(source)
        self._vertices.add(target)

        previous = 0
        for i, edge in enumerate(self._edges):
            if edge.connects(source, target):
                previous = edge.weight
                del self._edges[i]
                break

        if weight > 0:
            self._edges.append(Edge(source, target, weight))

        log.debug("set %r -> %r: %d (was %d)", source, target, weight, previous)
        self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        require_label(vertex, "vertex")
        if vertex not in self._vertices:
            return False

        self._vertices.discard(vertex)
        before = len(self._edges)
        self._edges = [e for e in self._edges if not e.touches(vertex)]
        log.debug(
            "remove vertex %r (%d incident edges dropped)",
            vertex, before - len(self._edges),
        )
        self._check_rep()
        return True

    # ---- queries ---------------------------------------------------------

    def vertices(self) -> frozenset[L]:
        return frozenset(self._vertices)

    def sources(self, target: L) -> Mapping[L, int]:
        require_label(target, "target")
        found: dict[L, int] = {}
        for edge in self._edges:
            if edge.target == target:
                found[edge.source] = edge.weight
        return MappingProxyType(found)

    def targets(self, source: L) -> Mapping[L, int]:
        require_label(source, "source")
        found: dict[L, int] = {}
        for edge in self._edges:
            if edge.source == source:
                found[edge.target] = edge.weight
        return MappingProxyType(found)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    # ---- dunder ----------------------------------------------------------

    def __str__(self) -> str:
        labels = ", ".join(str(v) for v in sorted(self._vertices, key=repr))
        lines = [
            f"EdgesGraph with {len(self._vertices)} vertices "
            f"and {len(self._edges)} edges:",
            f"Vertices: [{labels}]",
            "Edges:",
        ]
        lines.extend(f"  {e}" for e in self._edges)
        return "\n".join(lines) + "\n"
