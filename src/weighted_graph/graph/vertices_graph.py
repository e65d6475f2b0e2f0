"""Vertex-centric graph: mutable vertex records in insertion order.

Each Vertex owns a dict[L, int] of its outgoing edges (target label ->
weight).  Vertices never hold references to each other, only labels,
so there is no cyclic ownership to untangle on removal.  The graph
keeps the records in a list (for stable ordering) plus a label -> record
dict index.

Cost profile:
  targets(source):  index lookup, copy its dict.      O(1) + out-degree
  sources(target):  ask every record for its edge.    O(V)
  remove(vertex):   drop the record, then strip the label from every
                    other record's dict.              O(V)

Rep invariant (checked after every mutation, stripped under -O):
  - no two records share a label
  - the index maps exactly the listed labels to their records
  - every stored weight is an int > 0
  - every target in any record's dict is itself a record's label
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Generic

from weighted_graph.graph.base import (
    Graph,
    L,
    is_weight,
    require_label,
    require_weight,
)

log = logging.getLogger(__name__)


class Vertex(Generic[L]):
    """Mutable vertex record: a label plus its outgoing edges.

    Only VerticesGraph creates these and it never hands them out.
    """

    __slots__ = ("label", "_targets")

    def __init__(self, label: L) -> None:
        require_label(label, "label")
        self.label = label
        self._targets: dict[L, int] = {}

    def check_rep(self) -> None:
        assert self.label is not None, "label cannot be None"
        for target, weight in self._targets.items():
            assert target is not None, "target vertex cannot be None"
            assert is_weight(weight), f"edge weight must be an int: {weight!r}"
            assert weight > 0, f"edge weight must be positive: {weight}"

    def targets(self) -> dict[L, int]:
        """Copy of the outgoing edges."""
        return dict(self._targets)

    def set_edge(self, target: L, weight: int) -> int:
        """Add, update (weight > 0) or delete (weight == 0) the edge to target.

        Returns the previous weight, or 0 if there was no edge.
        """
        require_label(target, "target")
        require_weight(weight)
        previous = self._targets.get(target, 0)
        if weight > 0:
            self._targets[target] = weight
        else:
            self._targets.pop(target, None)
        self.check_rep()
        return previous

    def remove_edge_to(self, target: L) -> bool:
        require_label(target, "target")
        removed = self._targets.pop(target, None) is not None
        self.check_rep()
        return removed

    def edge_weight(self, target: L) -> int | None:
        """Weight of the edge to *target*, or None if there is none."""
        require_label(target, "target")
        return self._targets.get(target)

    def __str__(self) -> str:
        if not self._targets:
            return f"Vertex {self.label!r} (no outgoing edges)"
        edges = ", ".join(f"{t}({w})" for t, w in self._targets.items())
        return f"Vertex {self.label!r} -> {edges}"

    def __repr__(self) -> str:
        return f"Vertex(label={self.label!r}, out_degree={len(self._targets)})"


class VerticesGraph(Graph[L]):
    """Graph stored as list[Vertex[L]] in insertion order, indexed by label."""

    __slots__ = ("_vertices", "_index")

    def __init__(self) -> None:
        self._vertices: list[Vertex[L]] = []
        self._index: dict[L, Vertex[L]] = {}
        self._check_rep()

    def _check_rep(self) -> None:
        labels = {v.label for v in self._vertices}
        assert len(labels) == len(self._vertices), "duplicate vertex labels found"
        assert len(self._index) == len(self._vertices), "index out of sync"
        for vertex in self._vertices:
            assert self._index.get(vertex.label) is vertex, (
                f"index out of sync for {vertex.label!r}"
            )
            vertex.check_rep()
            for target in vertex.targets():
                assert target in labels, f"target vertex does not exist: {target!r}"

    def _find(self, label: L) -> Vertex[L] | None:
        return self._index.get(label)

    # ---- mutation --------------------------------------------------------

    def add(self, vertex: L) -> bool:
        require_label(vertex, "vertex")
        if vertex in self._index:
            return False
        record = Vertex(vertex)
        self._vertices.append(record)
        self._index[vertex] = record
        log.debug("add vertex %r", vertex)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        require_label(source, "source")
        require_label(target, "target")
        require_weight(weight)

        self.add(source)
        self.add(target)
        record = self._find(source)
        assert record is not None, "source vertex should exist"

        previous = record.set_edge(target, weight)
        log.debug("set %r -> %r: %d (was %d)", source, target, weight, previous)
        self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        require_label(vertex, "vertex")
        record = self._find(vertex)
        if record is None:
            return False

        self._vertices.remove(record)
        del self._index[vertex]
        # strip incoming edges; outgoing ones went with the record
        dropped = sum(1 for v in self._vertices if v.remove_edge_to(vertex))
        log.debug(
            "remove vertex %r (%d outgoing, %d incoming edges dropped)",
            vertex, len(record.targets()), dropped,
        )
        self._check_rep()
        return True

    # ---- queries ---------------------------------------------------------

    def vertices(self) -> frozenset[L]:
        return frozenset(v.label for v in self._vertices)

    def sources(self, target: L) -> Mapping[L, int]:
        require_label(target, "target")
        found: dict[L, int] = {}
        for vertex in self._vertices:
            weight = vertex.edge_weight(target)
            if weight is not None:
                found[vertex.label] = weight
        return MappingProxyType(found)

    def targets(self, source: L) -> Mapping[L, int]:
        require_label(source, "source")
        record = self._find(source)
        if record is None:
            return MappingProxyType({})
        return MappingProxyType(record.targets())

    # ---- dunder ----------------------------------------------------------

    def __str__(self) -> str:
        lines = [f"VerticesGraph with {len(self._vertices)} vertices:"]
        lines.extend(f"  {v}" for v in self._vertices)
        return "\n".join(lines) + "\n"
