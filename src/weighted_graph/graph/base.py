"""Abstract base for mutable weighted directed graphs.

Both VerticesGraph and EdgesGraph implement this interface.  Callers
pick one at construction time (see factory.empty) and only talk to the
methods below; the storage layout is invisible to them.

The model: a set of vertex labels plus at most one directed edge per
ordered (source, target) pair, each carrying a positive int weight.
Weight 0 means "no edge" and is never stored.  Self-loops are fine.

Everything handed back to a caller is a snapshot: vertices() is a
frozenset, sources()/targets() are read-only proxies over a freshly
built dict.  Mutating the graph later never changes a snapshot you
already hold, and you cannot write through one.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from typing import Generic, Hashable, TypeVar

L = TypeVar("L", bound=Hashable)


class GraphError(Exception):
    """Base class for errors raised by graph operations."""


class InvalidWeightError(GraphError, ValueError):
    """Raised when an edge weight is out of range."""

    def __init__(self, weight: int, message: str | None = None) -> None:
        self.weight = weight
        super().__init__(message or f"weight cannot be negative: {weight}")


class MissingLabelError(GraphError, TypeError):
    """Raised when None is passed where a vertex label is required."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} cannot be None")


def require_label(label: object, argument: str) -> None:
    """Reject None and unhashable labels before anything is stored."""
    if label is None:
        raise MissingLabelError(argument)
    hash(label)  # TypeError for list, dict, ...


def is_weight(value: object) -> bool:
    """True for a real int; bool is an int subclass but not a weight."""
    return isinstance(value, int) and not isinstance(value, bool)


def require_weight(weight: int) -> None:
    if not is_weight(weight):
        raise TypeError(f"weight must be an int, not {type(weight).__name__}")
    if weight < 0:
        raise InvalidWeightError(weight)


class Graph(ABC, Generic[L]):
    """Interface that both vertex-centric and edge-centric graphs implement."""

    __slots__ = ()

    # ---- contract --------------------------------------------------------

    @abstractmethod
    def add(self, vertex: L) -> bool:
        """Add *vertex* if absent.

        Returns True if it was inserted, False if it already existed.
        Raises MissingLabelError if vertex is None.
        """
        ...

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """Add, change, or remove the edge source -> target.

        Both endpoints are created if missing.  A positive weight creates
        or overwrites the edge; 0 removes it (no-op if absent).  Returns
        the weight the edge had before the call, or 0.

        Raises MissingLabelError for a None endpoint and
        InvalidWeightError for a negative weight; neither mutates.
        """
        ...

    @abstractmethod
    def remove(self, vertex: L) -> bool:
        """Remove *vertex* and every edge into or out of it.

        Returns True if the vertex existed.
        """
        ...

    @abstractmethod
    def vertices(self) -> frozenset[L]:
        """Snapshot of the current vertex labels."""
        ...

    @abstractmethod
    def sources(self, target: L) -> Mapping[L, int]:
        """Read-only snapshot {source: weight} of edges into *target*.

        Empty if target has no incoming edges or is not in the graph.
        """
        ...

    @abstractmethod
    def targets(self, source: L) -> Mapping[L, int]:
        """Read-only snapshot {target: weight} of edges out of *source*.

        Empty if source has no outgoing edges or is not in the graph.
        """
        ...

    # ---- derived queries -------------------------------------------------

    def edges(self) -> Iterator[tuple[L, L, int]]:
        """Yield every edge as a (source, target, weight) triple."""
        for source in self.vertices():
            for target, weight in self.targets(source).items():
                yield source, target, weight

    @property
    def vertex_count(self) -> int:
        return len(self.vertices())

    @property
    def edge_count(self) -> int:
        return sum(len(self.targets(v)) for v in self.vertices())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices()

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}"
            f"(vertices={self.vertex_count}, edges={self.edge_count})"
        )
