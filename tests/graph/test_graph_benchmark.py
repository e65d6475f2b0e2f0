"""Benchmark: vertex-centric vs edge-centric query cost.

Builds the same random graph in both representations, times a sweep of
targets() and sources() over every vertex, and prints the numbers.
Timing is reported, not asserted; the assertions only check that both
layouts return the same answers.
"""
from __future__ import annotations

import random
import time

import pytest

from weighted_graph.graph.base import Graph
from weighted_graph.graph.factory import GraphKind, empty

SEED = 42


def _make_random_graph(kind: GraphKind, n_vertices: int, n_edges: int, seed: int = SEED) -> Graph[int]:
    rng = random.Random(seed)
    g: Graph[int] = empty(kind)
    for v in range(n_vertices):
        g.add(v)
    for _ in range(n_edges):
        g.set(rng.randrange(n_vertices), rng.randrange(n_vertices), rng.randint(1, 100))
    return g


def _sweep(g: Graph[int], method: str) -> tuple[float, list[dict[int, int]]]:
    query = getattr(g, method)
    t0 = time.perf_counter()
    results = [dict(query(v)) for v in range(g.vertex_count)]
    return time.perf_counter() - t0, results


@pytest.mark.parametrize("n_vertices,n_edges", [(50, 200), (200, 800)])
def test_query_sweep(n_vertices: int, n_edges: int) -> None:
    graphs = {kind: _make_random_graph(kind, n_vertices, n_edges) for kind in GraphKind}

    print(f"\n  {n_vertices} vertices, {n_edges} set() calls")
    answers: dict[str, list[list[dict[int, int]]]] = {"targets": [], "sources": []}
    for kind, g in graphs.items():
        for method in answers:
            elapsed, results = _sweep(g, method)
            answers[method].append(results)
            print(f"    {kind.value:>8} {method:<7}: {elapsed * 1000:8.2f} ms")

    for method, per_kind in answers.items():
        first, *rest = per_kind
        for other in rest:
            assert other == first, method
