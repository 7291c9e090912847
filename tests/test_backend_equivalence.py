"""Randomized operation sequences must look identical through both backends."""

from __future__ import annotations

import numpy as np
import pytest

from adjgraph import BackendKind, GraphError, new_graph

UNIVERSE = list(range(10))


def _apply(graph, op: int, u: int, v: int, weight):
    try:
        if op == 0:
            graph.add_vertex(u)
        elif op == 1:
            graph.remove_vertex(u)
        elif op in (2, 3):
            graph.set_edge_weight(u, v, weight)
        elif op == 4:
            graph.remove_edge(u, v)
        else:
            graph.add_vertices([u, v])
    except GraphError as exc:
        return type(exc)
    return None


def _assert_same_view(list_graph, matrix_graph) -> None:
    vertices = list_graph.get_vertices()
    assert vertices == matrix_graph.get_vertices()
    for u in vertices:
        assert list_graph.get_children(u) == matrix_graph.get_children(u)
        assert list_graph.get_parents(u) == matrix_graph.get_parents(u)
    for u in UNIVERSE:
        for v in UNIVERSE:
            has = list_graph.has_edge(u, v)
            assert has == matrix_graph.has_edge(u, v)
            if has:
                assert list_graph.get_edge_weight(u, v) == matrix_graph.get_edge_weight(u, v)


def _assert_mirrored(graph) -> None:
    for u in graph:
        for v in graph:
            assert graph.has_edge(u, v) == graph.has_edge(v, u)
            if graph.has_edge(u, v):
                assert graph.get_edge_weight(u, v) == graph.get_edge_weight(v, u)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
@pytest.mark.parametrize("weighted", [True, False], ids=["weighted", "unweighted"])
@pytest.mark.parametrize("directed", [True, False], ids=["directed", "undirected"])
def test_backends_agree_on_random_operation_sequences(seed: int, weighted: bool, directed: bool) -> None:
    rng = np.random.default_rng(seed)
    list_graph = new_graph(directed, range(4), backend=BackendKind.LIST, weighted=weighted)
    matrix_graph = new_graph(directed, range(4), backend=BackendKind.MATRIX, weighted=weighted)

    for _ in range(250):
        op = int(rng.integers(0, 6))
        u = int(rng.choice(UNIVERSE))
        v = int(rng.choice(UNIVERSE))
        if weighted:
            weight = int(rng.integers(-5, 6))
        else:
            weight = bool(rng.integers(0, 2))

        outcome = _apply(list_graph, op, u, v, weight)
        assert outcome == _apply(matrix_graph, op, u, v, weight)
        _assert_same_view(list_graph, matrix_graph)
        if not directed:
            _assert_mirrored(list_graph)
            _assert_mirrored(matrix_graph)

    assert list_graph.edge_count() == matrix_graph.edge_count()
