from __future__ import annotations

from dataclasses import dataclass

import pytest

from adjgraph import AdjacencyListGraph, BackendKind, UnweightedAdjacencyListGraph


@dataclass(frozen=True)
class City:
    name: str
    population: int = 0


CITIES = [City("Tokyo", 37), City("Delhi", 32), City("Shanghai", 29), City("Sao Paulo", 22)]


def test_backend_metadata():
    assert AdjacencyListGraph.backend_kind is BackendKind.LIST
    assert AdjacencyListGraph().weighted is True
    assert UnweightedAdjacencyListGraph().weighted is False


def test_overwrite_replaces_entry_in_place():
    g = AdjacencyListGraph(directed=True, vertices=["a", "b", "c"])
    g.set_edge_weight("a", "b", 1.0)
    g.set_edge_weight("a", "c", 2.0)
    g.set_edge_weight("a", "b", 3.0)

    # The replaced pair moves to the end rather than being duplicated.
    assert g._adjacency["a"] == [("c", 2.0), ("b", 3.0)]


def test_undirected_overwrite_updates_both_lists():
    g = AdjacencyListGraph(directed=False, vertices=[1, 2])
    g.set_edge_weight(1, 2, 10)
    g.set_edge_weight(2, 1, 20)
    assert g._adjacency[1] == [(2, 20)]
    assert g._adjacency[2] == [(1, 20)]


def test_self_loop_is_stored_once_when_undirected():
    g = AdjacencyListGraph(directed=False, vertices=["x"])
    g.set_edge_weight("x", "x", 1)
    assert g._adjacency["x"] == [("x", 1)]
    g.remove_edge("x", "x")
    assert g._adjacency["x"] == []


def test_remove_vertex_strips_every_neighbor_list():
    g = AdjacencyListGraph(directed=True, vertices=range(5))
    for u in range(5):
        for v in range(5):
            if u != v:
                g.set_edge_weight(u, v, u * 10 + v)

    g.remove_vertex(2)

    assert 2 not in g._adjacency
    for neighbors in g._adjacency.values():
        assert all(child != 2 for child, _ in neighbors)
        assert len(neighbors) == 3
    assert g.get_edge_weight(4, 3) == 43


def test_get_parents_scans_all_lists():
    g = AdjacencyListGraph(directed=True, vertices="abcd")
    g.set_edge_weight("a", "d", 1)
    g.set_edge_weight("b", "d", 1)
    g.set_edge_weight("d", "c", 1)
    assert g.get_parents("d") == {"a", "b"}
    assert g.get_parents("a") == set()


def test_user_defined_vertices():
    g = AdjacencyListGraph(directed=False, vertices=CITIES)
    g.set_edge_weight(CITIES[0], CITIES[1], 5.5)
    g.set_edge_weight(CITIES[2], CITIES[3], 1.25)
    assert g.get_edge_weight(CITIES[1], CITIES[0]) == 5.5
    assert g.get_children(City("Shanghai", 29)) == {CITIES[3]}
    assert not g.has_vertex(City("Tokyo", 0))


def test_unweighted_uses_neighbor_sets():
    g = UnweightedAdjacencyListGraph(directed=True, vertices=CITIES)
    g.add_edge(CITIES[0], CITIES[1])
    g.add_edge(CITIES[1], CITIES[0])
    g.add_edge(CITIES[3], CITIES[2])

    assert g._adjacency[CITIES[0]] == {CITIES[1]}
    assert g.get_edge_weight(CITIES[3], CITIES[2]) is True
    assert g.get_edge_weight(CITIES[2], CITIES[3]) is False

    g.remove_edge(CITIES[0], CITIES[1])
    assert not g.has_edge(CITIES[0], CITIES[1])
    assert g.has_edge(CITIES[1], CITIES[0])


def test_unweighted_remove_vertex_discards_references():
    g = UnweightedAdjacencyListGraph(directed=True, vertices="abc")
    g.add_edges([("a", "b"), ("c", "b"), ("b", "a")])
    g.remove_vertex("b")
    assert g._adjacency == {"a": set(), "c": set()}


def test_clearing_absent_edge_is_logged_at_debug(caplog):
    caplog.set_level("DEBUG", logger="adjgraph.adjacency_list")
    g = UnweightedAdjacencyListGraph(directed=False, vertices=["Beijing", "New York"])
    g.set_edge_weight("Beijing", "New York", False)
    assert "nothing to clear" in caplog.text


def test_unknown_vertex_does_not_create_entries():
    g = UnweightedAdjacencyListGraph(directed=True, vertices=["a"])
    assert not g.has_edge("a", "ghost")
    assert not g.has_edge("ghost", "a")
    assert set(g._adjacency) == {"a"}


@pytest.mark.parametrize("cls", [AdjacencyListGraph, UnweightedAdjacencyListGraph])
def test_iteration_survives_mutation(cls):
    g = cls(directed=True, vertices=range(3))
    for v in g:
        g.remove_vertex(v)
    assert len(g) == 0
