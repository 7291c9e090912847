"""
Adjacency-list graph backends.

Every vertex maps to its outgoing neighbors. Lookups cost O(degree) and
``get_parents`` has to scan every list, since no reverse index is kept. In
exchange insertions are cheap and memory stays proportional to V + E, which
suits sparse graphs.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Set, Tuple

from .errors import NoSuchEdge
from .graph import BackendKind, Graph, Vertex

LOGGER = logging.getLogger(__name__)

NeighborEntry = Tuple[Vertex, Any]


class _AdjacencyListCommon(Graph):
    """Vertex bookkeeping shared by the weighted and unweighted list backends."""

    backend_kind = BackendKind.LIST

    _adjacency: Dict[Vertex, Any]

    def has_vertex(self, v: Vertex) -> bool:
        try:
            return v in self._adjacency
        except TypeError:
            return False

    def get_vertices(self) -> Set[Vertex]:
        return set(self._adjacency)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._adjacency))

    def __len__(self) -> int:
        return len(self._adjacency)


class AdjacencyListGraph(_AdjacencyListCommon):
    """Weighted adjacency list: each vertex owns a list of ``(neighbor, weight)`` pairs."""

    _weighted = True

    def __init__(self, directed: bool = False, vertices: Iterable[Vertex] = ()) -> None:
        self._adjacency: Dict[Vertex, List[NeighborEntry]] = {}
        super().__init__(directed, vertices)

    @staticmethod
    def _position(neighbors: List[NeighborEntry], v: Vertex) -> int:
        for index, (child, _) in enumerate(neighbors):
            if child == v:
                return index
        return -1

    def _put(self, u: Vertex, v: Vertex, weight: Any) -> None:
        neighbors = self._adjacency[u]
        index = self._position(neighbors, v)
        if index >= 0:
            # Overwrite by erase + append so a pair is never stored twice.
            del neighbors[index]
        neighbors.append((v, weight))

    def _drop(self, u: Vertex, v: Vertex) -> bool:
        neighbors = self._adjacency[u]
        index = self._position(neighbors, v)
        if index < 0:
            return False
        del neighbors[index]
        return True

    def add_vertices(self, vertices: Iterable[Vertex]) -> None:
        for v in self._new_vertices(vertices):
            self._adjacency[v] = []

    def remove_vertex(self, v: Vertex) -> None:
        self._require_vertex(v)
        del self._adjacency[v]
        for u in self._adjacency:
            self._drop(u, v)

    def get_edge_weight(self, u: Vertex, v: Vertex) -> Any:
        self._require_vertex(u)
        self._require_vertex(v)
        for child, weight in self._adjacency[u]:
            if child == v:
                return weight
        raise NoSuchEdge(u, v)

    def set_edge_weight(self, u: Vertex, v: Vertex, weight: Any) -> None:
        self._require_vertex(u)
        self._require_vertex(v)
        weight = self._check_weight(weight)
        self._put(u, v, weight)
        if not self._directed and u != v:
            self._put(v, u, weight)

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        self._require_vertex(u)
        self._require_vertex(v)
        if not self._drop(u, v):
            raise NoSuchEdge(u, v)
        if not self._directed and u != v:
            self._drop(v, u)

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return False
        return self._position(self._adjacency[u], v) >= 0

    def get_children(self, v: Vertex) -> Set[Vertex]:
        """Out-neighbors of ``v``; in an undirected graph these are all its neighbors."""

        self._require_vertex(v)
        return {child for child, _ in self._adjacency[v]}

    def get_parents(self, v: Vertex) -> Set[Vertex]:
        """In-neighbors of ``v``, found by scanning every neighbor list."""

        self._require_vertex(v)
        if not self._directed:
            return self.get_children(v)
        return {u for u, neighbors in self._adjacency.items() if self._position(neighbors, v) >= 0}


class UnweightedAdjacencyListGraph(_AdjacencyListCommon):
    """
    Adjacency list without weights: each vertex owns a set of neighbors.

    Presence is the weight, so ``set_edge_weight(u, v, False)`` removes the
    edge and ``get_edge_weight`` reports ``False`` for a missing edge.
    """

    _weighted = False

    def __init__(self, directed: bool = False, vertices: Iterable[Vertex] = ()) -> None:
        self._adjacency: Dict[Vertex, Set[Vertex]] = {}
        super().__init__(directed, vertices)

    def add_vertices(self, vertices: Iterable[Vertex]) -> None:
        for v in self._new_vertices(vertices):
            self._adjacency[v] = set()

    def remove_vertex(self, v: Vertex) -> None:
        self._require_vertex(v)
        del self._adjacency[v]
        for neighbors in self._adjacency.values():
            neighbors.discard(v)

    def get_edge_weight(self, u: Vertex, v: Vertex) -> bool:
        self._require_vertex(u)
        self._require_vertex(v)
        return v in self._adjacency[u]

    def set_edge_weight(self, u: Vertex, v: Vertex, weight: Any) -> None:
        self._require_vertex(u)
        self._require_vertex(v)
        if self._check_weight(weight):
            self._adjacency[u].add(v)
            if not self._directed:
                self._adjacency[v].add(u)
            return
        if v not in self._adjacency[u]:
            LOGGER.debug("set_edge_weight(False) on absent edge (%r, %r); nothing to clear", u, v)
            return
        self.remove_edge(u, v)

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        self._require_vertex(u)
        self._require_vertex(v)
        if v not in self._adjacency[u]:
            raise NoSuchEdge(u, v)
        self._adjacency[u].remove(v)
        if not self._directed:
            self._adjacency[v].discard(u)

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return False
        return v in self._adjacency[u]

    def get_children(self, v: Vertex) -> Set[Vertex]:
        self._require_vertex(v)
        return set(self._adjacency[v])

    def get_parents(self, v: Vertex) -> Set[Vertex]:
        self._require_vertex(v)
        if not self._directed:
            return set(self._adjacency[v])
        return {u for u, neighbors in self._adjacency.items() if v in neighbors}


__all__ = ["AdjacencyListGraph", "UnweightedAdjacencyListGraph"]
