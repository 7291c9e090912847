"""
Adjacency-matrix graph backends backed by numpy.

Vertices are numbered densely in insertion order. A square boolean matrix
records edge presence, so edge lookups are O(1) after the index lookup and
``get_children``/``get_parents`` scan one row or column. Adding vertices
reallocates the matrix; removing one deletes its row and column and shifts
every later vertex down one index so numbering stays contiguous.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Set

import numpy as np

from .errors import NoSuchEdge, UnknownVertex
from .graph import BackendKind, Graph, Vertex

LOGGER = logging.getLogger(__name__)


def _expand(matrix: np.ndarray, extra: int, fill: Any) -> np.ndarray:
    """Return ``matrix`` grown by ``extra`` rows and columns of ``fill``."""

    n = matrix.shape[0]
    grown = np.full((n + extra, n + extra), fill, dtype=matrix.dtype)
    grown[:n, :n] = matrix
    return grown


def _excise(matrix: np.ndarray, index: int) -> np.ndarray:
    """Return ``matrix`` without row and column ``index``."""

    return np.delete(np.delete(matrix, index, axis=0), index, axis=1)


class _AdjacencyMatrixCommon(Graph):
    """Index bookkeeping and presence matrix shared by both matrix backends."""

    backend_kind = BackendKind.MATRIX

    def __init__(self, directed: bool = False, vertices: Iterable[Vertex] = ()) -> None:
        self._vertices: List[Vertex] = []
        self._indices: Dict[Vertex, int] = {}
        self._present = np.zeros((0, 0), dtype=bool)
        super().__init__(directed, vertices)

    # -- storage hooks ----------------------------------------------------

    def _expand_storage(self, extra: int) -> None:
        self._present = _expand(self._present, extra, False)

    def _excise_storage(self, index: int) -> None:
        self._present = _excise(self._present, index)

    def _link(self, iu: int, iv: int, weight: Any) -> None:
        self._present[iu, iv] = True

    def _unlink(self, iu: int, iv: int) -> None:
        self._present[iu, iv] = False

    # -- vertices ---------------------------------------------------------

    def _index(self, v: Vertex) -> int:
        try:
            return self._indices[v]
        except (KeyError, TypeError):
            raise UnknownVertex(v) from None

    def add_vertices(self, vertices: Iterable[Vertex]) -> None:
        batch = self._new_vertices(vertices)
        if not batch:
            return
        start = len(self._vertices)
        for offset, v in enumerate(batch):
            self._indices[v] = start + offset
        self._vertices.extend(batch)
        self._expand_storage(len(batch))

    def remove_vertex(self, v: Vertex) -> None:
        index = self._index(v)
        self._excise_storage(index)
        del self._vertices[index]
        del self._indices[v]
        for position in range(index, len(self._vertices)):
            self._indices[self._vertices[position]] = position

    def has_vertex(self, v: Vertex) -> bool:
        try:
            return v in self._indices
        except TypeError:
            return False

    def get_vertices(self) -> Set[Vertex]:
        return set(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices))

    def __len__(self) -> int:
        return len(self._vertices)

    # -- edges ------------------------------------------------------------

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        iu, iv = self._index(u), self._index(v)
        if not self._present[iu, iv]:
            raise NoSuchEdge(u, v)
        self._unlink(iu, iv)
        if not self._directed:
            self._unlink(iv, iu)

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return False
        return bool(self._present[self._indices[u], self._indices[v]])

    def get_children(self, v: Vertex) -> Set[Vertex]:
        """Vertices whose column is set in row ``v``."""

        row = self._present[self._index(v)]
        return {self._vertices[i] for i in np.flatnonzero(row)}

    def get_parents(self, v: Vertex) -> Set[Vertex]:
        """Vertices whose row is set in column ``v``."""

        column = self._present[:, self._index(v)]
        return {self._vertices[i] for i in np.flatnonzero(column)}


class AdjacencyMatrixGraph(_AdjacencyMatrixCommon):
    """
    Weighted adjacency matrix.

    Weights live in an object-dtype matrix parallel to the presence matrix;
    empty cells hold ``None``.
    """

    _weighted = True

    def __init__(self, directed: bool = False, vertices: Iterable[Vertex] = ()) -> None:
        self._weights = np.empty((0, 0), dtype=object)
        super().__init__(directed, vertices)

    def _expand_storage(self, extra: int) -> None:
        super()._expand_storage(extra)
        self._weights = _expand(self._weights, extra, None)

    def _excise_storage(self, index: int) -> None:
        super()._excise_storage(index)
        self._weights = _excise(self._weights, index)

    def _link(self, iu: int, iv: int, weight: Any) -> None:
        super()._link(iu, iv, weight)
        self._weights[iu, iv] = weight

    def _unlink(self, iu: int, iv: int) -> None:
        super()._unlink(iu, iv)
        self._weights[iu, iv] = None

    def get_edge_weight(self, u: Vertex, v: Vertex) -> Any:
        iu, iv = self._index(u), self._index(v)
        if not self._present[iu, iv]:
            raise NoSuchEdge(u, v)
        return self._weights[iu, iv]

    def set_edge_weight(self, u: Vertex, v: Vertex, weight: Any) -> None:
        iu, iv = self._index(u), self._index(v)
        weight = self._check_weight(weight)
        self._link(iu, iv, weight)
        if not self._directed:
            self._link(iv, iu, weight)


class UnweightedAdjacencyMatrixGraph(_AdjacencyMatrixCommon):
    """Adjacency matrix storing presence only; ``False`` clears an edge."""

    _weighted = False

    def get_edge_weight(self, u: Vertex, v: Vertex) -> bool:
        iu, iv = self._index(u), self._index(v)
        return bool(self._present[iu, iv])

    def set_edge_weight(self, u: Vertex, v: Vertex, weight: Any) -> None:
        iu, iv = self._index(u), self._index(v)
        if self._check_weight(weight):
            self._link(iu, iv, True)
            if not self._directed:
                self._link(iv, iu, True)
            return
        if not self._present[iu, iv]:
            LOGGER.debug("set_edge_weight(False) on absent edge (%r, %r); nothing to clear", u, v)
            return
        self._unlink(iu, iv)
        if not self._directed:
            self._unlink(iv, iu)


__all__ = ["AdjacencyMatrixGraph", "UnweightedAdjacencyMatrixGraph"]
