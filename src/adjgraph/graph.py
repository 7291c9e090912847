"""Graph capability interface shared by the adjacency-list and adjacency-matrix backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Hashable, Iterable, Iterator, List, Optional, Set, Tuple

from .errors import DuplicateEdge, DuplicateVertex, UnknownVertex

Vertex = Hashable
EdgeTriple = Tuple[Vertex, Vertex, Any]


class BackendKind(str, Enum):
    """Storage layout used by a graph instance."""

    LIST = "list"
    MATRIX = "matrix"


class Graph(ABC):
    """
    Abstract graph with set semantics on vertices and at most one edge per ordered pair.

    Undirected graphs mirror every edge mutation, so ``(u, v)`` and ``(v, u)``
    always exist together with equal weights. Unweighted graphs store presence
    only; their edge weight is ``True`` or ``False``.
    """

    backend_kind: ClassVar[BackendKind]
    _weighted: ClassVar[bool] = True

    def __init__(self, directed: bool = False, vertices: Iterable[Vertex] = ()) -> None:
        self._directed = bool(directed)
        self.add_vertices(vertices)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    # -- vertices ---------------------------------------------------------

    def add_vertex(self, v: Vertex) -> None:
        """Add a single vertex; raises ``DuplicateVertex`` if present."""

        self.add_vertices((v,))

    @abstractmethod
    def add_vertices(self, vertices: Iterable[Vertex]) -> None:
        """Add a batch of vertices, or none of them if any is already present."""

    @abstractmethod
    def remove_vertex(self, v: Vertex) -> None:
        """Remove ``v`` together with every edge incident to it."""

    @abstractmethod
    def has_vertex(self, v: Vertex) -> bool:
        ...

    @abstractmethod
    def get_vertices(self) -> Set[Vertex]:
        ...

    # -- edges ------------------------------------------------------------

    @abstractmethod
    def get_edge_weight(self, u: Vertex, v: Vertex) -> Any:
        ...

    @abstractmethod
    def set_edge_weight(self, u: Vertex, v: Vertex, weight: Any) -> None:
        """Create or overwrite the edge ``(u, v)``."""

    @abstractmethod
    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        ...

    @abstractmethod
    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        """Return whether ``(u, v)`` exists; never raises."""

    @abstractmethod
    def get_children(self, v: Vertex) -> Set[Vertex]:
        ...

    @abstractmethod
    def get_parents(self, v: Vertex) -> Set[Vertex]:
        ...

    def add_edge(self, u: Vertex, v: Vertex, weight: Any = None) -> None:
        """
        Add a new edge, refusing to overwrite an existing one.

        Unweighted graphs default ``weight`` to ``True``; weighted graphs need
        it spelled out.
        """

        if self.weighted:
            if weight is None:
                raise ValueError("Weighted graphs need an explicit edge weight.")
        elif weight is None:
            weight = True
        elif not weight:
            raise ValueError("add_edge cannot add an edge with a false weight.")
        self._require_vertex(u)
        self._require_vertex(v)
        if self.has_edge(u, v):
            raise DuplicateEdge(u, v)
        self.set_edge_weight(u, v, weight)

    def add_edges(self, edges: Iterable[Tuple[Any, ...]]) -> None:
        """Add ``(u, v)`` or ``(u, v, weight)`` tuples; rolls back on the first failure."""

        added: List[Tuple[Vertex, Vertex]] = []
        try:
            for edge in edges:
                u, v, *rest = edge
                if len(rest) > 1:
                    raise ValueError(f"Edge tuples hold two or three items, got {edge!r}")
                self.add_edge(u, v, *rest)
                added.append((u, v))
        except Exception:
            for u, v in reversed(added):
                self.remove_edge(u, v)
            raise

    def get_edges(self) -> Iterator[EdgeTriple]:
        """Yield ``(u, v, weight)``; undirected edges are reported once."""

        done: Set[Vertex] = set()
        for u in self:
            for v in self.get_children(u):
                if not self._directed and v in done:
                    continue
                yield u, v, self.get_edge_weight(u, v)
            done.add(u)

    def edge_count(self) -> int:
        return sum(1 for _ in self.get_edges())

    def copy(self, backend: Optional[BackendKind | str] = None) -> "Graph":
        """Return an independent copy, optionally stored in another backend."""

        from .factory import new_graph

        clone = new_graph(
            directed=self._directed,
            vertices=self,
            backend=backend if backend is not None else self.backend_kind,
            weighted=self.weighted,
        )
        for u, v, weight in self.get_edges():
            clone.set_edge_weight(u, v, weight)
        return clone

    # -- helpers ----------------------------------------------------------

    def _require_vertex(self, v: Vertex) -> None:
        if not self.has_vertex(v):
            raise UnknownVertex(v)

    def _new_vertices(self, vertices: Iterable[Vertex]) -> List[Vertex]:
        """Deduplicate a batch and reject it whole if any member already exists."""

        batch = list(dict.fromkeys(vertices))
        for v in batch:
            if self.has_vertex(v):
                raise DuplicateVertex(v)
        return batch

    def _check_weight(self, weight: Any) -> Any:
        if self.weighted:
            if weight is None:
                raise ValueError("Edge weight cannot be None.")
            return weight
        return bool(weight)

    def __contains__(self, v: object) -> bool:
        return self.has_vertex(v)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.get_vertices())

    def __len__(self) -> int:
        return len(self.get_vertices())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(directed={self._directed}, "
            f"vertices={len(self)}, edges={self.edge_count()})"
        )


__all__ = ["BackendKind", "Graph", "Vertex", "EdgeTriple"]
