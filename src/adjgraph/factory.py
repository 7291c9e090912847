"""Construction entry point that picks a backend class for a new graph."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple, Type

from .adjacency_list import AdjacencyListGraph, UnweightedAdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph, UnweightedAdjacencyMatrixGraph
from .config import resolve_backend, resolve_weighted
from .graph import BackendKind, Graph, Vertex

LOGGER = logging.getLogger(__name__)

_GRAPH_CLASSES: Dict[Tuple[BackendKind, bool], Type[Graph]] = {
    (BackendKind.LIST, True): AdjacencyListGraph,
    (BackendKind.LIST, False): UnweightedAdjacencyListGraph,
    (BackendKind.MATRIX, True): AdjacencyMatrixGraph,
    (BackendKind.MATRIX, False): UnweightedAdjacencyMatrixGraph,
}


def graph_class(backend: BackendKind | str | None = None, weighted: Optional[bool] = None) -> Type[Graph]:
    """Return the concrete graph class for a backend/weightedness pair."""

    return _GRAPH_CLASSES[(resolve_backend(backend), resolve_weighted(weighted))]


def new_graph(
    directed: bool = False,
    vertices: Iterable[Vertex] = (),
    backend: BackendKind | str | None = None,
    weighted: Optional[bool] = None,
) -> Graph:
    """
    Create an empty-edged graph over ``vertices``.

    ``backend`` accepts a ``BackendKind`` or an alias such as ``"list"`` or
    ``"adjacency-matrix"``; ``None`` defers to ``ADJGRAPH_BACKEND``.
    ``weighted=None`` defers to ``ADJGRAPH_WEIGHTED`` (default true).
    """

    cls = graph_class(backend, weighted)
    graph = cls(directed=directed, vertices=vertices)
    LOGGER.debug("new_graph cls=%s directed=%s vertices=%d", cls.__name__, graph.directed, len(graph))
    return graph


__all__ = ["graph_class", "new_graph"]
