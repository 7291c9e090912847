"""
adjgraph: generic graphs over interchangeable adjacency-list and adjacency-matrix storage.

The package exposes one ``Graph`` interface with weighted and unweighted
implementations of each backend, a ``new_graph`` constructor that selects
between them, and component algorithms (connected components and Tarjan's
strongly connected components) written purely against the interface.
"""

from importlib import metadata

from .adjacency_list import AdjacencyListGraph, UnweightedAdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph, UnweightedAdjacencyMatrixGraph
from .components import (
    condensation,
    connected_components,
    induced_subgraph,
    is_connected,
    strongly_connected_components,
    tarjan_scc,
)
from .config import resolve_backend
from .errors import (
    DuplicateEdge,
    DuplicateVertex,
    GraphError,
    NoSuchEdge,
    UnknownVertex,
    UnsupportedOperation,
)
from .factory import graph_class, new_graph
from .graph import BackendKind, Graph

try:  # pragma: no cover - metadata only at runtime
    __version__ = metadata.version("adjgraph")
except metadata.PackageNotFoundError:  # pragma: no cover - source tree / editable installs
    __version__ = "0.0.0"

__all__ = [
    "BackendKind",
    "Graph",
    "AdjacencyListGraph",
    "UnweightedAdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "UnweightedAdjacencyMatrixGraph",
    "new_graph",
    "graph_class",
    "resolve_backend",
    "connected_components",
    "strongly_connected_components",
    "tarjan_scc",
    "condensation",
    "induced_subgraph",
    "is_connected",
    "GraphError",
    "DuplicateVertex",
    "UnknownVertex",
    "NoSuchEdge",
    "DuplicateEdge",
    "UnsupportedOperation",
]
