"""Error hierarchy shared by every graph backend and algorithm."""

from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """Base error for graph operations."""


class DuplicateVertex(GraphError, ValueError):
    """Raised when adding a vertex that is already in the graph."""

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(f"vertex {vertex!r} is already in graph")
        self.vertex = vertex


class UnknownVertex(GraphError, KeyError):
    """Raised when an operation references a vertex absent from the graph."""

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(f"vertex {vertex!r} not in graph")
        self.vertex = vertex

    def __str__(self) -> str:
        # KeyError would repr-quote the message otherwise.
        return str(self.args[0])


class NoSuchEdge(GraphError, KeyError):
    """Raised when reading or removing an edge that does not exist."""

    def __init__(self, u: Hashable, v: Hashable) -> None:
        super().__init__(f"edge ({u!r}, {v!r}) does not exist")
        self.u = u
        self.v = v

    def __str__(self) -> str:
        return str(self.args[0])


class DuplicateEdge(GraphError, ValueError):
    """Raised by ``add_edge`` when the edge is already present."""

    def __init__(self, u: Hashable, v: Hashable) -> None:
        super().__init__(f"edge ({u!r}, {v!r}) already exists")
        self.u = u
        self.v = v


class UnsupportedOperation(GraphError, TypeError):
    """Raised when an algorithm is run on a graph of the wrong directedness."""


__all__ = [
    "GraphError",
    "DuplicateVertex",
    "UnknownVertex",
    "NoSuchEdge",
    "DuplicateEdge",
    "UnsupportedOperation",
]
