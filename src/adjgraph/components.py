"""
Connected and strongly connected components.

The algorithms only use the public ``Graph`` interface, so they run unchanged
on either backend. Both traversals keep an explicit work stack instead of
recursing, and every call owns its own bookkeeping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple, Union

from .errors import UnknownVertex, UnsupportedOperation
from .factory import new_graph
from .graph import BackendKind, Graph, Vertex

LOGGER = logging.getLogger(__name__)

Component = FrozenSet[Vertex]
ComponentResult = Union[Set[Component], List[Graph]]


def _require_undirected(graph: Graph, operation: str) -> None:
    if graph.directed:
        raise UnsupportedOperation(
            f"{operation} requires an undirected graph; use strongly_connected_components for directed graphs"
        )


def _require_directed(graph: Graph, operation: str) -> None:
    if not graph.directed:
        raise UnsupportedOperation(
            f"{operation} requires a directed graph; use connected_components for undirected graphs"
        )


def _flood(graph: Graph, start: Vertex, visited: Set[Vertex]) -> Component:
    """Collect every vertex reachable from ``start`` with an explicit DFS stack."""

    visited.add(start)
    members = [start]
    stack = [start]
    while stack:
        v = stack.pop()
        for w in graph.get_children(v):
            if w not in visited:
                visited.add(w)
                members.append(w)
                stack.append(w)
    return frozenset(members)


def induced_subgraph(
    graph: Graph,
    vertices: Iterable[Vertex],
    *,
    backend: BackendKind | str | None = None,
) -> Graph:
    """
    Build a new graph holding ``vertices`` and every edge of ``graph`` between them.

    The result shares directedness and weightedness with ``graph`` and is
    stored in ``backend`` (default: the same backend as ``graph``).
    """

    members = list(dict.fromkeys(vertices))
    for v in members:
        if not graph.has_vertex(v):
            raise UnknownVertex(v)
    keep = set(members)
    sub = new_graph(
        directed=graph.directed,
        vertices=members,
        backend=backend if backend is not None else graph.backend_kind,
        weighted=graph.weighted,
    )
    for u in members:
        for v in graph.get_children(u):
            if v in keep:
                sub.set_edge_weight(u, v, graph.get_edge_weight(u, v))
    return sub


def _materialize(
    graph: Graph,
    components: List[Component],
    as_graphs: bool,
    backend: BackendKind | str | None,
) -> ComponentResult:
    if as_graphs:
        return [induced_subgraph(graph, component, backend=backend) for component in components]
    return set(components)


def connected_components(
    graph: Graph,
    *,
    as_graphs: bool = False,
    backend: BackendKind | str | None = None,
) -> ComponentResult:
    """
    Partition an undirected graph into connected components.

    Returns a set of frozensets, or with ``as_graphs=True`` a list of induced
    subgraphs in discovery order.
    """

    _require_undirected(graph, "connected_components")
    visited: Set[Vertex] = set()
    components: List[Component] = []
    for start in graph:
        if start not in visited:
            components.append(_flood(graph, start, visited))
    LOGGER.debug("connected_components vertices=%d components=%d", len(visited), len(components))
    return _materialize(graph, components, as_graphs, backend)


def is_connected(graph: Graph) -> bool:
    """True when an undirected graph has at most one component."""

    _require_undirected(graph, "is_connected")
    if len(graph) == 0:
        return True
    visited: Set[Vertex] = set()
    _flood(graph, next(iter(graph)), visited)
    return len(visited) == len(graph)


@dataclass
class _TarjanContext:
    """Scratch state for one Tarjan run; never shared between calls."""

    graph: Graph
    index: Dict[Vertex, int] = field(default_factory=dict)
    lowlink: Dict[Vertex, int] = field(default_factory=dict)
    on_stack: Set[Vertex] = field(default_factory=set)
    stack: List[Vertex] = field(default_factory=list)
    counter: int = 0
    components: List[Component] = field(default_factory=list)

    def _discover(self, v: Vertex) -> Tuple[Vertex, Iterator[Vertex]]:
        self.index[v] = self.counter
        self.lowlink[v] = self.counter
        self.counter += 1
        self.stack.append(v)
        self.on_stack.add(v)
        return v, iter(self.graph.get_children(v))

    def _close(self, root: Vertex) -> None:
        members: List[Vertex] = []
        while True:
            w = self.stack.pop()
            self.on_stack.remove(w)
            members.append(w)
            if w == root:
                break
        self.components.append(frozenset(members))

    def strongconnect(self, root: Vertex) -> None:
        # Each frame is a vertex plus the iterator over children still to visit,
        # standing in for a suspended recursive call.
        frames = [self._discover(root)]
        while frames:
            v, children = frames[-1]
            descended = False
            for w in children:
                if w not in self.index:
                    frames.append(self._discover(w))
                    descended = True
                    break
                if w in self.on_stack:
                    self.lowlink[v] = min(self.lowlink[v], self.index[w])
            if descended:
                continue
            frames.pop()
            if frames:
                parent = frames[-1][0]
                self.lowlink[parent] = min(self.lowlink[parent], self.lowlink[v])
            if self.lowlink[v] == self.index[v]:
                self._close(v)

    def run(self) -> List[Component]:
        for vertex in self.graph:
            if vertex not in self.index:
                self.strongconnect(vertex)
        return self.components


def tarjan_scc(graph: Graph) -> List[Component]:
    """Tarjan's SCC algorithm; components come out in reverse topological order."""

    _require_directed(graph, "strongly_connected_components")
    components = _TarjanContext(graph).run()
    LOGGER.debug("tarjan_scc vertices=%d components=%d", len(graph), len(components))
    return components


def strongly_connected_components(
    graph: Graph,
    *,
    as_graphs: bool = False,
    backend: BackendKind | str | None = None,
) -> ComponentResult:
    """
    Partition a directed graph into strongly connected components.

    Returns a set of frozensets, or with ``as_graphs=True`` a list of induced
    subgraphs in the order Tarjan closes them.
    """

    return _materialize(graph, tarjan_scc(graph), as_graphs, backend)


def condensation(
    graph: Graph,
    *,
    backend: Optional[BackendKind | str] = None,
) -> Tuple[List[Component], Graph]:
    """Return SCCs and the condensation DAG over their indices."""

    comps = tarjan_scc(graph)
    comp_index = {v: i for i, comp in enumerate(comps) for v in comp}
    dag = new_graph(
        directed=True,
        vertices=range(len(comps)),
        backend=backend if backend is not None else graph.backend_kind,
        weighted=False,
    )
    for u in graph:
        for v in graph.get_children(u):
            cu, cv = comp_index[u], comp_index[v]
            if cu != cv:
                dag.set_edge_weight(cu, cv, True)
    return comps, dag


__all__ = [
    "connected_components",
    "strongly_connected_components",
    "tarjan_scc",
    "condensation",
    "induced_subgraph",
    "is_connected",
]
