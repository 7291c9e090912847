import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from adjgraph import (  # noqa: E402
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    BackendKind,
    UnweightedAdjacencyListGraph,
    UnweightedAdjacencyMatrixGraph,
)

GRAPH_CLASSES = [
    AdjacencyListGraph,
    UnweightedAdjacencyListGraph,
    AdjacencyMatrixGraph,
    UnweightedAdjacencyMatrixGraph,
]


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.delenv("ADJGRAPH_BACKEND", raising=False)
    monkeypatch.delenv("ADJGRAPH_WEIGHTED", raising=False)


@pytest.fixture(params=GRAPH_CLASSES, ids=lambda cls: cls.__name__)
def graph_cls(request):
    return request.param


@pytest.fixture(params=list(BackendKind), ids=lambda kind: kind.value)
def backend(request):
    return request.param
