"""adjgraph runtime configuration helpers."""

from __future__ import annotations

import logging
import os

from .graph import BackendKind

_BACKEND_ENV = "ADJGRAPH_BACKEND"
_WEIGHTED_ENV = "ADJGRAPH_WEIGHTED"

_DEFAULT_BACKEND = BackendKind.LIST

_BACKEND_ALIASES: dict[str, BackendKind] = {
    "list": BackendKind.LIST,
    "adjacency-list": BackendKind.LIST,
    "adjacency_list": BackendKind.LIST,
    "matrix": BackendKind.MATRIX,
    "adjacency-matrix": BackendKind.MATRIX,
    "adjacency_matrix": BackendKind.MATRIX,
}

LOGGER = logging.getLogger(__name__)


def _env_backend(env_name: str) -> str | None:
    value = os.getenv(env_name)
    if not value:
        return None
    return value.strip().lower() or None


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in {"", "0", "false", "no"}:
        return False
    if raw in {"1", "true", "yes"}:
        return True
    return default


def canonical_backend(name: str | BackendKind) -> BackendKind:
    """Map a backend name or alias onto its ``BackendKind``."""

    if isinstance(name, BackendKind):
        return name
    if not isinstance(name, str):
        raise ValueError(f"Unknown graph backend: {name!r}")
    kind = _BACKEND_ALIASES.get(name.strip().lower())
    if kind is None:
        raise ValueError(f"Unknown graph backend: {name}")
    return kind


def resolve_backend(preferred: str | BackendKind | None = None) -> BackendKind:
    """Resolve the backend requested by caller/env, falling back to the list backend."""

    requested = preferred if preferred is not None else _env_backend(_BACKEND_ENV)
    backend = _DEFAULT_BACKEND if requested is None else canonical_backend(requested)
    LOGGER.debug(
        "resolve_backend backend=%s preferred=%s env=%s",
        backend.value,
        preferred,
        _env_backend(_BACKEND_ENV),
    )
    return backend


def resolve_weighted(preferred: bool | None = None) -> bool:
    """Resolve whether new graphs carry edge weights."""

    if preferred is not None:
        return bool(preferred)
    return _env_bool(_WEIGHTED_ENV, default=True)


__all__ = [
    "canonical_backend",
    "resolve_backend",
    "resolve_weighted",
    "_BACKEND_ENV",
    "_WEIGHTED_ENV",
]
