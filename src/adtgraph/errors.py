"""Graph error types."""

from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """Base error for adtgraph."""


class NotFoundError(GraphError, LookupError):
    """Raised when an operation requires a vertex the graph does not have."""

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(f"Vertex does not exist in this Graph: {vertex!r}")
        self.vertex = vertex
