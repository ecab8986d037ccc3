from __future__ import annotations

from adtgraph.graph.hash_graph import HashGraph


def create_graph() -> HashGraph:
    """
    Create an empty graph.

    Callers should prefer this over constructing HashGraph directly.
    """
    return HashGraph()
