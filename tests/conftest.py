from __future__ import annotations

import pytest

from adtgraph import create_graph
from adtgraph.graph.hash_graph import HashGraph


@pytest.fixture()
def graph() -> HashGraph:
    return create_graph()


@pytest.fixture()
def sample_graph() -> HashGraph:
    g = create_graph()
    g.add_edge("A", "A")
    g.add_edge("A", "B")
    g.add_edge("C", "A")
    g.add_edge("C", "B")
    return g
