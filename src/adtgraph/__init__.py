"""
adtgraph
========

A generic directed-graph abstract data type.

Vertices map to sets of out-neighbors. Graphs support insertion,
membership and adjacency queries, and a canonical string rendering
that also defines equality.

Public API:
- create_graph
- HashGraph
- GraphBuilder
- NotFoundError
"""

from adtgraph.errors import GraphError, NotFoundError
from adtgraph.graph.hash_graph import HashGraph
from adtgraph.graph.graph_builder import GraphBuilder
from adtgraph.graph.graph_factory import create_graph

__all__ = [
    "create_graph",
    "HashGraph",
    "GraphBuilder",
    "GraphError",
    "NotFoundError",
]

__version__ = "0.1.0"
