"""
Graph subsystem for adtgraph.

Defines the directed graph container and its construction helpers:
- HashGraph, the insertion-ordered adjacency container
- create_graph, the factory callers should use
- GraphBuilder, for bulk population
"""

from adtgraph.graph.graph_schema import Edge
from adtgraph.graph.hash_graph import HashGraph
from adtgraph.graph.graph_builder import GraphBuilder
from adtgraph.graph.graph_factory import create_graph

__all__ = [
    "Edge",
    "HashGraph",
    "GraphBuilder",
    "create_graph",
]
