from __future__ import annotations

from typing import Hashable, Iterable, Tuple, Union

from adtgraph.graph.graph_schema import Edge
from adtgraph.graph.hash_graph import HashGraph


class GraphBuilder:
    """
    Populates a graph from bulk inputs.
    """

    def __init__(self, graph: HashGraph) -> None:
        self.graph = graph

    def add_vertices(self, vertices: Iterable[Hashable]) -> None:
        for vertex in vertices:
            self.graph.add_vertex(vertex)

    def add_edges(
        self,
        edges: Iterable[Union[Edge, Tuple[Hashable, Hashable]]],
    ) -> None:
        for edge in edges:
            if isinstance(edge, Edge):
                self.graph.add_edge(edge.source, edge.target)
            else:
                source, target = edge
                self.graph.add_edge(source, target)
