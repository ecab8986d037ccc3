from __future__ import annotations

import logging
from typing import Any, Generic, Hashable, Iterator, List, Optional, TypeVar

import networkx as nx

from adtgraph.config.settings import RenderConfig
from adtgraph.errors import NotFoundError
from adtgraph.graph.graph_schema import Edge

V = TypeVar("V", bound=Hashable)

logger = logging.getLogger("adtgraph.graph")


class _NoneVertex:
    """Stands in for None, which networkx does not accept as a node."""

    def __repr__(self) -> str:
        return "<None vertex>"


_NONE = _NoneVertex()


def _to_node(vertex: Any) -> Any:
    return _NONE if vertex is None else vertex


def _from_node(node: Any) -> Any:
    return None if node is _NONE else node


class HashGraph(Generic[V]):
    """
    Directed graph over hashable vertices of type V.

    An undirected edge between u and v can be simulated by the two
    edges (u, v) and (v, u).

    Vertices and out-neighbors are kept in insertion order, so the
    canonical rendering is stable for a given sequence of insertions.
    None is a valid vertex.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        self._edge_count = 0

    # -------------------- Size --------------------

    def num_vertices(self) -> int:
        return self._graph.number_of_nodes()

    def num_edges(self) -> int:
        """
        Number of add_edge calls made on this graph.

        Re-adding an existing edge counts again, so this can exceed the
        number of distinct edges.
        """
        return self._edge_count

    def degree(self, vertex: V) -> int:
        """
        Out-degree of vertex.

        Raises NotFoundError if vertex is not in the graph.
        """
        node = _to_node(vertex)
        if node not in self._graph:
            logger.debug("degree requested for absent vertex %r", vertex)
            raise NotFoundError(vertex)
        return self._graph.out_degree(node)

    # -------------------- Mutation --------------------

    def add_vertex(self, vertex: V) -> None:
        node = _to_node(vertex)
        if node in self._graph:
            return
        self._graph.add_node(node)
        logger.debug("added vertex %r", vertex)

    def add_edge(self, from_: V, to: V) -> None:
        """
        Add the directed edge (from_, to).

        Missing endpoints are added first. Adding an edge that already
        exists leaves the topology unchanged but is still counted.
        """
        self.add_vertex(from_)
        self.add_vertex(to)
        source, target = _to_node(from_), _to_node(to)
        if self._graph.has_edge(source, target):
            logger.debug("edge (%r, %r) already present", from_, to)
        else:
            self._graph.add_edge(source, target)
        self._edge_count += 1

    # -------------------- Queries --------------------

    def contains(self, vertex: V) -> bool:
        return _to_node(vertex) in self._graph

    def has_edge(self, from_: V, to: V) -> bool:
        source, target = _to_node(from_), _to_node(to)
        # membership tests on the DiGraph report unhashable values as absent
        if source not in self._graph or target not in self._graph:
            return False
        return self._graph.has_edge(source, target)

    def adjacent_to(self, from_: V) -> List[V]:
        """
        Vertices w such that (from_, w) is an edge.

        An absent vertex has no neighbors; the result is empty rather
        than an error.
        """
        node = _to_node(from_)
        if node not in self._graph:
            return []
        return [_from_node(n) for n in self._graph.successors(node)]

    def get_vertices(self) -> List[V]:
        return [_from_node(n) for n in self._graph.nodes]

    def edges(self) -> Iterator[Edge]:
        for source, target in self._graph.edges:
            yield Edge(source=_from_node(source), target=_from_node(target))

    # -------------------- Rendering --------------------

    def render(self, config: Optional[RenderConfig] = None) -> str:
        """
        One line per vertex: the vertex, the suffix, then its neighbors.

        The first neighbor is preceded by config.first_prefix and every
        later one by config.separator. With the default tokens the
        graph with edges (A, A), (A, B), (C, A), (C, B) renders as::

            A: A ,B
            B:
            C: A ,B
        """
        config = config or RenderConfig()
        lines: List[str] = []
        for node in self._graph.nodes:
            parts = [f"{_from_node(node)}{config.vertex_suffix}"]
            for i, neighbor in enumerate(self._graph.successors(node)):
                prefix = config.first_prefix if i == 0 else config.separator
                parts.append(f"{prefix}{_from_node(neighbor)}")
            parts.append(config.line_terminator)
            lines.append("".join(parts))
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"HashGraph(V={self.num_vertices()}, E={self.num_edges()})"

    # -------------------- Equality --------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashGraph):
            return NotImplemented
        if self is other:
            return True
        return str(self) == str(other)

    # -------------------- Container protocol --------------------

    def __len__(self) -> int:
        return self.num_vertices()

    def __contains__(self, vertex: object) -> bool:
        return self.contains(vertex)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[V]:
        return iter(self.get_vertices())
