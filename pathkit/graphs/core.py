"""
Core graph data structures.

A Graph is an unordered collection of Vertex objects. Each vertex owns an
ordered list of outgoing Edge objects; an edge only names its destination,
its source is the vertex whose list holds it. Adding vertices and edges is
O(1) amortized and nothing is ever removed.

Vertices compare and hash by identity, so payload values may repeat or be
mutable without confusing the shortest-path engine.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")

# Creation counter, only used for repr and stable ordering of vertices.
_vertex_keys = itertools.count()


@dataclass(frozen=True)
class Edge:
    """
    Directed, weighted link to ``destination``.

    Attributes:
        weight: Non-negative cost of traversing the edge.
        destination: Vertex the edge points to (shared, not owned).
    """

    weight: Any
    destination: "Vertex"

    def __repr__(self) -> str:
        return f"Edge(weight={self.weight!r}, destination={self.destination!r})"


@dataclass(eq=False)
class Vertex(Generic[T]):
    """
    Graph node holding a payload value and its outgoing edges.

    Attributes:
        value: Payload. Never used for identity.
        edges: Outgoing edges in insertion order.
        visited: Marking flag owned by unweighted traversals. The
            shortest-path engine never reads or writes it.
        key: Creation sequence number.
    """

    value: T
    edges: List[Edge] = field(default_factory=list)
    visited: bool = False
    key: int = field(default_factory=lambda: next(_vertex_keys), init=False)

    def neighbors(self) -> List[Tuple["Vertex", Any]]:
        """Return ``(destination, weight)`` pairs in edge order."""
        return [(edge.destination, edge.weight) for edge in self.edges]

    def __repr__(self) -> str:
        return f"Vertex({self.value!r}, key={self.key})"


class Graph(Generic[T]):
    """
    Directed weighted graph (the vertex "canvas").

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(1) amortized
        - find: O(V)
        - edges: O(V + E)

    Example:
        >>> g = Graph()
        >>> a = g.add_vertex("A")
        >>> b = g.add_vertex("B")
        >>> edge = g.add_edge(a, b, 4)
        >>> a.neighbors() == [(b, 4)]
        True
    """

    def __init__(self) -> None:
        self.vertices: List[Vertex[T]] = []

    def add_vertex(self, value: T | Vertex[T]) -> Vertex[T]:
        """
        Add a vertex to the graph and return it.

        A payload creates a fresh vertex; an existing Vertex instance is
        appended as is. Duplicates are not detected.

        Args:
            value: Payload for the new vertex, or a prebuilt Vertex.

        Returns:
            The vertex now owned by this graph.
        """
        vertex = value if isinstance(value, Vertex) else Vertex(value)
        self.vertices.append(vertex)
        return vertex

    def add_edge(self, source: Vertex[T], destination: Vertex[T], weight: Any) -> Edge:
        """
        Append a directed edge ``source -> destination`` with ``weight``.

        Neither the weight sign nor graph membership of the endpoints is
        checked here; see :func:`pathkit.diagnostics.validate_graph`.

        Args:
            source: Vertex that owns the new edge.
            destination: Vertex the edge points to.
            weight: Non-negative edge cost.

        Returns:
            The new Edge.
        """
        edge = Edge(weight, destination)
        source.edges.append(edge)
        return edge

    def find(self, value: T) -> Optional[Vertex[T]]:
        """Return the first vertex whose payload equals ``value``, or None."""
        for vertex in self.vertices:
            if vertex.value == value:
                return vertex
        return None

    def edges(self) -> Iterator[Tuple[Vertex[T], Vertex[T], Any]]:
        """Yield ``(source, destination, weight)`` triples in insertion order."""
        for vertex in self.vertices:
            for edge in vertex.edges:
                yield vertex, edge.destination, edge.weight

    @classmethod
    def from_edges(cls, triples: Iterable[Tuple[T, T, Any]]) -> "Graph[T]":
        """
        Build a graph from ``(u, v, weight)`` payload triples.

        One vertex is created per distinct payload, in order of first
        appearance, so payloads must be hashable here.

        Example:
            >>> g = Graph.from_edges([("A", "B", 1), ("B", "C", 2)])
            >>> [v.value for v in g]
            ['A', 'B', 'C']
        """
        graph: Graph[T] = cls()
        by_value: dict = {}

        def vertex_for(value: T) -> Vertex[T]:
            if value not in by_value:
                by_value[value] = graph.add_vertex(value)
            return by_value[value]

        for u, v, weight in triples:
            source = vertex_for(u)
            graph.add_edge(source, vertex_for(v), weight)

        return graph

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex[T]]:
        return iter(self.vertices)

    def __contains__(self, vertex: object) -> bool:
        return any(v is vertex for v in self.vertices)

    def __repr__(self) -> str:
        n_edges = sum(len(v.edges) for v in self.vertices)
        return f"Graph(vertices={len(self.vertices)}, edges={n_edges})"
