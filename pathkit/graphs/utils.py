"""
Utility functions for graphs.

Provides vertex indexing, a dense adjacency-matrix view and a seeded random
graph generator used by tests and benchmarks.
"""

from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from .core import Graph, Vertex


def vertex_index_map(graph: Graph) -> Tuple[Dict[Vertex, int], List[Vertex]]:
    """
    Map the graph's vertices to indices 0..n-1 in insertion order.

    Args:
        graph: Graph to index.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).

    Example:
        >>> g = Graph.from_edges([("b", "a", 1)])
        >>> _, order = vertex_index_map(g)
        >>> [v.value for v in order]
        ['b', 'a']
    """
    order = list(graph.vertices)
    return {vertex: idx for idx, vertex in enumerate(order)}, order


def adjacency_matrix(graph: Graph) -> Tuple[np.ndarray, List[Vertex]]:
    """
    Dense weight matrix of ``graph``.

    Entry ``[i, j]`` is the smallest weight among parallel edges
    ``i -> j``, ``np.inf`` where there is no edge and 0 on the diagonal
    unless a self-loop is cheaper.

    Args:
        graph: Graph to convert.

    Returns:
        Tuple of (matrix of shape (V, V), index_to_vertex list).
    """
    index, order = vertex_index_map(graph)
    n = len(order)
    matrix = np.full((n, n), np.inf, dtype=float)
    np.fill_diagonal(matrix, 0.0)

    for source, destination, weight in graph.edges():
        i, j = index[source], index[destination]
        matrix[i, j] = min(matrix[i, j], float(weight))

    return matrix, order


def random_graph(
    n_vertices: int,
    edge_probability: float = 0.3,
    max_weight: int = 10,
    rng: Optional[Union[int, np.random.Generator]] = None,
) -> Graph:
    """
    Generate a random directed graph with integer weights.

    Each ordered pair of distinct vertices gets an edge with probability
    ``edge_probability``; weights are drawn uniformly from ``[0, max_weight]``.
    Vertex payloads are the integers ``0..n_vertices-1``.

    Args:
        n_vertices: Number of vertices (>= 0).
        edge_probability: Edge probability in [0, 1].
        max_weight: Largest weight drawn (>= 0).
        rng: Seed or numpy Generator for reproducibility.

    Returns:
        New Graph.

    Raises:
        ValueError: On a negative size or weight bound, or a probability
            outside [0, 1].
    """
    if n_vertices < 0:
        raise ValueError(f"n_vertices must be non-negative, got {n_vertices}")
    if not (0.0 <= edge_probability <= 1.0):
        raise ValueError(f"edge_probability must be in [0, 1], got {edge_probability}")
    if max_weight < 0:
        raise ValueError(f"max_weight must be non-negative, got {max_weight}")

    rng = np.random.default_rng(rng)
    graph = Graph()
    vertices = [graph.add_vertex(i) for i in range(n_vertices)]

    draws = rng.random((n_vertices, n_vertices))
    weights = rng.integers(0, max_weight + 1, size=(n_vertices, n_vertices))
    for i in range(n_vertices):
        for j in range(n_vertices):
            if i != j and draws[i, j] < edge_probability:
                graph.add_edge(vertices[i], vertices[j], int(weights[i, j]))

    return graph


__all__ = ["vertex_index_map", "adjacency_matrix", "random_graph"]
