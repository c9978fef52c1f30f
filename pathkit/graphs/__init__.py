"""
Weighted shortest-path package for pathkit.

This package provides:
- Graph data structures (Graph, Vertex, Edge)
- Path records and path reversal
- Frontier strategies (LinearFrontier, PriorityFrontier)
- Dijkstra's algorithm over either frontier
- Adjacency-matrix export and random graph generation
"""

from .core import Edge, Graph, Vertex
from .frontier import Frontier, LinearFrontier, PriorityFrontier, make_frontier
from .path import Path, StartPath, iter_path, path_values, path_vertices, reverse_path
from .shortest import SearchStats, shortest_path, shortest_path_array, shortest_path_heap
from .utils import adjacency_matrix, random_graph, vertex_index_map

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
    "Path",
    "StartPath",
    "iter_path",
    "path_vertices",
    "path_values",
    "reverse_path",
    "Frontier",
    "LinearFrontier",
    "PriorityFrontier",
    "make_frontier",
    "SearchStats",
    "shortest_path",
    "shortest_path_array",
    "shortest_path_heap",
    "vertex_index_map",
    "adjacency_matrix",
    "random_graph",
]

# Example usage:
# from pathkit.graphs import Graph, shortest_path_heap, reverse_path, path_values
#
# g = Graph()
# sf, denver, ny = g.add_vertex("SF"), g.add_vertex("Denver"), g.add_vertex("NY")
# g.add_edge(sf, denver, 1000)
# g.add_edge(denver, ny, 1800)
# route = reverse_path(shortest_path_heap(g, sf, ny), sf)
# path_values(route)  # ['SF', 'Denver', 'NY']
