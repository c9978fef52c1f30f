"""pathkit - weighted graphs and single-source shortest paths."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    GraphValidationError,
    HeapInvariantError,
    PathInvariantError,
    assert_heap_ordered,
    assert_path_consistent,
    debug_context,
    is_debug_enabled,
    is_heap_ordered,
    is_path_consistent,
    set_debug_enabled,
    validate_graph,
)

# Graphs and shortest paths
from .graphs import (
    Edge,
    Frontier,
    Graph,
    LinearFrontier,
    Path,
    PriorityFrontier,
    SearchStats,
    StartPath,
    Vertex,
    adjacency_matrix,
    iter_path,
    make_frontier,
    path_values,
    path_vertices,
    random_graph,
    reverse_path,
    shortest_path,
    shortest_path_array,
    shortest_path_heap,
    vertex_index_map,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
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
    # Diagnostics
    "GraphValidationError",
    "HeapInvariantError",
    "PathInvariantError",
    "is_heap_ordered",
    "assert_heap_ordered",
    "validate_graph",
    "is_path_consistent",
    "assert_path_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
