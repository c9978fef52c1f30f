"""Integration tests for the graphs package within pathkit."""


def test_graphs_import_from_main():
    """Graph types and engines are importable from the top-level package."""
    from pathkit import Graph, reverse_path, shortest_path_array, shortest_path_heap

    assert Graph is not None
    assert shortest_path_array is not None
    assert shortest_path_heap is not None
    assert reverse_path is not None


def test_graphs_in_all_exports():
    import pathkit
    import pathkit.graphs

    graph_exports = set(pathkit.graphs.__all__)
    assert graph_exports.issubset(set(pathkit.__all__)), "Graph exports missing from __all__"


def test_diagnostics_import_independently():
    """Importing diagnostics first does not create an import cycle."""
    import importlib

    diagnostics = importlib.import_module("pathkit.diagnostics")
    graphs = importlib.import_module("pathkit.graphs")
    assert diagnostics.validate_graph is not None
    assert graphs.shortest_path is not None


def test_functional_integration():
    """Build, search, reverse and check a route end to end."""
    from pathkit import (
        Graph,
        assert_path_consistent,
        debug_context,
        path_values,
        reverse_path,
        shortest_path_heap,
    )

    g = Graph.from_edges(
        [
            ("start", "A", 1),
            ("A", "B", 2),
            ("B", "end", 1),
            ("start", "end", 5),
        ]
    )
    start, end = g.find("start"), g.find("end")

    with debug_context(True):
        path = shortest_path_heap(g, start, end)
    route = reverse_path(path, start)

    assert path.total == 4
    assert path_values(route) == ["start", "A", "B", "end"]
    assert_path_consistent(route, start, forward=True)
