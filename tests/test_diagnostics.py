"""Tests for diagnostics and debug mode."""

import pytest

from pathkit.diagnostics import (
    GraphValidationError,
    HeapInvariantError,
    PathInvariantError,
    assert_heap_ordered,
    assert_path_consistent,
    assert_vertex_in_graph,
    debug_context,
    is_debug_enabled,
    is_heap_ordered,
    is_path_consistent,
    reset_debug_enabled,
    route_steps,
    set_debug_enabled,
    validate_graph,
)
from pathkit.graphs import Graph, Path, Vertex


class TestHeapOrder:
    def test_valid(self):
        assert is_heap_ordered([])
        assert is_heap_ordered([1])
        assert is_heap_ordered([1, 3, 2, 5, 4, 2])
        assert_heap_ordered([0, 0, 0])

    def test_invalid(self):
        assert not is_heap_ordered([2, 1])
        with pytest.raises(HeapInvariantError, match="child 4"):
            assert_heap_ordered([1, 3, 2, 5, 0])

    def test_is_value_error(self):
        assert issubclass(HeapInvariantError, ValueError)


class TestValidateGraph:
    def test_valid(self, cities):
        validate_graph(cities.graph)

    def test_negative_weight(self):
        g = Graph.from_edges([("A", "B", 1), ("B", "C", -3)])
        with pytest.raises(GraphValidationError, match="-3"):
            validate_graph(g)

    def test_nan_weight(self):
        g = Graph.from_edges([("A", "B", float("nan"))])
        with pytest.raises(GraphValidationError):
            validate_graph(g)

    def test_dangling_destination(self):
        g = Graph()
        a = g.add_vertex("A")
        g.add_edge(a, Vertex("outside"), 1)
        with pytest.raises(GraphValidationError, match="outside the graph"):
            validate_graph(g)

    def test_vertex_membership(self, cities):
        assert_vertex_in_graph(cities.graph, cities.sf)
        with pytest.raises(GraphValidationError, match="Target"):
            assert_vertex_in_graph(cities.graph, Vertex("SF"), "target")


class TestPathConsistency:
    def test_route_steps_backward(self, cities):
        path = Path(1900, cities.chicago, Path(1000, cities.denver))
        assert route_steps(path, cities.sf) == [
            (cities.sf, 0),
            (cities.denver, 1000),
            (cities.chicago, 1900),
        ]

    def test_route_steps_forward(self, cities):
        path = Path(0, cities.sf, Path(1000, cities.denver))
        assert route_steps(path, cities.sf, forward=True) == [
            (cities.sf, 0),
            (cities.denver, 1000),
        ]

    def test_consistent(self, cities):
        path = Path(2700, cities.ny, Path(1900, cities.chicago, Path(1000, cities.denver)))
        assert is_path_consistent(path, cities.sf)
        assert is_path_consistent(None, cities.sf)

    def test_wrong_total(self, cities):
        path = Path(2000, cities.chicago, Path(1000, cities.denver))
        assert not is_path_consistent(path, cities.sf)
        with pytest.raises(PathInvariantError, match="weight 1000"):
            assert_path_consistent(path, cities.sf)

    def test_missing_edge(self, cities):
        """Chicago -> NY exists but NY -> SF does not."""
        path = Path(1600, cities.sf, Path(800, cities.ny))
        with pytest.raises(PathInvariantError):
            assert_path_consistent(path, cities.chicago)

    def test_forward_must_start_at_source(self, cities):
        path = Path(5, cities.sf, Path(1005, cities.denver))
        with pytest.raises(PathInvariantError, match="start"):
            assert_path_consistent(path, cities.sf, forward=True)

    def test_large_float_totals(self):
        g = Graph.from_edges([("A", "B", 1e9 + 0.1), ("B", "C", 0.2)])
        a, b, c = g.find("A"), g.find("B"), g.find("C")
        path = Path((1e9 + 0.1) + 0.2, c, Path(1e9 + 0.1, b))
        assert is_path_consistent(path, a)
        assert not is_path_consistent(path, a, rtol=0.0, atol=1e-12)

    def test_float_tolerance(self):
        g = Graph.from_edges([("A", "B", 0.1), ("B", "C", 0.2)])
        a, b, c = g.find("A"), g.find("B"), g.find("C")
        path = Path(0.1 + 0.2, c, Path(0.1, b))
        assert is_path_consistent(path, a)


class TestDebugMode:
    def test_toggle(self):
        assert is_debug_enabled() is False
        set_debug_enabled(True)
        assert is_debug_enabled() is True

    def test_context_restores(self):
        with debug_context(True):
            assert is_debug_enabled()
            with debug_context(False):
                assert not is_debug_enabled()
            assert is_debug_enabled()
        assert not is_debug_enabled()

    def test_context_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with debug_context(True):
                raise RuntimeError("boom")
        assert not is_debug_enabled()

    @pytest.mark.parametrize("value, expected", [("1", True), ("On", True), ("0", False), ("", False)])
    def test_env_var(self, monkeypatch, value, expected):
        monkeypatch.setenv("PATHKIT_DEBUG", value)
        assert reset_debug_enabled() is expected
        assert is_debug_enabled() is expected
