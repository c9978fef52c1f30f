"""Diagnostics and debugging utilities for pathkit."""

from .core import (
    GraphValidationError,
    HeapInvariantError,
    PathInvariantError,
    assert_heap_ordered,
    assert_path_consistent,
    assert_vertex_in_graph,
    is_heap_ordered,
    is_path_consistent,
    route_steps,
    validate_graph,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reset_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "GraphValidationError",
    "HeapInvariantError",
    "PathInvariantError",
    "is_heap_ordered",
    "assert_heap_ordered",
    "validate_graph",
    "assert_vertex_in_graph",
    "route_steps",
    "is_path_consistent",
    "assert_path_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_enabled",
    "debug_context",
]
