"""
Invariant checks for graphs, frontiers and path chains.

The shortest-path engine trusts its inputs. The helpers here form the
optional validation boundary: ``is_*`` functions return a bool and
``assert_*`` / ``validate_*`` functions raise a ValueError subclass that
names the first violation found.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from ..graphs.core import Graph, Vertex
    from ..graphs.path import Path


class GraphValidationError(ValueError):
    """Raised when a graph or search endpoint breaks the engine's preconditions."""


class HeapInvariantError(ValueError):
    """Raised when a frontier's storage is not heap-ordered."""


class PathInvariantError(ValueError):
    """Raised when a path chain's totals do not match the graph's edges."""


def is_heap_ordered(totals: Sequence[Any]) -> bool:
    """
    Check the min-heap invariant on an array-backed binary heap.

    Parameters
    ----------
    totals:
        Keys in heap storage order; children of ``i`` live at ``2i+1`` and
        ``2i+2``.

    Returns
    -------
    bool
        True if every parent key is <= both of its children's keys.
    """
    n = len(totals)
    for child in range(1, n):
        if totals[child] < totals[(child - 1) // 2]:
            return False
    return True


def assert_heap_ordered(totals: Sequence[Any]) -> None:
    """
    Raise HeapInvariantError if ``totals`` is not a valid min-heap array.
    """
    for child in range(1, len(totals)):
        parent = (child - 1) // 2
        if totals[child] < totals[parent]:
            raise HeapInvariantError(
                f"Heap order violated: parent {parent} has total {totals[parent]!r} "
                f"but child {child} has total {totals[child]!r}"
            )


def _is_negative_or_nan(weight: Any) -> bool:
    if isinstance(weight, float) and math.isnan(weight):
        return True
    return weight < 0


def validate_graph(graph: "Graph") -> None:
    """
    Check the preconditions of the shortest-path engine on ``graph``.

    Checks that every edge weight is non-negative (and not NaN) and that
    every edge destination is a vertex of ``graph``.

    Raises
    ------
    GraphValidationError
        On the first negative weight or dangling destination found.
    """
    members = {id(vertex) for vertex in graph.vertices}
    for source, destination, weight in graph.edges():
        if _is_negative_or_nan(weight):
            raise GraphValidationError(
                f"Shortest-path search requires non-negative weights. "
                f"Found weight {weight!r} on edge {source!r} -> {destination!r}"
            )
        if id(destination) not in members:
            raise GraphValidationError(
                f"Edge {source!r} -> {destination!r} points outside the graph"
            )


def assert_vertex_in_graph(graph: "Graph", vertex: "Vertex", role: str = "vertex") -> None:
    """Raise GraphValidationError if ``vertex`` is not one of ``graph``'s vertices."""
    if vertex not in graph:
        raise GraphValidationError(f"{role.capitalize()} {vertex!r} is not in the graph")


def route_steps(
    path: Optional["Path"], source: "Vertex", forward: bool = False
) -> List[Tuple["Vertex", Any]]:
    """
    List ``(vertex, total)`` pairs from the source to the end of the route.

    Parameters
    ----------
    path:
        Chain to read. A backward chain (engine output) does not include the
        source; a forward chain (reverse_path output) starts with a
        zero-total source record.
    source:
        Vertex the route starts from.
    forward:
        Whether ``path`` is a forward chain.
    """
    records = []
    current = path
    while current is not None:
        records.append((current.destination, current.total))
        current = current.previous

    if forward:
        return records
    records.reverse()
    return [(source, 0)] + records


def _totals_match(expected: Any, actual: Any, atol: float, rtol: float) -> bool:
    if expected == actual:
        return True
    return math.isclose(float(expected), float(actual), rel_tol=rtol, abs_tol=atol)


def is_path_consistent(
    path: Optional["Path"],
    source: "Vertex",
    forward: bool = False,
    atol: float = 1e-9,
    rtol: float = 1e-9,
) -> bool:
    """Return True if every step's total grows by the weight of a matching edge."""
    try:
        assert_path_consistent(path, source, forward=forward, atol=atol, rtol=rtol)
    except PathInvariantError:
        return False
    return True


def assert_path_consistent(
    path: Optional["Path"],
    source: "Vertex",
    forward: bool = False,
    atol: float = 1e-9,
    rtol: float = 1e-9,
) -> None:
    """
    Check that each record's total equals its predecessor's total plus the
    weight of an edge between their destinations, down to zero at ``source``.

    Parameters
    ----------
    path:
        Chain to check (None is trivially consistent).
    source:
        Vertex the route starts from.
    forward:
        Whether ``path`` is a forward chain.
    atol:
        Absolute tolerance for float totals.
    rtol:
        Relative tolerance for float totals, so large totals that have lost
        low-order bits still match.

    Raises
    ------
    PathInvariantError
        On the first step without a matching edge.
    """
    if path is None:
        return

    steps = route_steps(path, source, forward=forward)
    start, start_total = steps[0]
    if start is not source or start_total != 0:
        raise PathInvariantError(
            f"Route must start at {source!r} with total 0, got {start!r} with total {start_total!r}"
        )

    for (u, u_total), (v, v_total) in zip(steps, steps[1:]):
        if not any(
            edge.destination is v and _totals_match(u_total + edge.weight, v_total, atol, rtol)
            for edge in u.edges
        ):
            raise PathInvariantError(
                f"No edge {u!r} -> {v!r} with weight {v_total - u_total!r} "
                f"(totals {u_total!r} -> {v_total!r})"
            )
