"""
Single-source shortest paths (Dijkstra) over a pluggable frontier.

One engine implements the greedy frontier expansion; the frontier strategy
decides its cost:

- shortest_path_array: LinearFrontier, O(V) scan per selection, O(V^2) to
  O(V*E) overall. Runs until the frontier is empty, then scans every
  finalized record for the cheapest one reaching the target.
- shortest_path_heap: PriorityFrontier, O((V+E) log V). Because a heap
  hands records out in non-decreasing total order, the first extracted
  record that reaches the target is optimal and the search stops there.

Edge weights must be non-negative. Unreachable targets are not an error:
the engines return None.

References:
    - Dijkstra, E. W. "A note on two problems in connexion with graphs" (1959).
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import List, Optional, Set

from ..diagnostics import (
    assert_heap_ordered,
    assert_path_consistent,
    assert_vertex_in_graph,
    is_debug_enabled,
    validate_graph,
)
from ..logging import get_logger
from .core import Graph, Vertex
from .frontier import Frontier, LinearFrontier, PriorityFrontier, make_frontier
from .path import Path

logger = get_logger(__name__)


@dataclass
class SearchStats:
    """
    Work counters for one search.

    Attributes:
        strategy: Name of the frontier class used.
        insertions: Path records inserted into the frontier.
        extractions: Records removed from the frontier.
        stale: Extracted records skipped because their destination was
            already settled by a cheaper record.
        finalized: Records retired into the finalized collection.
        scanned: Finalized records examined while resolving the target.
        early_exit: Whether the search stopped at the first extraction
            reaching the target.
    """

    strategy: str = ""
    insertions: int = 0
    extractions: int = 0
    stale: int = 0
    finalized: int = 0
    scanned: int = 0
    early_exit: bool = False

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)


def _check_frontier(frontier: Frontier) -> None:
    if isinstance(frontier, PriorityFrontier):
        assert_heap_ordered(frontier.totals())


def _insert(frontier: Frontier, path: Path, stats: SearchStats, debug: bool) -> None:
    frontier.insert(path)
    stats.insertions += 1
    if debug:
        _check_frontier(frontier)


def shortest_path(
    graph: Graph,
    source: Vertex,
    destination: Vertex,
    frontier: str | Frontier | None = None,
    stats: Optional[SearchStats] = None,
) -> Optional[Path]:
    """
    Find a minimum-total path from ``source`` to ``destination``.

    State machine: seed the frontier with one record per outgoing edge of
    ``source``; repeatedly select the cheapest record, expand its
    destination's edges into new records and retire it; finally resolve the
    target. Vertices are settled the first time a record reaching them is
    selected, and later records for a settled vertex are dropped, so the
    loop terminates on cyclic graphs.

    Args:
        graph: Graph containing both endpoints, with non-negative weights.
        source: Start vertex.
        destination: Target vertex. Searching from a vertex to itself is not
            special-cased and returns None.
        frontier: Strategy name (``"array"``, ``"linear"``, ``"heap"``,
            ``"priority"``) or an empty Frontier instance. Defaults to the heap.
        stats: Optional SearchStats, reset and filled in by the search.

    Returns:
        Backward-linked Path ending at ``destination`` (its ``previous``
        chain leads toward, but does not include, ``source``), or None if
        ``destination`` is unreachable. Pass it to reverse_path for the
        forward route.

    Raises:
        ValueError: If ``frontier`` is an unknown name or a non-empty Frontier.
        GraphValidationError: In debug mode, on negative weights, dangling
            edges or endpoints outside ``graph``.

    Example:
        >>> g = Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])
        >>> shortest_path(g, g.find("A"), g.find("C"), frontier="array").total
        3
    """
    frontier = make_frontier(frontier)
    if not frontier.is_empty:
        raise ValueError("Frontier must be empty at the start of a search")

    if stats is None:
        stats = SearchStats()
    else:
        stats.reset()
    stats.strategy = type(frontier).__name__

    debug = is_debug_enabled()
    if debug:
        validate_graph(graph)
        assert_vertex_in_graph(graph, source, "source")
        assert_vertex_in_graph(graph, destination, "destination")

    if destination is source:
        logger.debug("Source and destination are the same vertex %r; it is never searched for", source)

    logger.debug(
        "Searching %r -> %r with %s over %d vertices",
        source, destination, stats.strategy, len(graph),
    )

    settled: Set[Vertex] = {source}
    finalized: List[Path] = []

    # Seed
    for edge in source.edges:
        _insert(frontier, Path(edge.weight, edge.destination), stats, debug)

    while not frontier.is_empty:
        # Select
        best = frontier.extract_minimum()
        stats.extractions += 1
        if debug:
            _check_frontier(frontier)

        reached = best.destination
        if reached in settled:
            stats.stale += 1
            continue
        settled.add(reached)

        if frontier.early_exit and reached is destination:
            finalized.append(best)
            stats.finalized += 1
            stats.early_exit = True
            return _finish(best, source, destination, stats, debug)

        # Expand
        for edge in reached.edges:
            if edge.destination in settled:
                continue
            _insert(frontier, Path(best.total + edge.weight, edge.destination, best), stats, debug)

        # Retire
        finalized.append(best)
        stats.finalized += 1

    # Resolve
    result: Optional[Path] = None
    for path in finalized:
        stats.scanned += 1
        if path.destination is destination and (result is None or path.total < result.total):
            result = path

    return _finish(result, source, destination, stats, debug)


def _finish(
    result: Optional[Path],
    source: Vertex,
    destination: Vertex,
    stats: SearchStats,
    debug: bool,
) -> Optional[Path]:
    if result is None:
        logger.debug(
            "No path %r -> %r after %d extractions", source, destination, stats.extractions
        )
        return None

    if debug:
        assert_path_consistent(result, source)

    logger.debug(
        "Path %r -> %r total=%r (%d insertions, %d extractions, %d stale)",
        source, destination, result.total,
        stats.insertions, stats.extractions, stats.stale,
    )
    return result


def shortest_path_array(
    graph: Graph,
    source: Vertex,
    destination: Vertex,
    stats: Optional[SearchStats] = None,
) -> Optional[Path]:
    """
    Shortest path using the array-scan frontier.

    Complexity: O(V^2) to O(V*E) depending on density.

    Example:
        >>> g = Graph.from_edges([("A", "B", 2), ("A", "C", 7), ("B", "C", 3)])
        >>> shortest_path_array(g, g.find("A"), g.find("C")).total
        5
    """
    return shortest_path(graph, source, destination, frontier=LinearFrontier(), stats=stats)


def shortest_path_heap(
    graph: Graph,
    source: Vertex,
    destination: Vertex,
    stats: Optional[SearchStats] = None,
) -> Optional[Path]:
    """
    Shortest path using the binary-heap frontier, stopping at the first
    extraction that reaches ``destination``.

    Complexity: O((V + E) log V).

    Example:
        >>> g = Graph.from_edges([("A", "B", 2), ("A", "C", 7), ("B", "C", 3)])
        >>> shortest_path_heap(g, g.find("A"), g.find("C")).total
        5
    """
    return shortest_path(graph, source, destination, frontier=PriorityFrontier(), stats=stats)


__all__ = ["SearchStats", "shortest_path", "shortest_path_array", "shortest_path_heap"]
