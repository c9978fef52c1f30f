"""
Path records and path reconstruction.

A Path record is one link of a route: it knows where the route ends
(``destination``), what it has cost so far (``total``) and the record it
extends (``previous``). The shortest-path engine produces chains that point
backward, from the destination toward the source; :func:`reverse_path`
turns such a chain into a forward one that starts at the source.

Example:
    >>> from pathkit.graphs import Graph, shortest_path_heap, reverse_path, path_values
    >>> g = Graph.from_edges([("A", "B", 1), ("B", "C", 2)])
    >>> a, c = g.find("A"), g.find("C")
    >>> route = reverse_path(shortest_path_heap(g, a, c), a)
    >>> path_values(route)
    ['A', 'B', 'C']
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from .core import Vertex


@dataclass(frozen=True, eq=False)
class Path:
    """
    Immutable route record.

    Attributes:
        total: Cumulative cost from the source to ``destination``.
        destination: Vertex this route reaches.
        previous: Record this one extends. Before reversal it points toward
            the source; after reversal it points toward the destination.
            None marks the end of a chain.
    """

    total: Any
    destination: Vertex
    previous: Optional["Path"] = None

    def __iter__(self) -> Iterator["Path"]:
        return iter_path(self)

    def __len__(self) -> int:
        return sum(1 for _ in iter_path(self))

    def __repr__(self) -> str:
        return f"Path(total={self.total!r}, destination={self.destination!r})"


class StartPath(Path):
    """Zero-total head that reverse_path puts in front of a forward chain."""

    def __repr__(self) -> str:
        return f"StartPath(destination={self.destination!r})"


def iter_path(path: Optional[Path]) -> Iterator[Path]:
    """Yield ``path`` and every record reachable through ``previous`` links."""
    current = path
    while current is not None:
        yield current
        current = current.previous


def path_vertices(path: Optional[Path]) -> List[Vertex]:
    """Return the destinations along a chain, in link order."""
    return [record.destination for record in iter_path(path)]


def path_values(path: Optional[Path]) -> List[Any]:
    """Return the payloads of the destinations along a chain, in link order."""
    return [record.destination.value for record in iter_path(path)]


def reverse_path(path: Optional[Path], source: Vertex) -> Optional[Path]:
    """
    Turn a backward chain into a forward chain starting at ``source``.

    The chain is walked once with the usual current/previous/next pointers
    of singly linked list reversal. Each step emits a copy of the current
    record linked to the copy emitted before it, so the original chain is
    left untouched; search results share prefixes and must stay valid.
    A StartPath (zero total) for ``source`` is prepended as the new head.

    Totals keep their meaning (cost from the source), so they increase
    along the forward chain.

    A chain that already begins with a StartPath is a forward chain made by
    an earlier call. Its StartPath is dropped and no new one is added, so
    reversing twice gives back the original backward chain; ``source`` is
    not used in that case.

    Args:
        path: Backward chain as returned by the shortest-path engine, a
            forward chain from reverse_path, or None.
        source: Vertex the search started from.

    Returns:
        Forward chain headed by a StartPath for ``source``, the backward
        chain when ``path`` was a forward chain, or None when ``path`` is
        None (unreachable target).

    Complexity: O(path length).

    Example:
        >>> from pathkit.graphs import Graph
        >>> g = Graph.from_edges([("A", "B", 3)])
        >>> a, b = g.find("A"), g.find("B")
        >>> forward = reverse_path(Path(3, b), a)
        >>> [(r.destination.value, r.total) for r in forward]
        [('A', 0), ('B', 3)]
        >>> [(r.destination.value, r.total) for r in reverse_path(forward, b)]
        [('B', 3)]
    """
    if path is None:
        return None

    undo = isinstance(path, StartPath)
    current: Optional[Path] = path.previous if undo else path
    reversed_head: Optional[Path] = None

    while current is not None:
        next_record = current.previous
        reversed_head = Path(current.total, current.destination, reversed_head)
        current = next_record

    if undo:
        return reversed_head
    return StartPath(0, source, reversed_head)


__all__ = ["Path", "StartPath", "iter_path", "path_vertices", "path_values", "reverse_path"]
