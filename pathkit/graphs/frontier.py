"""
Frontier strategies for the shortest-path engine.

The frontier holds the path records whose destinations have been discovered
but not yet settled. Both strategies share one contract (insert,
extract_minimum, is_empty, count) and differ only in cost:

- LinearFrontier: unordered list, O(1) insert, O(n) scan per extraction.
- PriorityFrontier: binary min-heap, O(log n) insert and extraction.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 6 (heaps) and 24.3 (Dijkstra).
"""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from .path import Path


class Frontier(ABC):
    """
    Interface for the set of candidate paths awaiting selection.

    Attributes:
        early_exit: True when extraction order is non-decreasing by total, so
            the engine may stop at the first extracted record that reaches the
            target.
    """

    early_exit: bool = False

    @abstractmethod
    def insert(self, path: Path) -> None:
        """Add a candidate path."""
        raise NotImplementedError

    @abstractmethod
    def extract_minimum(self) -> Optional[Path]:
        """Remove and return a minimum-total path, or None if empty."""
        raise NotImplementedError

    @abstractmethod
    def peek(self) -> Optional[Path]:
        """Return a minimum-total path without removing it, or None if empty."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @property
    def count(self) -> int:
        """Number of paths currently held."""
        return len(self)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    @abstractmethod
    def totals(self) -> List[Any]:
        """Return a copy of the held totals in storage order (for diagnostics)."""
        raise NotImplementedError


class LinearFrontier(Frontier):
    """
    Array-scan frontier.

    Extraction scans every entry and removes the first one with the smallest
    total, so ties go to the earliest entry in scan order.

    Complexity:
        - insert: O(1) amortized
        - extract_minimum / peek: O(n)
    """

    early_exit = False

    def __init__(self) -> None:
        self._paths: List[Path] = []

    def _index_of_minimum(self) -> int:
        best = 0
        for index in range(1, len(self._paths)):
            if self._paths[index].total < self._paths[best].total:
                best = index
        return best

    def insert(self, path: Path) -> None:
        self._paths.append(path)

    def extract_minimum(self) -> Optional[Path]:
        if not self._paths:
            return None
        return self._paths.pop(self._index_of_minimum())

    def peek(self) -> Optional[Path]:
        if not self._paths:
            return None
        return self._paths[self._index_of_minimum()]

    def __len__(self) -> int:
        return len(self._paths)

    def totals(self) -> List[Any]:
        return [path.total for path in self._paths]


class PriorityFrontier(Frontier):
    """
    Binary min-heap frontier keyed by path total.

    Entries are ``(total, sequence, path)`` tuples: the insertion sequence
    number breaks ties between equal totals (first inserted, first out) and
    keeps Path objects from ever being compared. ``heapq`` restores the heap
    invariant by sifting up on push and down on pop.

    Complexity:
        - insert: O(log n)
        - extract_minimum / replace_minimum: O(log n)
        - peek: O(1)
    """

    early_exit = True

    def __init__(self) -> None:
        self._heap: List[Tuple[Any, int, Path]] = []
        self._sequence = itertools.count()

    def insert(self, path: Path) -> None:
        heapq.heappush(self._heap, (path.total, next(self._sequence), path))

    def extract_minimum(self) -> Optional[Path]:
        if not self._heap:
            return None
        _, _, path = heapq.heappop(self._heap)
        return path

    def replace_minimum(self, path: Path) -> Optional[Path]:
        """
        Pop the minimum and insert ``path`` with a single sift-down.

        This is the heap's replace-root operation for callers driving a
        frontier by hand. The shortest-path engine does not use it, since it
        extracts before it knows how many records an expansion will insert.

        On an empty frontier this is a plain insert and returns None. The
        returned record may have a larger total than ``path``.
        """
        entry = (path.total, next(self._sequence), path)
        if not self._heap:
            heapq.heappush(self._heap, entry)
            return None
        _, _, smallest = heapq.heapreplace(self._heap, entry)
        return smallest

    def peek(self) -> Optional[Path]:
        if not self._heap:
            return None
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def totals(self) -> List[Any]:
        return [total for total, _, _ in self._heap]


_STRATEGIES = {
    "array": LinearFrontier,
    "linear": LinearFrontier,
    "heap": PriorityFrontier,
    "priority": PriorityFrontier,
}


def make_frontier(strategy: str | Frontier | None = None) -> Frontier:
    """
    Resolve a frontier strategy.

    Args:
        strategy: A Frontier instance (returned as is), one of ``"array"``,
            ``"linear"``, ``"heap"``, ``"priority"``, or None for the heap.

    Returns:
        A Frontier ready for one search.

    Raises:
        ValueError: If the strategy name is unknown.
    """
    if strategy is None:
        return PriorityFrontier()
    if isinstance(strategy, Frontier):
        return strategy
    try:
        return _STRATEGIES[strategy.lower()]()
    except (KeyError, AttributeError):
        available = ", ".join(sorted(_STRATEGIES))
        raise ValueError(f"Unknown frontier strategy {strategy!r}. Available: {available}") from None


__all__ = ["Frontier", "LinearFrontier", "PriorityFrontier", "make_frontier"]
