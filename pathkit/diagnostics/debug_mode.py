"""Debug mode switch for pathkit.

Debug mode turns on the invariant checks of the shortest-path engine:
input validation before a search, a heap-order check after every frontier
mutation and a total check on the returned path. It is off by default and
read once from the ``PATHKIT_DEBUG`` environment variable at import time.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "PATHKIT_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")


def _flag_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """
    Return whether debug mode is currently on.

    Returns
    -------
    bool
        True if searches should check their invariants.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn debug mode on or off for the whole process.

    Parameters
    ----------
    enabled:
        New state of the switch.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reset_debug_enabled() -> bool:
    """Re-read PATHKIT_DEBUG, apply it and return the resulting state."""
    set_debug_enabled(_flag_from_env())
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily set debug mode, restoring the previous state on exit.

    Parameters
    ----------
    enabled:
        State of the switch inside the block.

    Example
    -------
    >>> with debug_context(True):
    ...     route = shortest_path_heap(graph, source, target)  # doctest: +SKIP
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
