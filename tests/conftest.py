"""Pytest configuration and shared fixtures for pathkit tests.

This module provides:
- A deterministic numpy RNG fixture
- A reset of debug mode around every test
- The four-city flight network used across the shortest-path tests
"""

import os
from types import SimpleNamespace

import numpy as np
import pytest

from pathkit.diagnostics import set_debug_enabled
from pathkit.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_off():
    """Run every test with debug mode off unless the test turns it on."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def cities():
    """SF, Denver, Chicago and NY with flight distances.

    The direct SF -> Chicago -> NY route costs 2900; the shortest route is
    SF -> Denver -> Chicago -> NY at 2700.
    """
    graph = Graph()
    sf = graph.add_vertex("SF")
    denver = graph.add_vertex("Denver")
    chicago = graph.add_vertex("Chicago")
    ny = graph.add_vertex("NY")

    graph.add_edge(sf, denver, 1000)
    graph.add_edge(sf, chicago, 2100)
    graph.add_edge(denver, chicago, 900)
    graph.add_edge(chicago, ny, 800)
    graph.add_edge(denver, ny, 1800)

    return SimpleNamespace(graph=graph, sf=sf, denver=denver, chicago=chicago, ny=ny)
