"""Smoke tests for example scripts."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_route_planning_example_runs() -> None:
    """examples/route_planning.py runs and prints the optimal route."""
    script = ROOT / "examples" / "route_planning.py"
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )
    assert "SF -> Denver -> Chicago -> NY (2700 miles)" in result.stdout
    assert "No route" in result.stdout


def test_benchmark_runs_small() -> None:
    """The benchmark helper returns counters for both strategies."""
    sys.path.insert(0, str(ROOT))
    try:
        from benchmarks.bench_shortest import benchmark_shortest_path
    finally:
        sys.path.remove(str(ROOT))

    results = benchmark_shortest_path(n_vertices=30, edge_probability=0.2, n_queries=5)
    assert set(results) == {"array", "heap"}
    assert results["heap"]["extractions_per_query"] >= 0
