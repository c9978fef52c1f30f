"""Benchmark the array-scan and heap shortest-path engines."""

import time
from typing import Dict

import numpy as np

from pathkit.graphs import SearchStats, random_graph, shortest_path


def benchmark_shortest_path(
    n_vertices: int,
    edge_probability: float = 0.1,
    n_queries: int = 20,
    seed: int = 0,
) -> Dict[str, Dict[str, float]]:
    """Time both frontier strategies on the same random queries.

    Args:
        n_vertices: Number of vertices in the random graph.
        edge_probability: Probability of each directed edge.
        n_queries: Number of (source, destination) pairs to search.
        seed: Seed for graph and query generation.

    Returns:
        Mapping strategy -> timing and work counters.
    """
    rng = np.random.default_rng(seed)
    graph = random_graph(n_vertices, edge_probability=edge_probability, max_weight=100, rng=rng)
    pairs = rng.integers(0, n_vertices, size=(n_queries, 2))

    results = {}
    for strategy in ("array", "heap"):
        stats = SearchStats()
        extractions = 0
        start = time.perf_counter()
        for s, t in pairs:
            shortest_path(graph, graph.vertices[s], graph.vertices[t], frontier=strategy, stats=stats)
            extractions += stats.extractions
        end = time.perf_counter()

        total_time = end - start
        results[strategy] = {
            "n_vertices": n_vertices,
            "n_queries": n_queries,
            "total_time_sec": total_time,
            "time_per_query_sec": total_time / n_queries,
            "extractions_per_query": extractions / n_queries,
        }

    return results


if __name__ == "__main__":
    print("Benchmarking shortest-path engines...")

    for n in (50, 200, 800):
        results = benchmark_shortest_path(n_vertices=n, edge_probability=min(1.0, 8.0 / n))
        print(f"{n} vertices:")
        for strategy, r in results.items():
            print(
                f"  {strategy:>5}: {r['time_per_query_sec']*1e3:.3f} ms/query, "
                f"{r['extractions_per_query']:.1f} extractions/query"
            )
