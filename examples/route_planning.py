"""
Example: Route planning with pathkit

Builds a small flight network and compares the array-scan and heap
shortest-path engines on it, then prints the forward route.
"""

from pathkit import (
    Graph,
    SearchStats,
    path_values,
    reverse_path,
    shortest_path_array,
    shortest_path_heap,
)


def build_network():
    """Cities with flight distances in miles."""
    graph = Graph()
    sf = graph.add_vertex("SF")
    denver = graph.add_vertex("Denver")
    chicago = graph.add_vertex("Chicago")
    ny = graph.add_vertex("NY")
    graph.add_vertex("Honolulu")  # no flights

    graph.add_edge(sf, denver, 1000)
    graph.add_edge(sf, chicago, 2100)
    graph.add_edge(denver, chicago, 900)
    graph.add_edge(chicago, ny, 800)
    graph.add_edge(denver, ny, 1800)
    return graph


def main():
    graph = build_network()
    sf, ny, honolulu = graph.find("SF"), graph.find("NY"), graph.find("Honolulu")

    print("=" * 60)
    print("SF -> NY")
    print("=" * 60)
    for name, engine in (("array", shortest_path_array), ("heap", shortest_path_heap)):
        stats = SearchStats()
        path = engine(graph, sf, ny, stats=stats)
        route = reverse_path(path, sf)
        print(f"{name:>5}: {' -> '.join(path_values(route))} ({path.total} miles)")
        print(f"       {stats.insertions} insertions, {stats.extractions} extractions")
    print()

    print("SF -> Honolulu")
    if shortest_path_heap(graph, sf, honolulu) is None:
        print("No route")


if __name__ == "__main__":
    main()
