"""Performance benchmarks for pathkit.

Compares the array-scan and binary-heap frontiers of the shortest-path
engine on random graphs of growing size.
"""
