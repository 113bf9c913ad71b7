"""Performance benchmarks for Graph Conduit.

This package contains microbenchmarks for the hot paths in the library:
heap-based shortest paths, dense all-pairs relaxation and spanning trees.
"""
