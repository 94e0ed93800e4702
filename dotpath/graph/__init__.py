"""
Graph data model.

Provides the in-memory directed graph and the Path value produced by searches:
- DirectedGraph: simple directed graph keyed by node label
- Path: ordered sequence of node labels
"""

from dotpath.graph.model import DirectedGraph
from dotpath.graph.path import Path, format_nodes, format_simple, paths_equal

__all__ = [
    "DirectedGraph",
    "Path",
    "format_simple",
    "format_nodes",
    "paths_equal",
]
