"""
dotpath - a small directed-graph toolkit.

Parses DOT-like graph descriptions into an in-memory directed graph
and finds paths between named nodes with pluggable search strategies
(breadth-first, depth-first, bounded random walk).
"""

__version__ = "0.1.0"
