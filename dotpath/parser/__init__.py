"""
Parser module.

Reads DOT-like graph descriptions:
- parse_lines: raw lines -> GraphContent (nodes + edges)
- build_graph: GraphContent -> DirectedGraph
- parse_file / parse_string: convenience wrappers
"""

from dotpath.parser.dot import (
    GraphContent,
    build_graph,
    parse_file,
    parse_lines,
    parse_string,
)

__all__ = [
    "GraphContent",
    "parse_lines",
    "build_graph",
    "parse_file",
    "parse_string",
]
