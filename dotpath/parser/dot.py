"""
Lightweight line-oriented parser for DOT-like graph descriptions.

Only what is needed to pull out nodes and edges is understood:

    digraph G {
        A;
        B [style];
        A -> B;
        B -> C [color=red];
    }

One statement per line. Comments (// or #) and blank lines are skipped,
and lines outside the braces are ignored. Any non-edge line containing
"=" is metadata, which includes node statements such as
`C [shape=box];`. Graph and subgraph headers are metadata too. Nothing
here raises a syntax error: lines that do not fit are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

from dotpath.graph.model import DirectedGraph

logger = logging.getLogger(__name__)

EDGE_OPERATORS = ("->", "--")
METADATA_MARKERS = ("=", "subgraph", "graph", "digraph")
COMMENT_PREFIXES = ("//", "#")


@dataclass
class GraphContent:
    """
    Nodes and edges extracted from a graph description.

    Attributes:
        nodes: Node labels in order of first appearance, without duplicates
        edges: (source, target) pairs in order of appearance, duplicates kept
    """

    nodes: list[str] = field(default_factory=list)
    edges: list[tuple[str, str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._seen: set[str] = set(self.nodes)

    def add_node(self, label: str) -> None:
        """Record a node unless it has been seen already."""
        if label not in self._seen:
            self._seen.add(label)
            self.nodes.append(label)


def _strip_attributes(token: str) -> str:
    """Drop a trailing [...] attribute block."""
    bracket = token.find("[")
    if bracket != -1:
        token = token[:bracket]
    return token.strip()


def _strip_semicolon(token: str) -> str:
    if token.endswith(";"):
        token = token[:-1]
    return token.strip()


def parse_edge(line: str) -> tuple[str, str] | None:
    """
    Parse an edge statement such as 'A -> B [label=x];'.

    '->' wins over '--' when both appear. Returns None when either
    operand is empty after cleanup.
    """
    operator = "->" if "->" in line else "--"
    parts = line.split(operator)
    if len(parts) < 2:
        return None

    source = _strip_attributes(parts[0].strip())
    target = _strip_semicolon(_strip_attributes(parts[1].strip()))

    if not source or not target:
        logger.debug(f"Skipping malformed edge line: {line!r}")
        return None
    return source, target


def parse_node(line: str) -> str:
    """Parse a bare node statement such as 'A [style];'."""
    return _strip_semicolon(_strip_attributes(line))


def is_metadata(line: str) -> bool:
    """Attribute assignments and graph/subgraph headers carry no nodes."""
    return any(marker in line for marker in METADATA_MARKERS)


def parse_lines(lines: Iterable[str]) -> GraphContent:
    """
    Extract nodes and edges from the lines of a graph description.

    Args:
        lines: Raw text lines (trailing newlines are fine)

    Returns:
        GraphContent with nodes in discovery order and edges as encountered
    """
    content = GraphContent()
    in_body = False

    for raw in lines:
        line = raw.strip()

        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        # Brace lines open/close the body and carry no statements themselves
        if "{" in line:
            in_body = True
            continue
        if "}" in line:
            in_body = False
            continue

        if not in_body:
            continue

        if any(op in line for op in EDGE_OPERATORS):
            edge = parse_edge(line)
            if edge is not None:
                content.edges.append(edge)
                content.add_node(edge[0])
                content.add_node(edge[1])
        elif not is_metadata(line):
            node = parse_node(line)
            if node:
                content.add_node(node)

    logger.debug(f"Parsed {len(content.nodes)} nodes and {len(content.edges)} edge statements")
    return content


def build_graph(content: GraphContent) -> DirectedGraph:
    """Create a graph from parsed content: nodes first, then edges."""
    graph = DirectedGraph()
    graph.add_nodes(content.nodes)
    for source, target in content.edges:
        graph.add_edge(source, target)
    return graph


def parse_string(text: str) -> DirectedGraph:
    """Parse an in-memory graph description."""
    return build_graph(parse_lines(text.splitlines()))


def parse_file(filepath: str | PathLike[str]) -> DirectedGraph:
    """
    Parse a graph description file.

    Raises:
        OSError: If the file cannot be read (e.g. FileNotFoundError)
    """
    logger.info(f"Loading graph from {filepath}...")
    with open(filepath, encoding="utf-8") as f:
        graph = build_graph(parse_lines(f))
    logger.info(f"Loaded graph with {graph.node_count()} nodes and {graph.edge_count()} edges")
    return graph
