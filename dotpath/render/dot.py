"""
DOT text renderer.

Writes the same one-statement-per-line layout that dotpath.parser reads.
A rendered file parses back to an equal graph as long as every statement
fits that grammar. Isolated nodes are the weak spot: a label containing
"=", "graph", an edge operator, a bracket or a brace, or starting with a
comment marker, is read back differently or dropped. Edges whose labels
contain an edge operator break the same way. to_dot logs a warning
naming any such statements.
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path as FilePath

from dotpath.graph.model import DirectedGraph
from dotpath.graph.path import Path
from dotpath.parser.dot import parse_lines
from dotpath.render.base import GraphRenderer

logger = logging.getLogger(__name__)


def _parses_back(statement: str, nodes: list[str], edges: list[tuple[str, str]]) -> bool:
    """Check that a single body statement parses to the expected nodes and edges."""
    content = parse_lines(["{", statement, "}"])
    return content.nodes == nodes and content.edges == edges


def lossy_statements(graph: DirectedGraph) -> list[str]:
    """Statements of to_dot(graph) that would not survive a parse."""
    lossy = []
    connected = set()
    for source, target in graph.edge_pairs():
        connected.update((source, target))
        expected = [source] if source == target else [source, target]
        if not _parses_back(f"{source} -> {target};", expected, [(source, target)]):
            lossy.append(f"{source} -> {target}")
    for node in sorted(graph.nodes() - connected):
        if not _parses_back(f"{node};", [node], []):
            lossy.append(node)
    return lossy


def to_dot(graph: DirectedGraph, path: Path | None = None, name: str = "G") -> str:
    """
    Build a DOT description of the graph.

    Edges along the optional path are marked with a colour attribute, which
    the parser strips again on the way back in.
    """
    lossy = lossy_statements(graph)
    if lossy:
        logger.warning(f"DOT output will not parse back losslessly for: {', '.join(lossy)}")

    highlighted = set(zip(path.nodes, path.nodes[1:])) if path is not None else set()

    lines = [f"digraph {name} {{"]
    lines.extend(f"    {node};" for node in sorted(graph.nodes()))
    for source, target in graph.edge_pairs():
        attributes = " [color=red]" if (source, target) in highlighted else ""
        lines.append(f"    {source} -> {target}{attributes};")
    lines.append("}")
    return "\n".join(lines) + "\n"


class DotRenderer(GraphRenderer):
    """Renders a graph as DOT text."""

    @property
    def format(self) -> str:
        return "dot"

    def render(
        self,
        graph: DirectedGraph,
        output_path: str | PathLike[str],
        path: Path | None = None,
    ) -> FilePath:
        output = FilePath(output_path)
        output.write_text(to_dot(graph, path), encoding="utf-8")
        logger.info(f"Wrote DOT graph to {output}")
        return output
