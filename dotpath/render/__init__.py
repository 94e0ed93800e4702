"""
Rendering module.

Writes graphs to files:
- DotRenderer: DOT text that dotpath.parser reads back
- PlotlyRenderer: HTML, PNG or SVG drawings
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path as FilePath

from dotpath.config import SUPPORTED_RENDER_FORMATS
from dotpath.errors import UnsupportedFormatError
from dotpath.graph.model import DirectedGraph
from dotpath.graph.path import Path
from dotpath.render.base import GraphRenderer
from dotpath.render.dot import DotRenderer, to_dot
from dotpath.render.plotly_renderer import PlotlyRenderer

__all__ = [
    "GraphRenderer",
    "DotRenderer",
    "PlotlyRenderer",
    "to_dot",
    "get_renderer",
    "render_graph",
]


def get_renderer(fmt: str) -> GraphRenderer:
    """
    Get a renderer by format name.

    Args:
        fmt: Output format (dot, html, png, svg), case-insensitive

    Raises:
        UnsupportedFormatError: If the format is unknown
    """
    name = fmt.lower().lstrip(".")
    if name not in SUPPORTED_RENDER_FORMATS:
        raise UnsupportedFormatError(fmt, SUPPORTED_RENDER_FORMATS)
    if name == "dot":
        return DotRenderer()
    return PlotlyRenderer(name)


def render_graph(
    graph: DirectedGraph,
    output_path: str | PathLike[str],
    fmt: str | None = None,
    path: Path | None = None,
) -> FilePath:
    """
    Render a graph, inferring the format from the file suffix if not given.

    Raises:
        UnsupportedFormatError: If the format is unknown or cannot be inferred
        OSError: If the file cannot be written
    """
    if fmt is None:
        fmt = FilePath(output_path).suffix
        if not fmt:
            raise UnsupportedFormatError("(no file extension)", SUPPORTED_RENDER_FORMATS)
    return get_renderer(fmt).render(graph, output_path, path=path)
