"""
Image and HTML renderer built on plotly.

Nodes are placed evenly on a circle, edges are drawn as arrows, and an
optional search result is highlighted. HTML output needs only plotly;
PNG and SVG export go through kaleido.
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path as FilePath

import numpy as np
import plotly.graph_objects as go

from dotpath.config import (
    EDGE_COLOR,
    HIGHLIGHT_COLOR,
    NODE_COLOR,
    NODE_SIZE,
    RENDER_HEIGHT,
    RENDER_WIDTH,
)
from dotpath.errors import UnsupportedFormatError
from dotpath.graph.model import DirectedGraph
from dotpath.graph.path import Path
from dotpath.render.base import GraphRenderer

logger = logging.getLogger(__name__)

IMAGE_FORMATS = ("html", "png", "svg")


def circular_layout(labels: list[str]) -> dict[str, tuple[float, float]]:
    """Place labels evenly on the unit circle, starting at the top."""
    if not labels:
        return {}
    if len(labels) == 1:
        return {labels[0]: (0.0, 0.0)}

    angles = np.pi / 2 - np.linspace(0, 2 * np.pi, num=len(labels), endpoint=False)
    xs = np.round(np.cos(angles), 6)
    ys = np.round(np.sin(angles), 6)
    return {
        label: (float(x), float(y))
        for label, x, y in zip(labels, xs, ys, strict=True)
    }


def build_figure(
    graph: DirectedGraph,
    path: Path | None = None,
    width: int = RENDER_WIDTH,
    height: int = RENDER_HEIGHT,
) -> go.Figure:
    """Build a plotly figure for the graph."""
    labels = sorted(graph.nodes())
    positions = circular_layout(labels)
    on_path = set(path.nodes) if path is not None else set()
    path_edges = set(zip(path.nodes, path.nodes[1:])) if path is not None else set()

    fig = go.Figure()

    for source, target in graph.edge_pairs():
        x0, y0 = positions[source]
        x1, y1 = positions[target]
        highlighted = (source, target) in path_edges
        fig.add_annotation(
            x=x1,
            y=y1,
            ax=x0,
            ay=y0,
            xref="x",
            yref="y",
            axref="x",
            ayref="y",
            showarrow=True,
            arrowhead=2,
            arrowsize=1.2,
            arrowwidth=3 if highlighted else 1.5,
            arrowcolor=HIGHLIGHT_COLOR if highlighted else EDGE_COLOR,
            standoff=NODE_SIZE / 2,
            startstandoff=NODE_SIZE / 2,
        )

    colors = [HIGHLIGHT_COLOR if label in on_path else NODE_COLOR for label in labels]
    fig.add_trace(go.Scatter(
        x=[positions[label][0] for label in labels],
        y=[positions[label][1] for label in labels],
        mode="markers+text",
        text=labels,
        textposition="middle center",
        textfont=dict(color="white", size=12),
        marker=dict(size=NODE_SIZE, color=colors, line=dict(width=1, color="#2c3e50")),
        hovertemplate="<b>%{text}</b><extra></extra>",
    ))

    title = f"{graph.node_count()} nodes, {graph.edge_count()} edges"
    if path is not None and not path.is_empty():
        title += f" | path: {path}"

    fig.update_layout(
        title=title,
        showlegend=False,
        width=width,
        height=height,
        plot_bgcolor="white",
        margin=dict(t=50, b=20, l=20, r=20),
    )
    fig.update_xaxes(visible=False, range=[-1.3, 1.3])
    fig.update_yaxes(visible=False, range=[-1.3, 1.3], scaleanchor="x")
    return fig


class PlotlyRenderer(GraphRenderer):
    """Renders a graph as an HTML page or a PNG/SVG image."""

    def __init__(self, fmt: str = "png", width: int = RENDER_WIDTH, height: int = RENDER_HEIGHT) -> None:
        """
        Initialize the renderer.

        Args:
            fmt: One of 'html', 'png', 'svg'
            width: Figure width in pixels
            height: Figure height in pixels

        Raises:
            UnsupportedFormatError: If fmt is not an image format
        """
        fmt = fmt.lower()
        if fmt not in IMAGE_FORMATS:
            raise UnsupportedFormatError(fmt, IMAGE_FORMATS)
        self._format = fmt
        self._width = width
        self._height = height

    @property
    def format(self) -> str:
        return self._format

    def render(
        self,
        graph: DirectedGraph,
        output_path: str | PathLike[str],
        path: Path | None = None,
    ) -> FilePath:
        output = FilePath(output_path)
        fig = build_figure(graph, path, width=self._width, height=self._height)

        if self._format == "html":
            fig.write_html(str(output), include_plotlyjs="cdn")
        else:
            try:
                fig.write_image(str(output), format=self._format)
            except (RuntimeError, ValueError) as e:
                # plotly signals a missing or unusable kaleido this way
                raise UnsupportedFormatError(
                    self._format,
                    ("html",),
                    hint=f"image export unavailable, install dotpath[images]: {e}",
                ) from e

        logger.info(f"Wrote {self._format.upper()} graph to {output}")
        return output
