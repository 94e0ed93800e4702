"""
Renderer base class.

Renderers read a graph's nodes and edges and write them to a file. They
never mutate the graph.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path as FilePath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotpath.graph.model import DirectedGraph
    from dotpath.graph.path import Path


class GraphRenderer(ABC):
    """Abstract base class for graph renderers."""

    @property
    @abstractmethod
    def format(self) -> str:
        """Output format name (e.g., 'dot', 'png')."""
        ...

    @abstractmethod
    def render(
        self,
        graph: DirectedGraph,
        output_path: str | PathLike[str],
        path: Path | None = None,
    ) -> FilePath:
        """
        Render a graph to a file.

        Args:
            graph: Graph to render
            output_path: Destination file
            path: Optional search result to highlight

        Returns:
            The path of the written file

        Raises:
            OSError: If the file cannot be written
            UnsupportedFormatError: If the format cannot be produced here
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format!r})"
