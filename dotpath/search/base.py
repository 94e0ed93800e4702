"""
Search strategy base class and algorithm identifiers.

All strategies implement find() to look for a path between two nodes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotpath.graph.model import DirectedGraph
    from dotpath.graph.path import Path


class Algorithm(str, Enum):
    """Search algorithms selectable by name."""

    BFS = "bfs"
    DFS = "dfs"
    RANDOM = "random"


class SearchStrategy(ABC):
    """
    Abstract base class for path search strategies.

    Strategies receive a graph whose endpoints have already been validated
    and which differ from each other; find_path() in dotpath.search does
    that checking once for every strategy.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the strategy (e.g., 'bfs', 'dfs')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @abstractmethod
    def find(self, graph: DirectedGraph, source: str, target: str) -> Path | None:
        """
        Search for a path from source to target.

        Args:
            graph: Graph to search
            source: Label of the start node (exists in graph)
            target: Label of the destination node (exists in graph)

        Returns:
            Path starting at source and ending at target, or None if the
            search did not reach target
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
