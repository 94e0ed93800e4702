"""
Depth-first search - returns the first path found, not necessarily the shortest.
"""

from __future__ import annotations

import logging

from dotpath.graph.model import DirectedGraph
from dotpath.graph.path import Path
from dotpath.search.base import SearchStrategy

logger = logging.getLogger(__name__)


class DepthFirstSearch(SearchStrategy):
    """
    Recursive depth-first search with backtracking.

    One visited set and one working path are shared across the recursion;
    the path grows on the way down and shrinks on the way back up. The
    first branch that reaches the target wins, so the result depends on
    neighbour order.

    Recursion depth grows with the length of the explored branch, so very
    long chains are bounded by sys.getrecursionlimit().
    """

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Depth-first search (first path found)"

    def find(self, graph: DirectedGraph, source: str, target: str) -> Path | None:
        visited = {source}
        path = Path([source])

        if self._visit(graph, source, target, visited, path):
            logger.debug(f"DFS found path ({path.length} edges): {path}")
            return path

        logger.debug(f"DFS: no path from '{source}' to '{target}' ({len(visited)} nodes explored)")
        return None

    def _visit(
        self,
        graph: DirectedGraph,
        current: str,
        target: str,
        visited: set[str],
        path: Path,
    ) -> bool:
        """Extend path from current; True once it ends at target."""
        if current == target:
            return True

        for neighbor in graph.outgoing_neighbors(current):
            if neighbor in visited:
                continue

            visited.add(neighbor)
            path.append(neighbor)
            if self._visit(graph, neighbor, target, visited, path):
                return True
            path.pop()

        return False
