"""
Breadth-first search - returns a path with the fewest edges.
"""

from __future__ import annotations

import logging
from collections import deque

from dotpath.graph.model import DirectedGraph
from dotpath.graph.path import Path
from dotpath.search.base import SearchStrategy

logger = logging.getLogger(__name__)


class BreadthFirstSearch(SearchStrategy):
    """
    Frontier-by-frontier search over whole partial paths.

    The queue holds path snapshots rather than bare nodes, so the answer is
    available as soon as the target shows up among a node's neighbours,
    without waiting for it to be dequeued. Every path in the queue is at
    most one edge longer than the one being expanded, so the first hit is
    a shortest path.
    """

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first search (fewest edges)"

    def find(self, graph: DirectedGraph, source: str, target: str) -> Path | None:
        visited = {source}
        queue = deque([Path([source])])

        while queue:
            path = queue.popleft()

            for neighbor in graph.outgoing_neighbors(path.end):
                if neighbor == target:
                    found = path.copy()
                    found.append(target)
                    logger.debug(f"BFS found path ({found.length} edges): {found}")
                    return found

                if neighbor in visited:
                    continue

                visited.add(neighbor)
                extended = path.copy()
                extended.append(neighbor)
                queue.append(extended)

        logger.debug(f"BFS: no path from '{source}' to '{target}' ({len(visited)} nodes explored)")
        return None
