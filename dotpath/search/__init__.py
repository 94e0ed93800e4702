"""
Search module.

Provides path search strategies and the dispatcher that runs them:
- BreadthFirstSearch: Shortest path by edge count
- DepthFirstSearch: First path found, recursive backtracking
- RandomWalkSearch: Bounded, biased random walk
- find_path: Validates endpoints and runs the chosen strategy
"""

from __future__ import annotations

import logging

from dotpath.config import DEFAULT_ALGORITHM
from dotpath.errors import NodeNotFoundError, UnsupportedAlgorithmError
from dotpath.graph.model import DirectedGraph
from dotpath.graph.path import Path
from dotpath.search.base import Algorithm, SearchStrategy
from dotpath.search.bfs import BreadthFirstSearch
from dotpath.search.dfs import DepthFirstSearch
from dotpath.search.random_walk import RandomWalkConfig, RandomWalkSearch

__all__ = [
    "Algorithm",
    "SearchStrategy",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "RandomWalkSearch",
    "RandomWalkConfig",
    "get_strategy",
    "find_path",
]

logger = logging.getLogger(__name__)

_STRATEGIES: dict[Algorithm, type[SearchStrategy]] = {
    Algorithm.BFS: BreadthFirstSearch,
    Algorithm.DFS: DepthFirstSearch,
    Algorithm.RANDOM: RandomWalkSearch,
}


def _resolve(algorithm: Algorithm | str) -> Algorithm:
    if isinstance(algorithm, Algorithm):
        return algorithm
    if isinstance(algorithm, str):
        try:
            return Algorithm(algorithm.strip().lower())
        except ValueError:
            pass
    raise UnsupportedAlgorithmError(algorithm, [a.value for a in Algorithm])


def get_strategy(algorithm: Algorithm | str = DEFAULT_ALGORITHM, **kwargs) -> SearchStrategy:
    """
    Get a search strategy by algorithm.

    Args:
        algorithm: Algorithm member or its name (bfs, dfs, random)
        **kwargs: Passed to the strategy constructor (random: config, rng)

    Returns:
        Instantiated strategy

    Raises:
        UnsupportedAlgorithmError: If the algorithm is unknown
        TypeError: If kwargs do not fit the strategy constructor
    """
    choice = _resolve(algorithm)

    # Only the random walk takes arguments; the others reject any with TypeError
    return _STRATEGIES[choice](**kwargs)


def find_path(
    graph: DirectedGraph,
    source: str,
    target: str,
    algorithm: Algorithm | str | SearchStrategy = Algorithm.BFS,
    **kwargs,
) -> Path | None:
    """
    Find a path from source to target.

    Args:
        graph: Graph to search
        source: Start node label
        target: Destination node label
        algorithm: Algorithm member, its name, or a ready strategy instance
        **kwargs: Strategy constructor arguments (see get_strategy)

    Returns:
        Path from source to target, or None if target is unreachable.
        When source == target the one-node path [source] is returned
        without running any strategy.

    Raises:
        NodeNotFoundError: If source or target is not in the graph
        UnsupportedAlgorithmError: If the algorithm is unknown
        TypeError: If kwargs are given with a strategy instance or do not fit the strategy
    """
    if not graph.contains_node(source):
        raise NodeNotFoundError(source, role="Source node")
    if not graph.contains_node(target):
        raise NodeNotFoundError(target, role="Destination node")

    if isinstance(algorithm, SearchStrategy):
        if kwargs:
            raise TypeError(
                f"find_path() got strategy arguments {sorted(kwargs)} with a ready {algorithm.name} strategy"
            )
        strategy = algorithm
    else:
        strategy = get_strategy(algorithm, **kwargs)

    if source == target:
        return Path([source])

    logger.debug(f"Searching '{source}' -> '{target}' with {strategy.name}")
    path = strategy.find(graph, source, target)

    if path is None:
        logger.info(f"{strategy.name}: no path from '{source}' to '{target}'")
    else:
        logger.info(f"{strategy.name}: found path ({path.length} edges): {path}")
    return path
