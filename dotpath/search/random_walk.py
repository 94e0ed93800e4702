"""
Bounded random walk - a stochastic search that prefers unexplored ground.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass

from dotpath.config import (
    RANDOM_WALK_BACKTRACK_PROBABILITY,
    RANDOM_WALK_LEAST_VISITED_BIAS,
    RANDOM_WALK_MAX_STEPS,
    RANDOM_WALK_SEED,
    RANDOM_WALK_VISIT_THRESHOLD,
)
from dotpath.graph.model import DirectedGraph
from dotpath.graph.path import Path
from dotpath.search.base import SearchStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RandomWalkConfig:
    """
    Settings for a random walk.

    Attributes:
        max_steps: Steps (moves or backtracks) before giving up
        backtrack_probability: Chance of stepping back when a neighbour has
            been visited more than RANDOM_WALK_VISIT_THRESHOLD times
        verbose: Log every step at INFO instead of DEBUG
        seed: Seed for the walk's own random.Random (None = unseeded)
    """

    max_steps: int = RANDOM_WALK_MAX_STEPS
    backtrack_probability: float = RANDOM_WALK_BACKTRACK_PROBABILITY
    verbose: bool = False
    seed: int | None = RANDOM_WALK_SEED

    def __post_init__(self) -> None:
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {self.max_steps}")
        if not 0.0 <= self.backtrack_probability <= 1.0:
            raise ValueError(
                f"backtrack_probability must be in [0, 1], got {self.backtrack_probability}"
            )


class RandomWalkSearch(SearchStrategy):
    """
    Random walk biased toward the least-visited neighbours.

    Each step jumps straight to the target if it is adjacent, fails on a
    dead end, sometimes backtracks out of well-trodden areas, and otherwise
    moves to a random neighbour (usually one of the least visited). Gives
    up after max_steps. The result is a walk, so it may revisit nodes and
    is not a shortest path.
    """

    def __init__(
        self,
        config: RandomWalkConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the random walk.

        Args:
            config: Walk settings (defaults from dotpath.config)
            rng: Random source; overrides config.seed when given
        """
        self._config = config or RandomWalkConfig()
        self._rng = rng or random.Random(self._config.seed)

    @property
    def config(self) -> RandomWalkConfig:
        return self._config

    @property
    def name(self) -> str:
        return "random"

    @property
    def description(self) -> str:
        return f"Random walk (max {self._config.max_steps} steps)"

    def _trace(self, message: str) -> None:
        logger.log(logging.INFO if self._config.verbose else logging.DEBUG, message)

    def find(self, graph: DirectedGraph, source: str, target: str) -> Path | None:
        current = source
        path = Path([source])
        visits: Counter[str] = Counter({source: 1})

        for step in range(1, self._config.max_steps + 1):
            self._trace(f"Step {step}: visiting {path}")
            neighbors = graph.outgoing_neighbors(current)

            if target in neighbors:
                path.append(target)
                self._trace(f"Reached '{target}' after {step} steps: {path}")
                return path

            if not neighbors:
                self._trace(f"Dead end at '{current}'")
                return None

            if self._should_backtrack(neighbors, visits, path):
                dropped = path.pop()
                current = path.end
                self._trace(f"Backtracking from '{dropped}' to '{current}'")
                continue

            current = self._choose_next(neighbors, visits)
            path.append(current)
            visits[current] += 1

            if current == target:
                return path

        self._trace(f"Gave up after {self._config.max_steps} steps")
        return None

    def _should_backtrack(self, neighbors: list[str], visits: Counter[str], path: Path) -> bool:
        if len(path) <= 1:
            return False
        if not any(visits[n] > RANDOM_WALK_VISIT_THRESHOLD for n in neighbors):
            return False
        return self._rng.random() < self._config.backtrack_probability

    def _choose_next(self, neighbors: list[str], visits: Counter[str]) -> str:
        """Pick a neighbour, favouring the least-visited half."""
        ranked = sorted(neighbors, key=lambda n: visits[n])
        if self._rng.random() < RANDOM_WALK_LEAST_VISITED_BIAS:
            candidates = ranked[: max(1, len(ranked) // 2)]
        else:
            candidates = ranked
        return self._rng.choice(candidates)
