#!/usr/bin/env python3
"""
dotpath CLI - Find a path between two nodes of a DOT-like graph file.

Usage:
    python scripts/find_path.py --start A --target D
    python scripts/find_path.py --graph data/example.dot --start A --target D --algorithm dfs
    python scripts/find_path.py --graph data/random_walk_demo.dot --start a --target c --algorithm random --seed 7
    python scripts/find_path.py --graph data/example.dot --start A --target D --render path.png

Without --graph the bundled data/example.dot is used. A --render file name
without a directory is written into output/.

Algorithms:
    bfs     - Breadth-first search, shortest path by edge count (default)
    dfs     - Depth-first search, first path found
    random  - Bounded random walk (see --max-steps, --backtrack-probability, --seed)

Render formats (from the --render file extension):
    .dot, .html, .png, .svg
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotpath.config import (  # noqa: E402 - must be after sys.path modification
    DATA_DIR,
    DEFAULT_ALGORITHM,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    OUTPUT_DIR,
    RANDOM_WALK_BACKTRACK_PROBABILITY,
    RANDOM_WALK_MAX_STEPS,
    RANDOM_WALK_SEED,
)
from dotpath.errors import GraphError  # noqa: E402
from dotpath.graph import format_nodes  # noqa: E402
from dotpath.parser import parse_file  # noqa: E402
from dotpath.render import render_graph  # noqa: E402
from dotpath.search import Algorithm, RandomWalkConfig, find_path, get_strategy  # noqa: E402


def resolve_output(target: Path) -> Path:
    """Place bare file names in OUTPUT_DIR; other paths are used as given."""
    if target.parent != Path("."):
        return target
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    return OUTPUT_DIR / target


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a path between two nodes of a graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--graph",
        type=Path,
        default=DATA_DIR / "example.dot",
        help="DOT-like graph description file (default: data/example.dot)",
    )
    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Start node label",
    )
    parser.add_argument(
        "--target",
        type=str,
        required=True,
        help="Destination node label",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=[a.value for a in Algorithm],
        help=f"Search algorithm (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=RANDOM_WALK_MAX_STEPS,
        help=f"Random walk step limit (default: {RANDOM_WALK_MAX_STEPS})",
    )
    parser.add_argument(
        "--backtrack-probability",
        type=float,
        default=RANDOM_WALK_BACKTRACK_PROBABILITY,
        help=f"Random walk backtrack probability (default: {RANDOM_WALK_BACKTRACK_PROBABILITY})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_WALK_SEED,
        help="Random walk seed for reproducible runs",
    )
    parser.add_argument(
        "--render",
        type=Path,
        default=None,
        help="Also render the graph (with the path highlighted) to this file; a bare file name is written to output/",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (includes the random walk trace)",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        graph = parse_file(args.graph)
    except OSError as e:
        print(f"Error: cannot read graph file: {e}", file=sys.stderr)
        return 2

    strategy_kwargs = {}
    if args.algorithm == Algorithm.RANDOM.value:
        try:
            strategy_kwargs["config"] = RandomWalkConfig(
                max_steps=args.max_steps,
                backtrack_probability=args.backtrack_probability,
                verbose=args.verbose,
                seed=args.seed,
            )
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
    strategy = get_strategy(args.algorithm, **strategy_kwargs)

    print("\n" + "=" * 60)
    print("dotpath")
    print("=" * 60)
    print(f"  Graph:     {args.graph} ({graph.node_count()} nodes, {graph.edge_count()} edges)")
    print(f"  Start:     {args.start}")
    print(f"  Target:    {args.target}")
    print(f"  Algorithm: {strategy.name} - {strategy.description}")
    print("=" * 60 + "\n")

    try:
        path = find_path(graph, args.start, args.target, strategy)
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if path is None:
        print(f"No path found from '{args.start}' to '{args.target}'")
    else:
        print(f"Path found ({path.length} edges): {path}")
        print(f"  {format_nodes(path)}")

    if args.render is not None:
        try:
            output = render_graph(graph, resolve_output(args.render), path=path)
        except (GraphError, OSError) as e:
            print(f"Error: cannot render graph: {e}", file=sys.stderr)
            return 2
        print(f"\nRendered graph to {output}")

    return 0 if path is not None else 1


if __name__ == "__main__":
    sys.exit(main())
