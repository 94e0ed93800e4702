#!/usr/bin/env python3
"""
Random walk demo - run several random walks and collect the distinct paths.

Usage:
    python scripts/random_walk_demo.py --start a --target c
    python scripts/random_walk_demo.py --graph data/random_walk_demo.dot --start a --target h --attempts 20

Each attempt uses its own seed (base seed + attempt number), so a run with
the same --seed is reproducible.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotpath.config import DATA_DIR, LOG_DATEFMT, LOG_FORMAT  # noqa: E402
from dotpath.errors import GraphError  # noqa: E402
from dotpath.graph import format_simple  # noqa: E402
from dotpath.parser import parse_file  # noqa: E402
from dotpath.search import RandomWalkConfig, RandomWalkSearch, find_path  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run repeated random walks between two nodes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--graph",
        type=Path,
        default=DATA_DIR / "random_walk_demo.dot",
        help="Graph description file (default: data/random_walk_demo.dot)",
    )
    parser.add_argument("--start", type=str, required=True, help="Start node label")
    parser.add_argument("--target", type=str, required=True, help="Destination node label")
    parser.add_argument(
        "--attempts",
        type=int,
        default=10,
        help="Maximum number of walks (default: 10)",
    )
    parser.add_argument(
        "--min-attempts",
        type=int,
        default=5,
        help="Walks to run before stopping early (default: 5)",
    )
    parser.add_argument(
        "--min-distinct",
        type=int,
        default=2,
        help="Stop early once this many distinct paths were found (default: 2)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Base seed (default: current time)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every walk step")
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        graph = parse_file(args.graph)
    except OSError as e:
        print(f"Error: cannot read graph file: {e}", file=sys.stderr)
        return 2

    base_seed = args.seed if args.seed is not None else time.time_ns()
    distinct = []

    print(f"Random walks from '{args.start}' to '{args.target}':\n")
    for attempt in range(1, args.attempts + 1):
        walk = RandomWalkSearch(RandomWalkConfig(verbose=args.verbose, seed=base_seed + attempt))
        try:
            path = find_path(graph, args.start, args.target, walk)
        except GraphError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

        if path is None:
            print(f"  Attempt {attempt}: (no path found: dead end or step limit)")
        else:
            print(f"  Attempt {attempt}: {format_simple(path)} (target node!)")
            if path not in distinct:
                distinct.append(path)

        if len(distinct) >= args.min_distinct and attempt >= args.min_attempts:
            break

    print("\nRandom Walk Summary:")
    print(f"Found {len(distinct)} different successful paths")
    for i, path in enumerate(distinct, 1):
        print(f"  {i}. {format_simple(path)}")

    return 0 if distinct else 1


if __name__ == "__main__":
    sys.exit(main())
