"""
Configuration constants for dotpath.

All paths, defaults, and tunable parameters are defined here.
Values that make sense to override per machine are read from the
environment (optionally via a project-root .env file).
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of dotpath/
PROJECT_ROOT = Path(__file__).parent.parent

# Sample graphs and snapshots
DATA_DIR = PROJECT_ROOT / "data"

# Rendered graphs and other generated files
OUTPUT_DIR = PROJECT_ROOT / "output"

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm used when the caller does not pick one
DEFAULT_ALGORITHM = "bfs"

# =============================================================================
# Random Walk Configuration
# =============================================================================

# Steps before the walk gives up
RANDOM_WALK_MAX_STEPS = 1000

# Chance of stepping back once the neighbourhood is well trodden
RANDOM_WALK_BACKTRACK_PROBABILITY = 0.3

# A neighbour visited more often than this counts as well trodden
RANDOM_WALK_VISIT_THRESHOLD = 2

# Chance of restricting the next hop to the least-visited half of the neighbours
RANDOM_WALK_LEAST_VISITED_BIAS = 0.7


def parse_seed(raw: str | None) -> int | None:
    """Integer seed from an environment value; unset or invalid gives None."""
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring DOTPATH_RANDOM_SEED={raw!r}: not an integer")
        return None


# Optional fixed seed (unset = fresh randomness on every run)
RANDOM_WALK_SEED = parse_seed(os.environ.get("DOTPATH_RANDOM_SEED"))

# =============================================================================
# Rendering Configuration
# =============================================================================

# Image size in pixels
RENDER_WIDTH = 700
RENDER_HEIGHT = 700

# Output formats understood by dotpath.render
SUPPORTED_RENDER_FORMATS = ("dot", "html", "png", "svg")

# Colours
NODE_COLOR = "#3498db"
EDGE_COLOR = "#95a5a6"
HIGHLIGHT_COLOR = "#e74c3c"

# Marker size for nodes
NODE_SIZE = 30

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
