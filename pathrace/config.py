"""
Configuration constants for the Pathfinding Race project.

All tunable parameters are defined here. A few can be overridden with
environment variables (optionally from a .env file in the project root).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathrace/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Search Configuration
# =============================================================================

# A* heuristic: euclidean distance between node positions divided by this.
# Generated edges weigh at least 1 per 20 distance units, so h stays admissible.
HEURISTIC_SCALE = 20

# =============================================================================
# Graph Generation Configuration
# =============================================================================

# Canvas the generated node positions live on
CANVAS_WIDTH = 750
CANVAS_HEIGHT = 550

# Padding kept between nodes and the canvas border
CANVAS_PADDING = 50

# Minimum distance between two random nodes, and tries before giving up
MIN_NODE_DISTANCE = 60
MAX_PLACEMENT_ATTEMPTS = 100

# Default number of nodes and edge probability for random graphs
DEFAULT_NODE_COUNT = 15
DEFAULT_EDGE_DENSITY = 0.3

# Edge weight = floor(distance / WEIGHT_UNIT) + 1, capped at MAX_EDGE_WEIGHT.
# The cap covers the padded canvas diagonal, so it never undercuts the heuristic.
WEIGHT_UNIT = 20
MAX_EDGE_WEIGHT = 40

# Grid graphs draw weights uniformly from 1..MAX_GRID_WEIGHT
MAX_GRID_WEIGHT = 10

# Seed for generated graphs (None = fresh entropy each run)
_seed = os.environ.get("PATHRACE_SEED")
RANDOM_SEED = int(_seed) if _seed else None

# =============================================================================
# Race Configuration
# =============================================================================

# Strategies raced when none are given
DEFAULT_LEFT_STRATEGY = "dijkstra"
DEFAULT_RIGHT_STRATEGY = "bfs"

# Replay speed in milliseconds per frame
DEFAULT_REPLAY_SPEED_MS = 500

# =============================================================================
# Visualization Configuration
# =============================================================================

NODE_MARKER_SIZE = 18
PATH_LINE_WIDTH = 5
EDGE_LINE_WIDTH = 1

COLOR_START = "#4CAF50"
COLOR_END = "#F44336"
COLOR_CURRENT = "#FFC107"
COLOR_VISITED = "#2196F3"
COLOR_UNVISITED = "#e0e0e0"
COLOR_PATH = "#2196F3"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
