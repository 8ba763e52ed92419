"""
Configuration constants for the grid pathfinding visualizer.

All tunables live here.  Deployment-specific values are read from
environment variables - never hardcode secrets.
"""

import os
import secrets

# =============================================================================
# Grid Configuration
# =============================================================================

# Board size used for a fresh / cleared grid
GRID_ROWS = int(os.environ.get("GRID_ROWS", 30))
GRID_COLS = int(os.environ.get("GRID_COLS", 40))

# Wall density for the "random walls" button
DEFAULT_WALL_PROB = 0.25

# =============================================================================
# Search Configuration
# =============================================================================

DEFAULT_ALGORITHM = "bfs"
DEFAULT_HEURISTIC = "manhattan"

# Upper bound on expanded cells per search; unset means unlimited
_max_expanded = os.environ.get("MAX_EXPANDED_CELLS")
MAX_EXPANDED_CELLS = int(_max_expanded) if _max_expanded else None

# =============================================================================
# Playback Configuration
# =============================================================================

# Animation pacing hints for the browser (milliseconds per frame)
VISIT_DELAY_MS = 20
PATH_DELAY_MS = 50

# Seconds per visit frame; Stepper.delay_ms scales both delays above by this
SPEED_PRESETS = {
    "slow":   0.5,
    "medium": 0.1,
    "fast":   0.02,     # matches VISIT_DELAY_MS
    "turbo":  0.005,
}
DEFAULT_SPEED = "fast"

# =============================================================================
# Web Server Configuration
# =============================================================================

SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 5000))
DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
