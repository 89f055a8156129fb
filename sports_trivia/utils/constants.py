"""
Game constants, stat thresholds, and path configuration.
"""

import os
from pathlib import Path
from typing import Dict


# === Directory and File Path Configuration ===
def _find_project_root() -> Path:
    """Find the project root directory.

    Searches for SPORTS_TRIVIA_DIR env var, then .project_root marker,
    then falls back to the directory containing the package.
    """
    env_base = os.environ.get("SPORTS_TRIVIA_DIR")
    if env_base:
        path = Path(env_base).expanduser()
        if path.exists():
            return path

    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        marker = parent / ".project_root"
        if marker.exists():
            return parent

    return Path(__file__).resolve().parent.parent.parent


def _find_data_dir(base_dir: Path) -> Path:
    """CSV data directory.

    Uses the SPORTS_TRIVIA_DATA_DIR env var when set (relative paths are
    taken from the project root), otherwise the bundled samples.
    """
    env_data = os.environ.get("SPORTS_TRIVIA_DATA_DIR")
    if env_data:
        path = Path(env_data).expanduser()
        return path if path.is_absolute() else base_dir / path
    return PACKAGE_DIR / "data"


PACKAGE_DIR = Path(__file__).resolve().parent.parent
BASE_DIR = _find_project_root()
DATA_DIR = _find_data_dir(BASE_DIR)

# === GUESS GAME ===
MAX_GUESSES = 8
TEAM_HINT_THRESHOLD = 4
INITIAL_HINT_THRESHOLD = 6

# Seconds of input quiet time before the selector runs its filter
DEBOUNCE_DELAY = 0.3
MAX_RESULTS = 50

# Absolute difference that still counts as "close", per displayed stat
MLB_THRESHOLDS: Dict[str, float] = {
    'Age': 3,
    'Runs': 10,
    'SB': 5,
    'HR': 5,
    'OPS': 0.050,
}

NFL_THRESHOLDS: Dict[str, float] = {
    'Age': 3,
    'Rec Yds': 100,
    'Rush Yds': 100,
    'TDs': 3,
}

NBA_THRESHOLDS: Dict[str, float] = {
    'Age': 3,
    'PTS': 3.0,
    'REB': 2.0,
    'AST': 2.0,
}

# === COMPARISON GAME ===
COMPARISON_QUESTIONS = 10

# === MLB STATS API ===
MLB_STATS_API_BASE = "https://statsapi.mlb.com/api/v1"
MLB_SEASON = 2025
USER_AGENT = "Mozilla/5.0 (compatible; SportsTrivia/1.0)"
REQUEST_TIMEOUT = 15  # seconds per HTTP request

# Enrichment batching: requests per batch and pause between batches
BATCH_SIZE = 5
BATCH_PAUSE = 0.1
MIN_ACTIVE_PLAYERS = 10
MIN_AT_BATS = 10
LOAD_TIMEOUT = 120.0  # wall-clock budget for a full enrichment run

# === PARSING ===
DATE_FORMATS = ["%m/%d/%Y", "%m/%d/%y", "%Y-%m-%d", "%B %d, %Y", "%b %d, %Y"]
BOOLEAN_TRUE_VALUES = frozenset({'true', '1', 'yes', 'on'})
