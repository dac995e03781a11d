# config.py
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"

# Undo/redo
DEFAULT_MAX_HISTORY = 50

# Graph queries
DEFAULT_MAX_PATH_DEPTH = 10
DEFAULT_BEST_PRICES_LIMIT = 5

# Cache (seconds / entries)
CACHE_DEFAULT_TTL = 300.0
CACHE_MAX_SIZE = 100

# Minimum spacing between queued AI requests, in seconds
AI_REQUEST_COOLDOWN = 2.0
