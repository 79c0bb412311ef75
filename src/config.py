"""
Configuration loader.
Reads settings from an optional .env file and makes them available to the rest of the app.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Project root (the directory holding api.py and data/)
ROOT_DIR = Path(__file__).resolve().parents[1]

# Dataset location; data/ sits next to the running program
DATA_DIR = ROOT_DIR / "data"
MOVIES_CSV_PATH = Path(os.getenv("MOVIES_CSV_PATH", str(DATA_DIR / "tmdb_top_rated_movies.csv")))


def env_int(name: str, default: int) -> int:
	"""Read an integer setting; a malformed value falls back to the default with a warning."""
	raw = os.getenv(name)
	if raw is None or not raw.strip():
		return default
	try:
		return int(raw)
	except ValueError:
		logger.warning(f"[Config] {name}={raw!r} is not an integer; using {default}")
		return default


# Default "take N" for the ranking operations
DEFAULT_RESULT_COUNT = env_int("DEFAULT_RESULT_COUNT", 10)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Where the Streamlit UI expects the API
API_URL = os.getenv("API_URL", "http://localhost:8000")


def setup_logging(level: str = LOG_LEVEL) -> None:
	"""Send all loguru output to stderr at the given level."""
	logger.remove()
	logger.add(sys.stderr, level=level)
