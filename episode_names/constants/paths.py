"""File and directory path constants."""

from pathlib import Path

# Package root (the directory holding cli.py)
PACKAGE_DIR = Path(__file__).resolve().parent.parent

# Directory paths
DATA_DIR = PACKAGE_DIR / "data"

# File names (relative to the data directory)
EPISODES_FILENAME_PATTERN = "{language}-episodes.json"
EPISODES_FILENAME_SUFFIX = "-episodes.json"
