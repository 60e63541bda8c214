"""
Path utilities for Customer Tracker.

Directory creation for the database file location.
"""

from pathlib import Path


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating if necessary. Returns path for chaining."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_parent(path: Path) -> Path:
    """Ensure the parent directory of a file exists. Returns the file path."""
    ensure_directory(path.parent)
    return path
