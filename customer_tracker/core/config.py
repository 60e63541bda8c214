"""
Configuration management for Customer Tracker.

Loads config.yaml and provides type-safe access to settings.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

# Config file location: lives alongside the customer_tracker package
_PACKAGE_DIR = Path(__file__).parent.parent.resolve()
CONFIG_PATH = _PACKAGE_DIR / "config.yaml"

DEFAULT_DATABASE = "Customers.db"
DEFAULT_EXIT_KEYWORD = "EXIT"

# Cache for loaded config
_config_cache: Optional[Dict[str, Any]] = None


def get_config(reload: bool = False) -> Dict[str, Any]:
    """
    Load configuration from config.yaml.

    Args:
        reload: Force reload even if cached

    Returns:
        Configuration dictionary
    """
    global _config_cache

    if _config_cache is not None and not reload:
        return _config_cache

    if not CONFIG_PATH.exists():
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as f:
        _config_cache = yaml.safe_load(f) or {}

    return _config_cache


def get_config_value(*keys: str, default: Any = None) -> Any:
    """
    Get a nested config value safely.

    Args:
        *keys: Path of keys to traverse (e.g., 'database', 'path')
        default: Value to return if key not found

    Example:
        exit_keyword = get_config_value('console', 'exit_keyword', default='EXIT')
    """
    config = get_config()

    for key in keys:
        if isinstance(config, dict) and key in config:
            config = config[key]
        else:
            return default

    return config


class TrackerPaths:
    """
    Centralized path access for Customer Tracker.

    Usage:
        from customer_tracker.core.config import TRACKER_PATHS
        db = TRACKER_PATHS.database
    """

    def _resolve(self, raw: str) -> Path:
        """Resolve a path: if relative, resolve against the working directory."""
        p = Path(raw)
        if not p.is_absolute():
            p = Path.cwd() / p
        return p

    @property
    def database(self) -> Path:
        raw = get_config_value("database", "path", default=DEFAULT_DATABASE)
        return self._resolve(raw)

    @property
    def config_dir(self) -> Path:
        return _PACKAGE_DIR


# Singleton instance
TRACKER_PATHS = TrackerPaths()
