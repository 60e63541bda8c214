"""
Customer Tracker Core - Shared services for all modules.

Usage:
    from customer_tracker.core import get_db, get_config, get_logger, Console
"""

from customer_tracker.core.config import get_config, get_config_value, TRACKER_PATHS
from customer_tracker.core.console import Console, trim_whitespace
from customer_tracker.core.db import (
    get_db,
    open_database,
    close_database,
    execute_trusted,
    migrate_all,
)
from customer_tracker.core.logging import get_logger
from customer_tracker.core.results import LookupStatus, QueryResult

__all__ = [
    "get_config",
    "get_config_value",
    "TRACKER_PATHS",
    "Console",
    "trim_whitespace",
    "get_db",
    "open_database",
    "close_database",
    "execute_trusted",
    "migrate_all",
    "get_logger",
    "LookupStatus",
    "QueryResult",
]
