"""
Logging configuration for Customer Tracker.

Provides consistent log formatting across all modules. Diagnostics go to
stderr so they never interleave with menu prompts on stdout.
"""

import logging
import sys
from typing import Dict, Optional

_loggers: Dict[str, logging.Logger] = {}


def _configured_level() -> int:
    from customer_tracker.core.config import get_config_value

    try:
        name = get_config_value("logging", "level", default="WARNING")
    except FileNotFoundError:
        return logging.WARNING

    level = logging.getLevelName(str(name).upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for a module.

    Args:
        name: Logger name (e.g., 'customer_tracker.customers')
        level: Logging level (default: from config.yaml, WARNING if unset)

    Returns:
        Configured logger
    """
    if name in _loggers:
        return _loggers[name]

    if level is None:
        level = _configured_level()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)

        formatter = logging.Formatter(
            "%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _loggers[name] = logger
    return logger
