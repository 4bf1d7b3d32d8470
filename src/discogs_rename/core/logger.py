"""
Logging configuration for Discogs Rename.
All package loggers hang off a single "discogs_rename" logger writing to stdout.
"""

import logging
import sys
from typing import Optional, Union
from .config import LOGGING_CONFIG

PACKAGE_LOGGER = "discogs_rename"


def resolve_level(level: Optional[Union[str, int]] = None) -> int:
    """
    Turn a level name such as "debug" or "WARNING" into a logging level.
    
    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    
    resolved = getattr(logging, (level or LOGGING_CONFIG["LEVEL"]).upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Optional[Union[str, int]] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Configure the package logger.
    
    Calling it again (e.g. for --debug) replaces the previous handler
    instead of adding a second one.
    
    Args:
        level: Logging level name or number; defaults to DISCOGS_RENAME_LOG_LEVEL
        enable_console: Whether to log to stdout
    
    Returns:
        Configured package logger
    """
    log_level = resolve_level(level)
    
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()
    
    if enable_console:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOGGING_CONFIG["FORMAT"]))
        package_logger.addHandler(handler)
    
    package_logger.propagate = False
    
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child of the package logger.
    
    Args:
        name: Short name ("renamer") or a module's __name__ ("discogs_rename.services.renamer")
    
    Returns:
        Logger instance
    """
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        setup_logging()
    
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
