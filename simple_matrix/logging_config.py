#!/usr/bin/env python3
"""
Centralized logging configuration for simple_matrix.

The package disables its own loguru output on import so that importing it
never prints anything. Applications that want to see the debug trail call
setup_logging() once at startup.
"""

import sys
from loguru import logger

from .config import LoggingSettings


def setup_logging(verbose=True, log_file=None, log_level=None, rotation=None):
    """
    Configure loguru sinks and enable the simple_matrix logger.

    Arguments left as None are read from the environment through
    LoggingSettings.from_env().

    Args:
        verbose (bool):     Whether to print logs to stdout (default: True)
        log_file (str, optional): Path to a log file. No file sink when unset.
        log_level (str):    Minimum level for every sink (e.g. "DEBUG")
        rotation (str):     Log file rotation size (default: "10 MB")

    Returns:
        list[int]: ids of the sinks that were added

    Example:
        >>> from simple_matrix import setup_logging, Matrix
        >>> setup_logging(log_level="DEBUG")
        >>> Matrix.from_iter(2, 2, range(4)).transpose()
    """
    settings = LoggingSettings.from_env()
    log_level = log_level or settings.log_level
    log_file = log_file or settings.log_file
    rotation = rotation or settings.rotation

    # Remove default handler to avoid duplicates
    logger.remove()
    sink_ids = []

    if verbose:
        sink_ids.append(logger.add(
            sys.stdout,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level=log_level,
            colorize=True
        ))

    if log_file is not None:
        sink_ids.append(logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=log_level,
            rotation=rotation,
        ))

    logger.enable("simple_matrix")
    logger.debug(f"Logging configured at level {log_level}")
    return sink_ids
