#!/usr/bin/env python3
"""
Logger setup for the receipt analyzer
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LOGGING


def setup_logger(log_level: str = LOGGING['level'], log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Setup logging configuration

    Log records go to stderr so stdout only carries the report.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the log file (no file logging when None)

    Returns:
        Configured logger instance
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOGGING['log_file']))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOGGING['format'],
        handlers=handlers,
        force=True,
    )

    return logging.getLogger(__name__)
