"""
Logging setup shared by the CLI and the MCP server.

stdout is reserved for tool output and the stdio transport, so every sink
configured here writes to stderr or to a file.
"""

import os
import sys
from typing import Optional

from loguru import logger

from git_repo_browser.core.config import CONFIG


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure loguru sinks.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR); defaults to CONFIG
        log_file: Optional log file path; defaults to CONFIG
    """
    level = (level or CONFIG["logging"]["level"]).upper()
    log_file = log_file or CONFIG["logging"]["file"]

    # Remove default handlers
    logger.remove()

    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level=level,
        colorize=True
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="1 week",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
        )
