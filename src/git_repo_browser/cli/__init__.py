"""CLI layer for the git repo browser.

This module provides the command-line interface, using Typer for command
definitions and Rich for formatted console output.

Links to third-party package documentation:
- Typer: https://typer.tiangolo.com/
- Rich: https://rich.readthedocs.io/en/latest/

Exports:
- app: The main Typer application instance
- formatters: Rich-based formatters for console output

Usage example:
    >>> from git_repo_browser.cli import app
    >>> app()  # Run the CLI application
"""

from .app import app
from . import formatters

__all__ = ["app", "formatters"]
