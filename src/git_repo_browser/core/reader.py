#!/usr/bin/env python3
"""
Batch File Reader

This module reads a list of repository-relative files from a working copy.
Every requested path gets exactly one entry in the result: the file text, or
an error marker when the file is missing or unreadable. One bad path never
stops the rest of the batch.

Paths are joined under the root as given. Parent-directory segments are not
sanitized, so a path such as "../x" can reach outside the working copy.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- root_path: "/tmp/github_tools_0123456789ab"
- relative_paths: ["README.md", "missing.txt"]

Expected output:
- {"README.md": "# Project\\n...", "missing.txt": "Error: File not found"}
"""

import os
from typing import Dict, Iterable

from loguru import logger

from git_repo_browser.core.constants import FILE_NOT_FOUND, FILE_READ_ERROR


def resolve_path(root_path: str, relative_path: str) -> str:
    """
    Join a caller-supplied path under the working copy root.

    Leading separators are dropped so that "/README.md" means the README at
    the root rather than an absolute path.
    """
    return os.path.join(root_path, relative_path.lstrip("/\\"))


def read_text_file(path: str) -> str:
    """Read a whole file as UTF-8, keeping its line endings."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def is_error_marker(value: str) -> bool:
    """Whether a read_files value is an error marker rather than file text."""
    return value == FILE_NOT_FOUND or value.startswith(FILE_READ_ERROR.split("{")[0])


def read_files(root_path: str, relative_paths: Iterable[str]) -> Dict[str, str]:
    """
    Read several files from a working copy.

    Args:
        root_path: Working copy root
        relative_paths: Paths relative to root_path, in the order to report them

    Returns:
        Dict[str, str]: Requested path -> file text or error marker
    """
    results: Dict[str, str] = {}

    for relative_path in relative_paths:
        full_path = resolve_path(root_path, relative_path)

        if not os.path.exists(full_path):
            logger.debug(f"Requested file not found: {relative_path}")
            results[relative_path] = FILE_NOT_FOUND
            continue

        try:
            results[relative_path] = read_text_file(full_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {relative_path}: {e}")
            results[relative_path] = FILE_READ_ERROR.format(cause=e)

    return results
