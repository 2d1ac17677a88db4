#!/usr/bin/env python3
"""
Directory Tree Rendering

This module walks a working copy and renders it as a conventional ASCII tree.
Entries are sorted at every level so two renders of the same directory are
byte-identical, and anything whose name starts with ".git" is left out.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- root_path: "/tmp/github_tools_0123456789ab"

Expected output:
    ├── README.md
    └── src
        └── main.py
"""

import os
import stat
from typing import List

from loguru import logger
from pydantic import BaseModel

from git_repo_browser.core.constants import (
    GIT_METADATA_PREFIX,
    TREE_BLANK,
    TREE_BRANCH,
    TREE_LAST,
    TREE_PIPE,
)
from git_repo_browser.core.errors import FilesystemFailure


class TreeNode(BaseModel):
    """One entry of a directory tree."""
    name: str
    is_dir: bool = False
    children: List["TreeNode"] = []


def _list_entries(dir_path: str) -> List[str]:
    try:
        names = os.listdir(dir_path)
    except OSError as e:
        raise FilesystemFailure("Could not list directory", path=dir_path, cause=e) from e

    return sorted(name for name in names if not name.startswith(GIT_METADATA_PREFIX))


def _is_directory(entry_path: str) -> bool:
    # Symbolic links are listed but never followed
    try:
        mode = os.lstat(entry_path).st_mode
    except OSError as e:
        raise FilesystemFailure("Could not inspect entry", path=entry_path, cause=e) from e
    return stat.S_ISDIR(mode)


def build_tree(root_path: str) -> TreeNode:
    """
    Build the tree of a directory, depth-first and sorted.

    Args:
        root_path: Directory to walk

    Returns:
        TreeNode: Root node named after the directory

    Raises:
        FilesystemFailure: If any directory or entry cannot be read
    """
    children = []
    for name in _list_entries(root_path):
        entry_path = os.path.join(root_path, name)
        if _is_directory(entry_path):
            child = build_tree(entry_path)
        else:
            child = TreeNode(name=name)
        children.append(child)

    return TreeNode(name=os.path.basename(os.path.normpath(root_path)), is_dir=True, children=children)


def format_tree(node: TreeNode, prefix: str = "") -> str:
    """
    Render the children of a node as tree lines.

    Args:
        node: Directory node
        prefix: Continuation prefix inherited from the parent

    Returns:
        str: One line per entry, each terminated by a newline
    """
    lines = []
    for index, child in enumerate(node.children):
        is_last = index == len(node.children) - 1
        lines.append(f"{prefix}{TREE_LAST if is_last else TREE_BRANCH}{child.name}\n")
        if child.is_dir:
            lines.append(format_tree(child, prefix + (TREE_BLANK if is_last else TREE_PIPE)))
    return "".join(lines)


def render_tree(root_path: str) -> str:
    """
    Render a directory as an ASCII tree.

    Args:
        root_path: Directory to render

    Returns:
        str: Tree text; empty for a directory with nothing to list

    Raises:
        FilesystemFailure: If any part of the directory cannot be read
    """
    logger.debug(f"Rendering tree for {root_path}")
    return format_tree(build_tree(root_path))


if __name__ == "__main__":
    """Validate tree rendering with real data"""
    import sys
    import tempfile

    all_validation_failures = []
    total_tests = 0

    # Test 1: Metadata is hidden and the only entry is drawn as last
    total_tests += 1
    with tempfile.TemporaryDirectory() as temp_dir:
        os.makedirs(os.path.join(temp_dir, ".git"))
        with open(os.path.join(temp_dir, "x.txt"), "w") as f:
            f.write("x")
        tree = render_tree(temp_dir)
        if tree != "└── x.txt\n":
            all_validation_failures.append(f"Single entry test: got {tree!r}")

    # Test 2: Nested layout
    total_tests += 1
    with tempfile.TemporaryDirectory() as temp_dir:
        os.makedirs(os.path.join(temp_dir, "src"))
        for rel in ("README.md", os.path.join("src", "main.py")):
            with open(os.path.join(temp_dir, rel), "w") as f:
                f.write("")
        expected = "├── README.md\n└── src\n    └── main.py\n"
        tree = render_tree(temp_dir)
        if tree != expected:
            all_validation_failures.append(f"Nested test: expected {expected!r}, got {tree!r}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
