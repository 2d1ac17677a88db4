#!/usr/bin/env python3
"""
Constants for Git Repo Browser

This module defines the fixed values shared by the cache, the renderers and
the MCP layer. Cache naming values are pinned so that cache directories stay
compatible across runs and across implementations of the same scheme.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- None (module contains only constants)

Expected output:
- None (module contains only constants)
"""

from typing import Dict

# Cache naming
CACHE_NAMESPACE: str = "github_tools"  # Prefix of every cache directory
DIGEST_LENGTH: int = 12  # Hex characters kept from the SHA-256 digest
LOCK_SUFFIX: str = ".lock"

# Entries starting with this prefix are never listed by the tree renderer
GIT_METADATA_PREFIX: str = ".git"

# Tree drawing
TREE_BRANCH: str = "├── "
TREE_LAST: str = "└── "
TREE_PIPE: str = "│   "
TREE_BLANK: str = "    "

# Per-file markers returned by the batch reader
FILE_NOT_FOUND: str = "Error: File not found"
FILE_READ_ERROR: str = "Error reading file: {cause}"

# MCP server metadata
SERVER_NAME: str = "mcp-git-repo-browser"
SERVER_VERSION: str = "0.1.0"
SERVER_READY_MESSAGE: str = "Git Repo Browser MCP server running on stdio"

TOOL_DIRECTORY_STRUCTURE: str = "git_directory_structure"
TOOL_READ_IMPORTANT_FILES: str = "git_read_important_files"

TOOL_DESCRIPTIONS: Dict[str, str] = {
    TOOL_DIRECTORY_STRUCTURE: "Clone a Git repository and return its directory structure in a tree format.",
    TOOL_READ_IMPORTANT_FILES: "Read the contents of specified files in a given git repository.",
}
