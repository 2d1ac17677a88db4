"""
Core Layer for Git Repo Browser

This package contains the business logic: naming and validating cached
working copies, acquiring them, rendering their tree and reading their files.
It has no knowledge of MCP or of the command line.

Usage:
    from git_repo_browser.core import acquire_repository, render_tree, read_files
    copy = acquire_repository("https://github.com/org/repo")
    print(render_tree(copy.root_path))
    contents = read_files(copy.root_path, ["README.md"])
"""

# Cache naming
from git_repo_browser.core.naming import (
    cache_dir_name,
    cache_path_for,
    url_digest
)

# Cache management
from git_repo_browser.core.cache import (
    CacheState,
    LocalCopy,
    RepositoryCache,
    acquire_repository,
    probe_cache
)

# Traversal
from git_repo_browser.core.tree import TreeNode, build_tree, format_tree, render_tree
from git_repo_browser.core.reader import read_files

# Errors
from git_repo_browser.core.errors import (
    GitBrowserError,
    FetchFailure,
    FilesystemFailure,
    UnknownToolError
)

__all__ = [
    # Naming
    'cache_dir_name',
    'cache_path_for',
    'url_digest',

    # Cache
    'CacheState',
    'LocalCopy',
    'RepositoryCache',
    'acquire_repository',
    'probe_cache',

    # Traversal
    'TreeNode',
    'build_tree',
    'format_tree',
    'render_tree',
    'read_files',

    # Errors
    'GitBrowserError',
    'FetchFailure',
    'FilesystemFailure',
    'UnknownToolError'
]
