"""Remote git repository browsing for MCP agents.

This package lets an agent look inside a remote git repository without keeping
a checkout of its own: it renders the directory tree and reads selected files
from a cached local clone.

It follows a three-layer architecture:

1. Core Layer: cache naming, validation and acquisition; tree and file reading
2. Presentation Layer: Typer/Rich command line
3. Integration Layer: FastMCP server exposing git_directory_structure and
   git_read_important_files

Links to third-party package documentation:
- GitPython: https://gitpython.readthedocs.io/en/stable/
- MCP Python SDK: https://github.com/modelcontextprotocol/python-sdk

Sample input:
    >>> from git_repo_browser import acquire_repository, render_tree
    >>> copy = acquire_repository("https://github.com/user/repo")
    >>> print(render_tree(copy.root_path))

Expected output:
    ├── README.md
    └── src
        └── main.py
"""

from git_repo_browser.core import (
    CacheState,
    LocalCopy,
    RepositoryCache,
    acquire_repository,
    render_tree,
    read_files,
    FetchFailure,
    FilesystemFailure,
    GitBrowserError
)

__version__ = "0.1.0"

__all__ = [
    "CacheState",
    "LocalCopy",
    "RepositoryCache",
    "acquire_repository",
    "render_tree",
    "read_files",
    "FetchFailure",
    "FilesystemFailure",
    "GitBrowserError",
    "__version__"
]
