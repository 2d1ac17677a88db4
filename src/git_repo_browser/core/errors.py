"""
Exception types raised by the core layer.

Acquisition failures abort a whole tool call; per-file read problems are never
raised and are reported inline by the batch reader instead.
"""

from typing import Optional


class GitBrowserError(Exception):
    """Base class for all git_repo_browser errors."""


class FetchFailure(GitBrowserError):
    """The remote repository could not be cloned."""

    def __init__(self, repo_url: str, cause: Optional[BaseException] = None):
        self.repo_url = repo_url
        self.cause = cause
        detail = str(cause).strip() if cause is not None else "unknown error"
        super().__init__(f"Failed to clone repository: {detail}")


class FilesystemFailure(GitBrowserError):
    """A local directory could not be created, removed or traversed."""

    def __init__(self, message: str, path: Optional[str] = None, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class UnknownToolError(GitBrowserError):
    """A tool name that the dispatcher does not serve."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
