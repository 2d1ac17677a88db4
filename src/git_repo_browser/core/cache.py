#!/usr/bin/env python3
"""
Repository Cache Module

This module keeps one local working copy per remote repository URL and decides,
on every request, whether that copy can be reused or has to be cloned again.

A cache entry is reusable when it is a git working copy whose primary remote
fetch URL is exactly the requested URL. Anything else found at the cache path
is discarded and replaced by a fresh full clone. The probe-then-clone sequence
runs under a per-URL lock (an in-process lock plus, on POSIX, an advisory
lock file next to the cache directory) so concurrent callers never clone into
the same directory at once.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Links to documentation:
- GitPython: https://gitpython.readthedocs.io/
- fcntl.flock: https://docs.python.org/3/library/fcntl.html#fcntl.flock

Sample input:
- repo_url: "https://github.com/username/repository"

Expected output:
- LocalCopy(root_path="/tmp/github_tools_0123456789ab", source_url="https://github.com/username/repository")
- FetchFailure / FilesystemFailure if the copy cannot be produced
"""

import configparser
import os
import shutil
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from git import Repo
from git.exc import GitError
from loguru import logger
from pydantic import BaseModel

from git_repo_browser.core.config import CONFIG
from git_repo_browser.core.errors import FetchFailure, FilesystemFailure
from git_repo_browser.core.naming import cache_path_for, lock_path_for

if os.name == "posix":
    import fcntl
else:
    fcntl = None


class CacheState(str, Enum):
    """Outcome of inspecting a cache path."""
    REUSABLE = "reusable"
    INVALID = "invalid"
    ABSENT = "absent"


class LocalCopy(BaseModel):
    """Handle to an acquired working copy."""
    model_config = {"frozen": True}

    root_path: str
    source_url: str


# One lock per cache path, shared by every RepositoryCache in the process
_registry_lock = threading.Lock()
_path_locks: Dict[str, threading.Lock] = {}


def _lock_for(cache_path: str) -> threading.Lock:
    with _registry_lock:
        return _path_locks.setdefault(cache_path, threading.Lock())


@contextmanager
def repository_lock(cache_path: str) -> Iterator[None]:
    """
    Hold the per-repository critical section for a cache path.

    Args:
        cache_path: Cache directory being guarded

    Raises:
        FilesystemFailure: If the lock file cannot be opened
    """
    with _lock_for(cache_path):
        if fcntl is None:
            yield
            return

        lock_file = lock_path_for(cache_path)
        try:
            handle = open(lock_file, "a")
        except OSError as e:
            raise FilesystemFailure("Could not open cache lock", path=lock_file, cause=e) from e

        with handle:
            fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)


def primary_remote_url(repo: Repo) -> Optional[str]:
    """
    Fetch URL of the repository's primary remote.

    The primary remote is "origin" when configured, otherwise the first remote.

    Args:
        repo: Opened repository

    Returns:
        Optional[str]: Recorded URL, or None if the repository has no remote
    """
    remotes = list(repo.remotes)
    if not remotes:
        return None

    remote = next((r for r in remotes if r.name == "origin"), remotes[0])
    return remote.url


def probe_cache(path: str, repo_url: str) -> CacheState:
    """
    Classify what is currently stored at a cache path.

    Args:
        path: Candidate cache directory
        repo_url: Repository URL the entry must belong to

    Returns:
        CacheState: ABSENT, INVALID or REUSABLE
    """
    if not os.path.lexists(path):
        return CacheState.ABSENT

    try:
        repo = Repo(path)
        try:
            recorded_url = primary_remote_url(repo)
        finally:
            repo.close()
    except (GitError, OSError, ValueError, configparser.Error) as e:
        logger.info(f"Cache entry {path} is not a usable working copy: {type(e).__name__}: {e}")
        return CacheState.INVALID

    if recorded_url != repo_url:
        logger.info(f"Cache entry {path} points at {recorded_url!r}, expected {repo_url!r}")
        return CacheState.INVALID

    return CacheState.REUSABLE


def remove_path(path: str) -> None:
    """
    Remove a cache directory (or a stray file in its place).

    Args:
        path: Path to remove; a missing path is not an error

    Raises:
        FilesystemFailure: If the path exists and cannot be removed
    """
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        return
    except OSError as e:
        raise FilesystemFailure("Could not remove cache directory", path=path, cause=e) from e

    logger.debug(f"Removed {path}")


@contextmanager
def removed_on_failure(path: str) -> Iterator[None]:
    """
    Remove path if the guarded block exits with any exception.

    A failure of the removal itself is logged and the original exception is
    re-raised unchanged.
    """
    try:
        yield
    except BaseException:
        try:
            remove_path(path)
        except FilesystemFailure as cleanup_error:
            logger.warning(f"Cleanup after failed clone left {path} behind: {cleanup_error}")
        raise


class RepositoryCache:
    """
    Manages cached working copies under a single cache root.

    Every entry lives at cache_root/github_tools_<digest>, where the digest is
    derived from the repository URL alone.
    """

    def __init__(self, cache_root: Optional[str] = None):
        """
        Initialize the cache.

        Args:
            cache_root: Directory holding cache entries (defaults to CONFIG["cache"]["root"])
        """
        self.cache_root = os.path.abspath(cache_root or CONFIG["cache"]["root"])

    def path_for(self, repo_url: str) -> str:
        """Cache directory for a repository URL."""
        return cache_path_for(repo_url, self.cache_root)

    def status(self, repo_url: str) -> Tuple[str, CacheState]:
        """
        Report where a repository would be cached and whether it can be reused.

        Does not touch the network and does not modify the cache.

        Args:
            repo_url: Repository URL

        Returns:
            Tuple[str, CacheState]: (cache path, state)
        """
        path = self.path_for(repo_url)
        return path, probe_cache(path, repo_url)

    def acquire(self, repo_url: str) -> LocalCopy:
        """
        Ensure a valid working copy of repo_url exists and return a handle to it.

        A reusable entry is returned without network access. An invalid entry
        is removed first. A fresh clone that fails leaves no directory behind.

        Args:
            repo_url: Repository URL, used verbatim as the cache key

        Returns:
            LocalCopy: Handle to the working copy

        Raises:
            FetchFailure: If the repository cannot be cloned
            FilesystemFailure: If the cache directory cannot be created or removed
        """
        path = self.path_for(repo_url)
        self._ensure_root()

        with repository_lock(path):
            state = probe_cache(path, repo_url)

            if state is CacheState.REUSABLE:
                logger.info(f"Using cached copy of {repo_url} at {path}")
                return LocalCopy(root_path=path, source_url=repo_url)

            if state is CacheState.INVALID:
                logger.info(f"Discarding stale cache entry {path}")
                remove_path(path)

            try:
                os.makedirs(path)
            except OSError as e:
                raise FilesystemFailure("Could not create cache directory", path=path, cause=e) from e

            with removed_on_failure(path):
                self._clone(repo_url, path)

        logger.info(f"Cloned {repo_url} into {path}")
        return LocalCopy(root_path=path, source_url=repo_url)

    def evict(self, repo_url: str) -> bool:
        """
        Remove the cache entry for a repository URL.

        Args:
            repo_url: Repository URL

        Returns:
            bool: True if an entry existed and was removed

        Raises:
            FilesystemFailure: If the entry exists and cannot be removed
        """
        path = self.path_for(repo_url)
        self._ensure_root()

        with repository_lock(path):
            if not os.path.lexists(path):
                return False
            remove_path(path)

        logger.info(f"Evicted cache entry {path} for {repo_url}")
        return True

    def _ensure_root(self) -> None:
        try:
            os.makedirs(self.cache_root, exist_ok=True)
        except OSError as e:
            raise FilesystemFailure("Could not create cache root", path=self.cache_root, cause=e) from e

    def _clone(self, repo_url: str, path: str) -> None:
        logger.info(f"Cloning {repo_url} into {path}")
        try:
            repo = Repo.clone_from(repo_url, path)
        except GitError as e:
            logger.error(f"Clone of {repo_url} failed: {e}")
            raise FetchFailure(repo_url, e) from e
        repo.close()


def acquire_repository(repo_url: str, cache_root: Optional[str] = None) -> LocalCopy:
    """
    Acquire a working copy of repo_url using the configured cache root.

    Args:
        repo_url: Repository URL
        cache_root: Optional override of the cache root

    Returns:
        LocalCopy: Handle to the working copy
    """
    return RepositoryCache(cache_root).acquire(repo_url)
