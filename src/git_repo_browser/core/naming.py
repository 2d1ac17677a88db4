#!/usr/bin/env python3
"""
Cache Directory Naming

This module derives the local directory used to cache a remote repository.
The name depends only on the URL string, so every process and every call
computes the same location for the same URL.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Links to documentation:
- hashlib: https://docs.python.org/3/library/hashlib.html

Sample input:
- repo_url: "https://github.com/username/repository"

Expected output:
- "github_tools_<12 hex characters>"
- "/tmp/github_tools_<12 hex characters>"
"""

import hashlib
import os
from typing import Optional

from git_repo_browser.core.config import CONFIG
from git_repo_browser.core.constants import CACHE_NAMESPACE, DIGEST_LENGTH, LOCK_SUFFIX


def url_digest(repo_url: str) -> str:
    """
    Truncated SHA-256 hex digest of a repository URL.

    Args:
        repo_url: Repository URL, used verbatim

    Returns:
        str: First DIGEST_LENGTH hex characters of the digest
    """
    return hashlib.sha256(repo_url.encode("utf-8")).hexdigest()[:DIGEST_LENGTH]


def cache_dir_name(repo_url: str) -> str:
    """
    Directory name of the cache entry for a repository URL.

    Args:
        repo_url: Repository URL

    Returns:
        str: Name of the form "github_tools_<digest>"
    """
    return f"{CACHE_NAMESPACE}_{url_digest(repo_url)}"


def cache_path_for(repo_url: str, cache_root: Optional[str] = None) -> str:
    """
    Absolute path of the cache entry for a repository URL.

    Args:
        repo_url: Repository URL
        cache_root: Directory holding cache entries (defaults to the configured root)

    Returns:
        str: Absolute path of the cache directory
    """
    root = cache_root or CONFIG["cache"]["root"]
    return os.path.join(os.path.abspath(root), cache_dir_name(repo_url))


def lock_path_for(cache_path: str) -> str:
    """Lock file that sits next to a cache directory."""
    return cache_path + LOCK_SUFFIX


if __name__ == "__main__":
    """Validate naming with real data"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: Same URL, same name
    total_tests += 1
    url = "https://github.com/username/repository"
    if cache_dir_name(url) != cache_dir_name(url):
        all_validation_failures.append("Determinism test: names differ for the same URL")

    # Test 2: Shape of the name
    total_tests += 1
    name = cache_dir_name(url)
    if not name.startswith(f"{CACHE_NAMESPACE}_") or len(name) != len(CACHE_NAMESPACE) + 1 + DIGEST_LENGTH:
        all_validation_failures.append(f"Name shape test: unexpected name {name}")

    # Test 3: Different spellings are different keys
    total_tests += 1
    if cache_dir_name(url) == cache_dir_name(url + ".git"):
        all_validation_failures.append("Spelling test: '.git' suffix produced the same name")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
