"""
Helpers that build small local git repositories to clone from in tests.
"""

import os
from typing import Dict

from git import Actor, Repo

TEST_ACTOR = Actor("Test Author", "test@example.com")


def make_origin_repo(path: str, files: Dict[str, str]) -> str:
    """
    Create a git repository with one commit holding the given files.

    Args:
        path: Directory to create the repository in
        files: Relative path -> text content

    Returns:
        str: Absolute path of the repository, usable as a clone URL
    """
    path = os.path.abspath(path)
    repo = Repo.init(path)
    for rel_path, content in files.items():
        full_path = os.path.join(path, rel_path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    repo.index.add(list(files))
    repo.index.commit("Initial commit", author=TEST_ACTOR, committer=TEST_ACTOR)
    repo.close()
    return path


def make_repo_with_remote(path: str, remote_url: str, remote_name: str = "origin") -> None:
    """Create an empty working copy whose remote points at remote_url."""
    repo = Repo.init(path)
    repo.create_remote(remote_name, remote_url)
    repo.close()
