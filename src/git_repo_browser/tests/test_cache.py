#!/usr/bin/env python3
"""
Unit tests for core/cache.py
"""

import os
import tempfile
import threading
import unittest
from unittest.mock import patch

from git import Repo

from git_repo_browser.core.cache import (
    CacheState,
    LocalCopy,
    RepositoryCache,
    probe_cache,
    removed_on_failure,
    remove_path,
)
from git_repo_browser.core.errors import FetchFailure, FilesystemFailure
from git_repo_browser.tests.git_fixtures import make_origin_repo, make_repo_with_remote


class TestProbeCache(unittest.TestCase):
    """Test cases for classifying cache entries"""

    URL = "https://example.com/team/project.git"

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "entry")

    def tearDown(self):
        self._tmp.cleanup()

    def test_absent(self):
        """Missing path is ABSENT"""
        self.assertEqual(probe_cache(self.path, self.URL), CacheState.ABSENT)

    def test_plain_directory_is_invalid(self):
        """Directory that is not a working copy is INVALID"""
        os.makedirs(self.path)
        with open(os.path.join(self.path, "file.txt"), "w") as f:
            f.write("data")
        self.assertEqual(probe_cache(self.path, self.URL), CacheState.INVALID)

    def test_plain_file_is_invalid(self):
        """A stray file at the cache path is INVALID"""
        with open(self.path, "w") as f:
            f.write("not a repository")
        self.assertEqual(probe_cache(self.path, self.URL), CacheState.INVALID)

    def test_repository_without_remote_is_invalid(self):
        """Working copy with no remote is INVALID"""
        Repo.init(self.path).close()
        self.assertEqual(probe_cache(self.path, self.URL), CacheState.INVALID)

    def test_mismatched_remote_is_invalid(self):
        """Working copy pointing elsewhere is INVALID"""
        make_repo_with_remote(self.path, "https://example.com/team/other.git")
        self.assertEqual(probe_cache(self.path, self.URL), CacheState.INVALID)

    def test_equivalent_spelling_is_invalid(self):
        """URL match is literal, no normalization"""
        make_repo_with_remote(self.path, self.URL[:-len(".git")])
        self.assertEqual(probe_cache(self.path, self.URL), CacheState.INVALID)

    def test_matching_remote_is_reusable(self):
        """Working copy whose origin matches is REUSABLE"""
        make_repo_with_remote(self.path, self.URL)
        self.assertEqual(probe_cache(self.path, self.URL), CacheState.REUSABLE)

    def test_origin_is_preferred_over_other_remotes(self):
        """Primary remote is origin even when another remote sorts first"""
        make_repo_with_remote(self.path, "https://example.com/fork.git", remote_name="aaa-fork")
        repo = Repo(self.path)
        repo.create_remote("origin", self.URL)
        repo.close()
        self.assertEqual(probe_cache(self.path, self.URL), CacheState.REUSABLE)

    def test_corrupt_metadata_is_invalid(self):
        """Unreadable git metadata is INVALID rather than an error"""
        os.makedirs(os.path.join(self.path, ".git"))
        with open(os.path.join(self.path, ".git", "HEAD"), "w") as f:
            f.write("garbage")
        self.assertEqual(probe_cache(self.path, self.URL), CacheState.INVALID)


class TestRepositoryCache(unittest.TestCase):
    """Test cases for acquiring working copies"""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.cache_root = os.path.join(self._tmp.name, "cache")
        self.origin_url = make_origin_repo(
            os.path.join(self._tmp.name, "origin"),
            {"README.md": "# Project\n", "src/main.py": "print('hi')\n"}
        )
        self.cache = RepositoryCache(self.cache_root)

    def tearDown(self):
        self._tmp.cleanup()

    def test_acquire_clones_then_reuses(self):
        """Second acquire returns the same path without cloning again"""
        with patch.object(Repo, "clone_from", wraps=Repo.clone_from) as clone:
            first = self.cache.acquire(self.origin_url)
            second = self.cache.acquire(self.origin_url)

        self.assertEqual(clone.call_count, 1)
        self.assertEqual(first, second)
        self.assertEqual(first.root_path, self.cache.path_for(self.origin_url))
        self.assertEqual(first.source_url, self.origin_url)
        self.assertTrue(os.path.isfile(os.path.join(first.root_path, "README.md")))

    def test_acquire_returns_local_copy(self):
        """Handle is an immutable LocalCopy"""
        local_copy = self.cache.acquire(self.origin_url)
        self.assertIsInstance(local_copy, LocalCopy)
        with self.assertRaises(Exception):
            local_copy.root_path = "/elsewhere"

    def test_stale_entry_is_replaced(self):
        """Entry whose remote was repointed is removed and cloned afresh"""
        path = self.cache.path_for(self.origin_url)
        make_repo_with_remote(path, "https://example.com/someone/else.git")
        with open(os.path.join(path, "stale.txt"), "w") as f:
            f.write("old")

        with patch.object(Repo, "clone_from", wraps=Repo.clone_from) as clone:
            local_copy = self.cache.acquire(self.origin_url)

        self.assertEqual(clone.call_count, 1)
        self.assertFalse(os.path.exists(os.path.join(path, "stale.txt")))
        self.assertTrue(os.path.isfile(os.path.join(local_copy.root_path, "src", "main.py")))
        self.assertEqual(probe_cache(path, self.origin_url), CacheState.REUSABLE)

    def test_unreachable_remote_leaves_nothing_behind(self):
        """Failed clone raises FetchFailure and removes the directory"""
        missing_url = os.path.join(self._tmp.name, "does-not-exist")
        with self.assertRaises(FetchFailure) as ctx:
            self.cache.acquire(missing_url)

        self.assertIn("Failed to clone repository", str(ctx.exception))
        self.assertEqual(ctx.exception.repo_url, missing_url)
        self.assertFalse(os.path.exists(self.cache.path_for(missing_url)))

    def test_unexpected_clone_fault_still_cleans_up(self):
        """Any exception during the clone removes the directory and propagates"""
        with patch.object(Repo, "clone_from", side_effect=RuntimeError("boom")):
            with self.assertRaises(RuntimeError):
                self.cache.acquire(self.origin_url)
        self.assertFalse(os.path.exists(self.cache.path_for(self.origin_url)))

    def test_directory_creation_failure(self):
        """Failure to create the cache directory is a FilesystemFailure"""
        target = self.cache.path_for(self.origin_url)
        real_makedirs = os.makedirs

        def failing_makedirs(path, *args, **kwargs):
            if path == target:
                raise PermissionError("denied")
            return real_makedirs(path, *args, **kwargs)

        with patch("git_repo_browser.core.cache.os.makedirs", side_effect=failing_makedirs):
            with self.assertRaises(FilesystemFailure) as ctx:
                self.cache.acquire(self.origin_url)
        self.assertEqual(ctx.exception.path, target)

    def test_stale_entry_removal_failure(self):
        """Failure to remove an invalid entry is a FilesystemFailure"""
        path = self.cache.path_for(self.origin_url)
        os.makedirs(path)
        with patch("git_repo_browser.core.cache.shutil.rmtree", side_effect=PermissionError("denied")):
            with self.assertRaises(FilesystemFailure):
                self.cache.acquire(self.origin_url)

    def test_concurrent_acquires_clone_once(self):
        """Concurrent callers for one URL share a single clone"""
        results = []
        errors = []

        def worker():
            try:
                results.append(self.cache.acquire(self.origin_url))
            except Exception as e:
                errors.append(e)

        with patch.object(Repo, "clone_from", wraps=Repo.clone_from) as clone:
            threads = [threading.Thread(target=worker) for _ in range(4)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        self.assertEqual(errors, [])
        self.assertEqual(clone.call_count, 1)
        self.assertEqual(len({r.root_path for r in results}), 1)

    def test_status_does_not_modify_cache(self):
        """status reports ABSENT then REUSABLE around an acquire"""
        path, state = self.cache.status(self.origin_url)
        self.assertEqual(state, CacheState.ABSENT)
        self.assertFalse(os.path.exists(path))

        self.cache.acquire(self.origin_url)
        self.assertEqual(self.cache.status(self.origin_url), (path, CacheState.REUSABLE))

    def test_evict(self):
        """evict removes an entry and reports whether one existed"""
        self.assertFalse(self.cache.evict(self.origin_url))
        self.cache.acquire(self.origin_url)
        self.assertTrue(self.cache.evict(self.origin_url))
        self.assertFalse(os.path.exists(self.cache.path_for(self.origin_url)))


class TestCleanupHelpers(unittest.TestCase):
    """Test cases for removal helpers"""

    def test_remove_missing_path_is_noop(self):
        """Removing a missing path does nothing"""
        with tempfile.TemporaryDirectory() as temp_dir:
            remove_path(os.path.join(temp_dir, "missing"))

    def test_cleanup_failure_is_not_escalated(self):
        """A failing cleanup keeps the original exception"""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch("git_repo_browser.core.cache.remove_path", side_effect=FilesystemFailure("nope")):
                with self.assertRaises(ValueError):
                    with removed_on_failure(temp_dir):
                        raise ValueError("original")


if __name__ == "__main__":
    unittest.main()
