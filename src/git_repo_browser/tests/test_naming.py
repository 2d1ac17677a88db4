#!/usr/bin/env python3
"""
Unit tests for core/naming.py
"""

import hashlib
import os
import unittest

from git_repo_browser.core.naming import cache_dir_name, cache_path_for, lock_path_for, url_digest


class TestCacheNaming(unittest.TestCase):
    """Test cases for cache directory naming"""

    URL = "https://github.com/username/repository"

    def test_digest_is_truncated_sha256(self):
        """Digest is the first 12 hex characters of SHA-256 of the URL"""
        expected = hashlib.sha256(self.URL.encode("utf-8")).hexdigest()[:12]
        self.assertEqual(url_digest(self.URL), expected)

    def test_name_is_deterministic(self):
        """Same URL always gives the same name"""
        self.assertEqual(cache_dir_name(self.URL), cache_dir_name(self.URL))

    def test_name_shape(self):
        """Name is the namespace tag followed by the digest"""
        name = cache_dir_name(self.URL)
        self.assertEqual(name, f"github_tools_{url_digest(self.URL)}")
        self.assertRegex(name, r"^github_tools_[0-9a-f]{12}$")

    def test_spellings_are_not_normalized(self):
        """Equivalent spellings of a remote get different cache entries"""
        names = {
            cache_dir_name(self.URL),
            cache_dir_name(self.URL + "/"),
            cache_dir_name(self.URL + ".git"),
            cache_dir_name(self.URL.replace("https://", "http://")),
        }
        self.assertEqual(len(names), 4)

    def test_path_is_under_cache_root(self):
        """Cache path is the name joined under an absolute root"""
        path = cache_path_for(self.URL, "some/relative/root")
        self.assertTrue(os.path.isabs(path))
        self.assertEqual(os.path.basename(path), cache_dir_name(self.URL))
        self.assertEqual(os.path.dirname(path), os.path.abspath("some/relative/root"))

    def test_lock_path_sits_next_to_cache_dir(self):
        """Lock file is a sibling of the cache directory"""
        path = cache_path_for(self.URL, "/var/cache")
        self.assertEqual(lock_path_for(path), path + ".lock")


if __name__ == "__main__":
    unittest.main()
