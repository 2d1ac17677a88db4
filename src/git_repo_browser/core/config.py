"""
Module Description:
Defines the central configuration dictionary (CONFIG) for git_repo_browser.
Loads settings from environment variables using python-dotenv: where cache
entries live and how the server logs.

Links:
- python-dotenv: https://github.com/theskumar/python-dotenv
- tempfile module: https://docs.python.org/3/library/tempfile.html

Sample Input/Output:

- Accessing config values:
  from git_repo_browser.core.config import CONFIG
  cache_root = CONFIG["cache"]["root"]   # e.g. "/tmp"
  log_level = CONFIG["logging"]["level"]  # e.g. "INFO"
"""
import os
import tempfile

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

CONFIG = {
    "cache": {
        "root": os.getenv("GIT_BROWSER_CACHE_ROOT") or tempfile.gettempdir(),
    },
    "logging": {
        "level": os.getenv("GIT_BROWSER_LOG_LEVEL", "INFO").upper(),
        "file": os.getenv("GIT_BROWSER_LOG_FILE") or None,
    },
}
