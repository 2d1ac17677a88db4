#!/usr/bin/env python3
"""
MCP Wrappers for Git Repo Browser

This module maps the two tool names onto the core layer and turns results and
failures into MCP-shaped response envelopes:

    {"content": [{"type": "text", "text": "..."}], "isError": false}

Acquisition failures come back as soft failures (isError set, message in the
text). Per-file read problems are embedded in the JSON mapping instead.
Unknown tool names and malformed arguments are rejected before any
repository is acquired.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- dispatch_tool("git_read_important_files", {"repo_url": "...", "file_paths": ["README.md"]})

Expected output:
- {"content": [{"type": "text", "text": "{\\n  \\"README.md\\": \\"...\\"\\n}"}], "isError": False}
"""

import json
from typing import Any, Callable, Dict, List, Optional

from loguru import logger

from git_repo_browser.core.cache import RepositoryCache
from git_repo_browser.core.constants import TOOL_DIRECTORY_STRUCTURE, TOOL_READ_IMPORTANT_FILES
from git_repo_browser.core.errors import GitBrowserError, UnknownToolError
from git_repo_browser.core.reader import read_files
from git_repo_browser.core.tree import render_tree
from git_repo_browser.mcp.schema import INPUT_MODELS


def format_mcp_response(text: str, is_error: bool = False) -> Dict[str, Any]:
    """
    Format a response in MCP-compatible format.

    Args:
        text: Text of the single content block
        is_error: Whether this is a soft failure

    Returns:
        Dict[str, Any]: MCP-compatible response
    """
    return {
        "content": [{"type": "text", "text": text}],
        "isError": is_error
    }


def response_text(response: Dict[str, Any]) -> str:
    """Text of the first content block of a response."""
    return response["content"][0]["text"]


def _repository_failure(error: Exception) -> Dict[str, Any]:
    payload = {"error": f"Failed to process repository: {error}"}
    return format_mcp_response(json.dumps(payload, indent=2), is_error=True)


def directory_structure_wrapper(repo_url: str, cache: Optional[RepositoryCache] = None) -> Dict[str, Any]:
    """
    MCP wrapper for git_directory_structure.

    Args:
        repo_url: Repository URL
        cache: Repository cache to use (defaults to the configured one)

    Returns:
        Dict[str, Any]: Tree text, or a soft failure with "Error: ..." text
    """
    cache = cache or RepositoryCache()
    try:
        local_copy = cache.acquire(repo_url)
        tree = render_tree(local_copy.root_path)
    except GitBrowserError as e:
        logger.error(f"Directory structure failed for {repo_url}: {e}")
        return format_mcp_response(f"Error: {e}", is_error=True)
    except Exception as e:
        logger.exception(f"Unexpected failure rendering {repo_url}")
        return format_mcp_response(f"Error: {e}", is_error=True)

    return format_mcp_response(tree)


def read_important_files_wrapper(
    repo_url: str,
    file_paths: List[str],
    cache: Optional[RepositoryCache] = None
) -> Dict[str, Any]:
    """
    MCP wrapper for git_read_important_files.

    Args:
        repo_url: Repository URL
        file_paths: Paths relative to the repository root
        cache: Repository cache to use (defaults to the configured one)

    Returns:
        Dict[str, Any]: JSON mapping of path to content or error marker, or a
        soft failure whose text is {"error": "Failed to process repository: ..."}
    """
    cache = cache or RepositoryCache()
    try:
        local_copy = cache.acquire(repo_url)
        results = read_files(local_copy.root_path, file_paths)
    except GitBrowserError as e:
        logger.error(f"Reading files failed for {repo_url}: {e}")
        return _repository_failure(e)
    except Exception as e:
        logger.exception(f"Unexpected failure reading files from {repo_url}")
        return _repository_failure(e)

    return format_mcp_response(json.dumps(results, indent=2, ensure_ascii=False))


def dispatch_tool(
    name: str,
    arguments: Optional[Dict[str, Any]] = None,
    cache: Optional[RepositoryCache] = None
) -> Dict[str, Any]:
    """
    Route a tool call by name.

    Args:
        name: Tool name
        arguments: Tool arguments
        cache: Repository cache to use

    Returns:
        Dict[str, Any]: MCP-compatible response

    Raises:
        UnknownToolError: If no tool has this name
        pydantic.ValidationError: If the arguments do not match the tool's schema
    """
    if name not in INPUT_MODELS:
        raise UnknownToolError(name)

    params = INPUT_MODELS[name].model_validate(arguments or {})
    logger.info(f"Tool {name} called for {params.repo_url}")

    return TOOL_HANDLERS[name](params, cache)


# Tool name -> handler taking the validated input model and the cache
TOOL_HANDLERS: Dict[str, Callable[[Any, Optional[RepositoryCache]], Dict[str, Any]]] = {
    TOOL_DIRECTORY_STRUCTURE: lambda params, cache: directory_structure_wrapper(
        params.repo_url, cache
    ),
    TOOL_READ_IMPORTANT_FILES: lambda params, cache: read_important_files_wrapper(
        params.repo_url, params.file_paths, cache
    ),
}
