#!/usr/bin/env python3
"""
MCP Tools for Git Repo Browser

This module registers the git_directory_structure and git_read_important_files
tools on a FastMCP server.

Each call runs the blocking clone/walk/read work in a worker thread so the
server keeps serving other requests meanwhile; the repository cache serializes
calls that target the same URL. Results are returned as CallToolResult, which
the SDK hands to the client unchanged, soft-failure text and isError flag included.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- MCP server configuration

Expected output:
- Configured MCP server with registered tools
"""

import asyncio
from typing import Annotated, Any, Dict, List, Optional

from loguru import logger
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from git_repo_browser.core.cache import RepositoryCache
from git_repo_browser.core.constants import (
    SERVER_NAME,
    TOOL_DESCRIPTIONS,
    TOOL_DIRECTORY_STRUCTURE,
    TOOL_READ_IMPORTANT_FILES,
)
from git_repo_browser.mcp.schema import FILE_PATHS_DESCRIPTION, REPO_URL_DESCRIPTION
from git_repo_browser.mcp.wrappers import dispatch_tool, response_text

SERVER_INSTRUCTIONS = (
    "Browse remote git repositories without a local checkout: "
    "list the directory tree, then read the files that matter."
)


def to_call_tool_result(response: Dict[str, Any]) -> CallToolResult:
    """
    Convert a wrapper response into a FastMCP tool result.

    Args:
        response: Envelope produced by the wrappers

    Returns:
        CallToolResult: Same text and isError flag, passed through by the SDK as is
    """
    return CallToolResult(
        content=[TextContent(type="text", text=response_text(response))],
        isError=response["isError"]
    )


def create_mcp_server(name: str = SERVER_NAME, cache_root: Optional[str] = None) -> FastMCP:
    """
    Create and configure MCP server with git repository tools

    Args:
        name: Name for the MCP server
        cache_root: Directory holding cached working copies (defaults to CONFIG)

    Returns:
        FastMCP: Configured MCP server instance
    """
    mcp = FastMCP(name, instructions=SERVER_INSTRUCTIONS)
    cache = RepositoryCache(cache_root)

    logger.info(f"Initialized FastMCP server: {name} (cache root {cache.cache_root})")

    register_directory_structure_tool(mcp, cache)
    register_read_important_files_tool(mcp, cache)

    return mcp


def register_directory_structure_tool(mcp: FastMCP, cache: RepositoryCache) -> None:
    """
    Register git_directory_structure with the MCP server

    Args:
        mcp: MCP server instance
        cache: Repository cache shared by the tools
    """
    @mcp.tool(name=TOOL_DIRECTORY_STRUCTURE, description=TOOL_DESCRIPTIONS[TOOL_DIRECTORY_STRUCTURE])
    async def git_directory_structure(
        repo_url: Annotated[str, Field(description=REPO_URL_DESCRIPTION)]
    ) -> CallToolResult:
        response = await asyncio.to_thread(
            dispatch_tool, TOOL_DIRECTORY_STRUCTURE, {"repo_url": repo_url}, cache
        )
        return to_call_tool_result(response)


def register_read_important_files_tool(mcp: FastMCP, cache: RepositoryCache) -> None:
    """
    Register git_read_important_files with the MCP server

    Args:
        mcp: MCP server instance
        cache: Repository cache shared by the tools
    """
    @mcp.tool(name=TOOL_READ_IMPORTANT_FILES, description=TOOL_DESCRIPTIONS[TOOL_READ_IMPORTANT_FILES])
    async def git_read_important_files(
        repo_url: Annotated[str, Field(description=REPO_URL_DESCRIPTION)],
        file_paths: Annotated[List[str], Field(description=FILE_PATHS_DESCRIPTION)]
    ) -> CallToolResult:
        response = await asyncio.to_thread(
            dispatch_tool,
            TOOL_READ_IMPORTANT_FILES,
            {"repo_url": repo_url, "file_paths": file_paths},
            cache
        )
        return to_call_tool_result(response)
