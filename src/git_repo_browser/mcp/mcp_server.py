#!/usr/bin/env python3
"""
MCP Server Entry Point for Git Repo Browser

This is the main entry point for the git repo browser MCP server, designed to
be directly referenced in the .mcp.json configuration. The server speaks MCP
over stdio, so all diagnostics go to stderr (and optionally a log file).

This module is part of the Integration Layer and connects the MCP functionality
to the application core.
"""

import argparse
import asyncio
import json
import os
import platform
import sys
from typing import Any, Dict, Optional

import git
from loguru import logger

from git_repo_browser.core.config import CONFIG
from git_repo_browser.core.constants import SERVER_NAME, SERVER_READY_MESSAGE, SERVER_VERSION
from git_repo_browser.core.log_utils import configure_logging
from git_repo_browser.mcp.mcp_tools import create_mcp_server


def get_server_info() -> Dict[str, Any]:
    """
    Get server information.

    Returns:
        Dict[str, Any]: Server information
    """
    return {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "description": "Inspect remote git repositories: directory trees and file contents",
        "transport": "stdio",
        "cache_root": os.path.abspath(CONFIG["cache"]["root"]),
    }


def health_check(cache_root: Optional[str] = None) -> Dict[str, Any]:
    """
    Perform a health check.

    Args:
        cache_root: Cache root to check (defaults to CONFIG)

    Returns:
        Dict[str, Any]: Health check results
    """
    cache_root = os.path.abspath(cache_root or CONFIG["cache"]["root"])
    try:
        git_version = ".".join(str(part) for part in git.Git().version_info)
        os.makedirs(cache_root, exist_ok=True)
        if not os.access(cache_root, os.W_OK):
            raise PermissionError(f"Cache root is not writable: {cache_root}")

        return {
            "status": "healthy",
            "platform": platform.system(),
            "python_version": platform.python_version(),
            "git_version": git_version,
            "gitpython_version": getattr(git, "__version__", "unknown"),
            "cache_root": cache_root,
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "error": str(e),
        }


def get_tool_listing(cache_root: Optional[str] = None) -> Dict[str, Any]:
    """
    List the tools the server advertises, as MCP clients see them.

    Returns:
        Dict[str, Any]: {"tools": [{"name", "description", "inputSchema"}, ...]}
    """
    mcp = create_mcp_server(cache_root=cache_root)
    tools = asyncio.run(mcp.list_tools())
    return {
        "tools": [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.inputSchema,
            }
            for tool in tools
        ]
    }


def main() -> int:
    """
    Main entry point for the MCP server.

    Returns:
        int: Exit code
    """
    parser = argparse.ArgumentParser(description="Git Repo Browser MCP Server")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Start server command
    start_parser = subparsers.add_parser("start", help="Start the MCP server on stdio")
    start_parser.add_argument("--cache-root", type=str, default=None, help="Directory holding cached clones")
    start_parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    start_parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    # Health check command
    subparsers.add_parser("health", help="Check server health")

    # Info command
    subparsers.add_parser("info", help="Display server information")

    # Schema command
    schema_parser = subparsers.add_parser("schema", help="Display tool schemas")
    schema_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "start":
        log_level = "DEBUG" if args.debug else None
        configure_logging(log_level, args.log_file)

        try:
            mcp = create_mcp_server(cache_root=args.cache_root)
            # stdout carries the protocol, so the banner always goes to stderr
            print(SERVER_READY_MESSAGE, file=sys.stderr, flush=True)
            mcp.run()
        except KeyboardInterrupt:
            logger.info("Server stopped by user")
            return 0
        except Exception:
            logger.exception("Server failed")
            return 1

    elif args.command == "health":
        result = health_check()
        print(json.dumps(result, indent=2))
        return 0 if result["status"] == "healthy" else 1

    elif args.command == "info":
        print(json.dumps(get_server_info(), indent=2))
        return 0

    elif args.command == "schema":
        configure_logging("WARNING")
        listing = get_tool_listing()

        if args.json:
            print(json.dumps(listing, indent=2))
        else:
            for tool in listing["tools"]:
                print(f"Function: {tool['name']}")
                print(f"  Description: {tool['description']}")
                print("  Parameters:")
                required = tool["inputSchema"].get("required", [])
                for param_name, param_info in tool["inputSchema"].get("properties", {}).items():
                    marker = " (required)" if param_name in required else ""
                    print(f"    {param_name}: {param_info.get('type', 'unknown')}{marker} - {param_info.get('description', 'No description')}")
                print()

        return 0

    return 0


if __name__ == "__main__":
    """
    Direct entry point for the git repo browser MCP server.
    This file is designed to be referenced in .mcp.json.

    Usage:
      python -m git_repo_browser.mcp.mcp_server start [--cache-root DIR] [--log-file FILE] [--debug]
      python -m git_repo_browser.mcp.mcp_server health
      python -m git_repo_browser.mcp.mcp_server info
      python -m git_repo_browser.mcp.mcp_server schema [--json]
    """
    sys.exit(main())
