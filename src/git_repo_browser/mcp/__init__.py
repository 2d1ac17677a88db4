"""
MCP Layer for Git Repo Browser

This package contains the MCP (Model Context Protocol) layer: the tool
dispatcher, the FastMCP tool registrations and the server entry point.

Usage:
    # Start the MCP server
    python -m git_repo_browser.mcp.mcp_server start

    # Use the MCP server in Python
    from git_repo_browser.mcp import create_mcp_server
    mcp = create_mcp_server()
    mcp.run()
"""

# MCP server creation
from git_repo_browser.mcp.mcp_tools import create_mcp_server

# MCP server entry point
from git_repo_browser.mcp.mcp_server import (
    main,
    health_check,
    get_server_info,
    get_tool_listing
)

# MCP wrappers
from git_repo_browser.mcp.wrappers import (
    dispatch_tool,
    directory_structure_wrapper,
    read_important_files_wrapper,
    format_mcp_response
)

__all__ = [
    # MCP server
    'create_mcp_server',
    'main',
    'health_check',
    'get_server_info',
    'get_tool_listing',

    # MCP wrappers
    'dispatch_tool',
    'directory_structure_wrapper',
    'read_important_files_wrapper',
    'format_mcp_response'
]

# Example configuration for .mcp.json
EXAMPLE_MCP_CONFIG = """
{
  "mcpServers": {
    "git-repo-browser": {
      "command": "git-repo-browser-mcp",
      "args": ["start"]
    }
  }
}
"""
