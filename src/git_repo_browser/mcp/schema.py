"""JSON schema definitions and input models for the git repo browser MCP tools.

The dictionaries describe the tool inputs as advertised to MCP clients; the
pydantic models validate the arguments of an incoming call before any
repository is touched.

Links to third-party package documentation:
- JSON Schema: https://json-schema.org/understanding-json-schema/
- Pydantic: https://docs.pydantic.dev/latest/

Sample input:
    {
        "repo_url": "https://github.com/user/repo",
        "file_paths": ["README.md", "setup.py"]
    }

Expected output:
    ReadImportantFilesInput(repo_url="https://github.com/user/repo", file_paths=["README.md", "setup.py"])
"""

from typing import Any, Dict, List, Type

from pydantic import BaseModel, Field

from git_repo_browser.core.constants import (
    TOOL_DESCRIPTIONS,
    TOOL_DIRECTORY_STRUCTURE,
    TOOL_READ_IMPORTANT_FILES,
)

REPO_URL_DESCRIPTION = "The URL of the Git repository"
FILE_PATHS_DESCRIPTION = "List of file paths to read (relative to repository root)"

# git_directory_structure schema
DIRECTORY_STRUCTURE_SCHEMA = {
    "type": "object",
    "properties": {
        "repo_url": {
            "type": "string",
            "description": REPO_URL_DESCRIPTION
        }
    },
    "required": ["repo_url"]
}

# git_read_important_files schema
READ_IMPORTANT_FILES_SCHEMA = {
    "type": "object",
    "properties": {
        "repo_url": {
            "type": "string",
            "description": REPO_URL_DESCRIPTION
        },
        "file_paths": {
            "type": "array",
            "items": {
                "type": "string"
            },
            "description": FILE_PATHS_DESCRIPTION
        }
    },
    "required": ["repo_url", "file_paths"]
}


class DirectoryStructureInput(BaseModel):
    """Arguments of git_directory_structure."""
    repo_url: str = Field(..., description=REPO_URL_DESCRIPTION)


class ReadImportantFilesInput(BaseModel):
    """Arguments of git_read_important_files."""
    repo_url: str = Field(..., description=REPO_URL_DESCRIPTION)
    file_paths: List[str] = Field(..., description=FILE_PATHS_DESCRIPTION)


INPUT_MODELS: Dict[str, Type[BaseModel]] = {
    TOOL_DIRECTORY_STRUCTURE: DirectoryStructureInput,
    TOOL_READ_IMPORTANT_FILES: ReadImportantFilesInput,
}

# Complete tool listing, in the order tools are advertised
TOOL_SCHEMAS: List[Dict[str, Any]] = [
    {
        "name": TOOL_DIRECTORY_STRUCTURE,
        "description": TOOL_DESCRIPTIONS[TOOL_DIRECTORY_STRUCTURE],
        "inputSchema": DIRECTORY_STRUCTURE_SCHEMA
    },
    {
        "name": TOOL_READ_IMPORTANT_FILES,
        "description": TOOL_DESCRIPTIONS[TOOL_READ_IMPORTANT_FILES],
        "inputSchema": READ_IMPORTANT_FILES_SCHEMA
    }
]
