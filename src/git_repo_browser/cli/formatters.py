"""Rich-based formatters for CLI output in the git repo browser.

This module provides formatted console output for the CLI using the Rich
library: status messages, the repository tree, the file contents table and
the cache status panel.

Links to third-party package documentation:
- Rich: https://rich.readthedocs.io/en/latest/
- Rich Tree: https://rich.readthedocs.io/en/latest/tree.html
- Rich Tables: https://rich.readthedocs.io/en/latest/tables.html

Sample input:
    print_success("Repository ready")
    print_file_results({"README.md": "# Title", "missing.txt": "Error: File not found"})

Expected output:
    ✅ Repository ready
    ┏━━━━━━━━━━━━━┳━━━━━━━━━━━━━━━━━━━━━━━┓
    ┃ Path        ┃ Content               ┃
    ┡━━━━━━━━━━━━━╇━━━━━━━━━━━━━━━━━━━━━━━┩
    │ README.md   │ # Title               │
    │ missing.txt │ Error: File not found │
    └─────────────┴───────────────────────┘
"""

from typing import Dict, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from git_repo_browser.core.cache import CacheState
from git_repo_browser.core.reader import is_error_marker
from git_repo_browser.core.tree import TreeNode

# Create console instance
console = Console()

STATE_STYLES = {
    CacheState.REUSABLE: "green",
    CacheState.INVALID: "yellow",
    CacheState.ABSENT: "dim",
}


def print_success(message: str) -> None:
    """Print a success message to the console with a green checkmark."""
    console.print(f"✅ [bold green]{escape(message)}[/]")
    logger.success(message)


def print_error(message: str) -> None:
    """Print an error message to the console with a red X."""
    console.print(f"❌ [bold red]Error:[/] {escape(message)}")
    logger.error(message)


def print_info(message: str) -> None:
    """Print an info message to the console with a blue info sign."""
    console.print(f"ℹ️ [bold blue]Info:[/] {escape(message)}")
    logger.info(message)


def _add_children(branch: Tree, node: TreeNode) -> None:
    for child in node.children:
        if child.is_dir:
            _add_children(branch.add(f"📁 [bold blue]{escape(child.name)}[/]"), child)
        else:
            branch.add(f"📄 [cyan]{escape(child.name)}[/]")


def print_repository_tree(node: TreeNode, title: Optional[str] = None) -> None:
    """Print a repository tree with Rich.

    Args:
        node: Root node of the tree
        title: Label of the root (defaults to the node name)
    """
    tree = Tree(f"📁 [bold blue]{escape(title or node.name)}[/]")
    _add_children(tree, node)
    console.print(tree)


def print_file_results(results: Dict[str, str], max_chars: int = 400) -> None:
    """Print a table of requested paths and their contents.

    Args:
        results: Path -> content or error marker
        max_chars: Contents longer than this are truncated in the table
    """
    if not results:
        console.print("[yellow]No files requested[/]")
        return

    table = Table(title="Repository Files", show_lines=True)
    table.add_column("Path", style="cyan", no_wrap=True)
    table.add_column("Content")

    for path, content in results.items():
        is_error = is_error_marker(content)
        if len(content) > max_chars:
            content = content[:max_chars] + "…"
        table.add_row(path, Text(content, style="red" if is_error else ""))

    console.print(table)


def print_cache_status(repo_url: str, path: str, state: CacheState) -> None:
    """Print where a repository is cached and whether the copy is reusable."""
    style = STATE_STYLES[state]
    panel = Panel(
        Text.from_markup(
            f"[bold blue]Repository:[/] {escape(repo_url)}\n"
            f"[bold blue]Cache Path:[/] {escape(path)}\n"
            f"[bold blue]State:[/] [{style}]{state.value}[/]"
        ),
        title="Cache Status",
        border_style="green"
    )
    console.print(panel)
