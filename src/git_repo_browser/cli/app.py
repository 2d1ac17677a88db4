"""Command-line interface for the git repo browser.

This module provides a Typer-based CLI over the same core used by the MCP
server, so a person can inspect a repository, check its cache entry or drop
it without going through an MCP client.

Links to third-party package documentation:
- Typer: https://typer.tiangolo.com/
- Rich: https://rich.readthedocs.io/en/latest/

Sample input:
    $ git-repo-browser tree https://github.com/user/repo
    $ git-repo-browser read https://github.com/user/repo README.md pyproject.toml --json
    $ git-repo-browser cache status https://github.com/user/repo
    $ git-repo-browser cache evict https://github.com/user/repo

Expected output:
    ├── README.md
    └── src
        └── main.py
"""

import json
from typing import List, Optional

import typer

from git_repo_browser.core.cache import RepositoryCache
from git_repo_browser.core.errors import GitBrowserError
from git_repo_browser.core.log_utils import configure_logging
from git_repo_browser.core.reader import read_files
from git_repo_browser.core.tree import build_tree, format_tree

from .formatters import (
    console,
    print_cache_status,
    print_error,
    print_file_results,
    print_info,
    print_repository_tree,
    print_success,
)


def validate_repo_url(url: str) -> str:
    """Reject empty repository URLs; everything else is passed to git verbatim."""
    if not url or not url.strip():
        raise typer.BadParameter("Repository URL cannot be empty")
    return url


# Create Typer app
app = typer.Typer(
    name="git-repo-browser",
    help="Inspect remote git repositories through a local clone cache",
    rich_markup_mode="rich",
    add_completion=False
)
cache_app = typer.Typer(help="Inspect and manage cached clones", rich_markup_mode="rich")
app.add_typer(cache_app, name="cache")


@app.callback()
def main(
    ctx: typer.Context,
    cache_root: Optional[str] = typer.Option(
        None,
        "--cache-root",
        help="Directory holding cached clones (defaults to GIT_BROWSER_CACHE_ROOT or the temp dir)"
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level for diagnostics on stderr"
    ),
):
    """
    Git Repo Browser - directory trees and file contents of remote repositories
    """
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["cache"] = RepositoryCache(cache_root)


def _acquire_root(ctx: typer.Context, url: str) -> str:
    cache: RepositoryCache = ctx.obj["cache"]
    try:
        with console.status("Fetching repository..."):
            return cache.acquire(url).root_path
    except GitBrowserError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command("tree")
def tree_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., callback=validate_repo_url, help="URL of the Git repository"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Print the plain ASCII tree")
) -> None:
    """Show the directory structure of a repository.

    Examples:
        [bold]$ git-repo-browser tree https://github.com/user/repo[/bold]

        [bold]$ git-repo-browser tree --plain https://github.com/user/repo > tree.txt[/bold]
    """
    root_path = _acquire_root(ctx, url)

    try:
        node = build_tree(root_path)
    except GitBrowserError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if plain:
        typer.echo(format_tree(node), nl=False)
    else:
        print_repository_tree(node, title=url)


@app.command("read")
def read_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., callback=validate_repo_url, help="URL of the Git repository"),
    paths: Optional[List[str]] = typer.Argument(None, help="File paths relative to the repository root"),
    json_output: bool = typer.Option(False, "--json", help="Print the result mapping as JSON")
) -> None:
    """Read files from a repository.

    Examples:
        [bold]$ git-repo-browser read https://github.com/user/repo README.md setup.py[/bold]
    """
    root_path = _acquire_root(ctx, url)
    results = read_files(root_path, paths or [])

    if json_output:
        typer.echo(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        print_file_results(results)


@cache_app.command("status")
def cache_status_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., callback=validate_repo_url, help="URL of the Git repository")
) -> None:
    """Show where a repository is cached and whether the copy can be reused."""
    cache: RepositoryCache = ctx.obj["cache"]
    path, state = cache.status(url)
    print_cache_status(url, path, state)


@cache_app.command("evict")
def cache_evict_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., callback=validate_repo_url, help="URL of the Git repository")
) -> None:
    """Remove the cached clone of a repository."""
    cache: RepositoryCache = ctx.obj["cache"]
    try:
        removed = cache.evict(url)
    except GitBrowserError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if removed:
        print_success(f"Removed cached clone of {url}")
    else:
        print_info(f"No cached clone of {url}")


if __name__ == "__main__":
    app()
