"""CLI shared utilities — helpers used across all commands."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from ablscope.core.models import Project
from ablscope.workspace import Workspace

console = Console()


def cli_error(message: str, code: int = 1) -> NoReturn:
    """Print a red error message and exit with *code*."""
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=code)


def open_workspace(root: Path, default_project: str | None = None) -> Workspace:
    """Open the workspace at *root* or exit with an error message."""
    if not root.is_dir():
        cli_error(f"Workspace folder not found: {root}")
    try:
        return Workspace.open(root, default_project_name=default_project)
    except ValueError as exc:
        cli_error(f"Error loading workspace settings: {exc}")


def describe_project(project: Project) -> str:
    return f"[bold]{project.name}[/bold] [dim]({project.root_dir or 'no root'})[/dim]"
