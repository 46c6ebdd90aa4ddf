"""Resolve which project a source file belongs to."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ablscope.cli import cli_error, console, describe_project, open_workspace
from ablscope.core.models import Project
from ablscope.resolver import ResolutionRule
from ablscope.workspace import Workspace

# Exit code used when a choice is required but prompting is disabled.
EXIT_NEEDS_SELECTION = 2

_RULE_LABELS = {
    ResolutionRule.SINGLE_PROJECT: "only project in workspace",
    ResolutionRule.AUTO_DETECTED: "auto-detected from file path",
    ResolutionRule.MOST_SPECIFIC: "most specific of nested projects",
    ResolutionRule.DEFAULT_PROJECT: "default project",
}


def _prompt_for_project(ws: Workspace, file_path: Path) -> Project:
    console.print(f"Could not determine the project for [bold]{file_path}[/bold].")
    for index, project in enumerate(ws.projects, start=1):
        console.print(f"  {index}. {describe_project(project)}")
    choice = typer.prompt("Select a project", type=int)
    if not 1 <= choice <= len(ws.projects):
        cli_error(f"Invalid selection: {choice}")
    return ws.projects[choice - 1]


def resolve_command(
    file: Path = typer.Argument(..., help="Source file to resolve."),
    workspace: Path = typer.Option(
        Path("."), "--workspace", "-w", help="Workspace folder to scan."
    ),
    default: Optional[str] = typer.Option(
        None, "--default", "-d", help="Default project when nothing contains the file."
    ),
    no_input: bool = typer.Option(
        False, "--no-input", help="Fail instead of prompting when a choice is needed."
    ),
) -> None:
    """Print the project that should be used for FILE."""
    ws = open_workspace(workspace, default_project=default)
    if not ws.projects:
        cli_error(f"No projects found under {workspace.resolve()}.")

    file_path = file.resolve()
    resolution = ws.explain(file_path)

    if not resolution.needs_manual_selection:
        console.print(
            f"[green]{_RULE_LABELS[resolution.rule]}:[/green] "
            f"{describe_project(resolution.project)}"
        )
        return

    if no_input:
        cli_error(
            f"Manual selection required: no project contains {file_path}.",
            code=EXIT_NEEDS_SELECTION,
        )

    project = _prompt_for_project(ws, file_path)
    console.print(f"[green]selected manually:[/green] {describe_project(project)}")
