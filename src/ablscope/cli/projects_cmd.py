"""List the projects found in a workspace."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from ablscope.cli import console, open_workspace
from ablscope.core.models import Project


def _display_root(project: Project, base: Path) -> str:
    """Show the root relative to the workspace when it lives inside it."""
    if not project.root_dir:
        return "-"
    root = Path(project.root_dir)
    try:
        return str(root.relative_to(base))
    except ValueError:
        return project.root_dir


def projects_command(
    workspace: Path = typer.Option(
        Path("."), "--workspace", "-w", help="Workspace folder to scan."
    ),
) -> None:
    """Show every project in the workspace."""
    ws = open_workspace(workspace)
    base = workspace.resolve()
    if not ws.projects:
        console.print(f"[dim]No projects found under {base}.[/dim]")
        return

    table = Table(title=f"Projects in {base.name or base}")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Root")
    table.add_column("Version")
    table.add_column("Profiles")
    table.add_column("Default", justify="center")
    for project in ws.projects:
        table.add_row(
            project.name,
            _display_root(project, base),
            project.version,
            ", ".join(p.name for p in project.profiles) or "-",
            "*" if project.name == ws.default_project_name else "",
        )
    console.print(table)

    if ws.default_project_name and ws.default_project is None:
        console.print(
            f"[yellow]Default project '{ws.default_project_name}' is not loaded.[/yellow]"
        )
