import logging
from importlib.metadata import version as pkg_version
from typing import Optional

import typer

from ablscope.cli.projects_cmd import projects_command
from ablscope.cli.resolve_cmd import resolve_command

app = typer.Typer(
    name="ablscope",
    help="Find the OpenEdge project that owns a source file.",
    no_args_is_help=True,
    invoke_without_command=True,
)

app.command("resolve")(resolve_command)
app.command("projects")(projects_command)


def version_callback(value: bool):
    if value:
        typer.echo(f"ablscope {pkg_version('ablscope')}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging.",
    ),
):
    """Find the OpenEdge project that owns a source file."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=logging.WARNING, format="%(name)s %(levelname)s: %(message)s")
    logging.getLogger("ablscope").setLevel(level)


if __name__ == "__main__":
    app()
