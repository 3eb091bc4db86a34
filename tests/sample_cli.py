"""Small typer application used as an import-path fixture.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Annotated

import click
import typer

app = typer.Typer(add_completion=False)
remote_app = typer.Typer(help="Manage remotes")

NOT_A_COMMAND = "just a string"


@app.callback()
def main(
    verbose: Annotated[int, typer.Option("--verbose", "-v", count=True, help="Verbosity")] = 0,
    config: Annotated[str, typer.Option("--config", "-c", help="Config file")] = "",
) -> None:
    """Sample tool."""


@app.command(name="build")
def build(
    target: Annotated[str, typer.Argument(help="Build target")],
    jobs: Annotated[int, typer.Option("--jobs", "-j", help="Parallel jobs")] = 1,
    output_format: Annotated[
        str, typer.Option("--format", help="Output format (text/json)")
    ] = "text",
    tag: Annotated[list[str] | None, typer.Option("--tag", help="Tags to apply")] = None,
    secret: Annotated[str, typer.Option("--secret", hidden=True, help="Hidden")] = "",
) -> None:
    """Build the project."""


@app.command(name="debug", hidden=True)
def debug() -> None:
    """Hidden debugging command."""


@remote_app.command(name="add")
def remote_add(
    endpoint_url: Annotated[str, typer.Option("--endpoint-url", help="Remote address")] = "",
) -> None:
    """Add a remote."""


app.add_typer(remote_app, name="remote")


@click.group(name="clicktool")
@click.option("--dry-run", is_flag=True, help="Do nothing")
def click_cli() -> None:
    """Plain click tool."""


@click_cli.command(name="sync")
@click.option("--retries", type=int, help="Number of retries")
@click.option("--ratio", type=float, help="Sampling ratio")
def click_sync() -> None:
    """Synchronise state."""
