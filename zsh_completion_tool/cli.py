"""CLI entry point for zsh-completion-tool.

Command Structure:
    zsh-completion-tool
    ├── generate    Generate a zsh completion script
    ├── tree        Print a command tree as JSON
    ├── hints       Show the completion hint of every flag
    ├── classify    Classify a single flag
    ├── config (subcommand group)
    │   └── show, init, path
    └── completion  (hidden) completion script for this tool

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import atexit
import json
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer

from zsh_completion_tool import __version__
from zsh_completion_tool.classifier import classify, hint_for_flag
from zsh_completion_tool.completion import add_completion_command
from zsh_completion_tool.emitter import generate_zsh, write_zsh
from zsh_completion_tool.errors import TreeSourceError
from zsh_completion_tool.loaders import load_command_tree
from zsh_completion_tool.logging_config import get_logger, setup_logging
from zsh_completion_tool.models import (
    CommandNode,
    CompletionHint,
    FlagSpec,
    GeneratorSettings,
    HintKind,
)
from zsh_completion_tool.naming import iter_command_paths
from zsh_completion_tool.settings import load_settings, save_settings
from zsh_completion_tool.storage import get_default_completion_path, get_settings_path
from zsh_completion_tool.telemetry import TelemetryConfig, TelemetryService

PROG_NAME = "zsh-completion-tool"

logger = get_logger(__name__)

app = typer.Typer(invoke_without_command=True, add_completion=False)
config_app = typer.Typer(help="Inspect and initialise generator settings")


class OutputFormat(str, Enum):
    """Output format options."""

    HUMAN = "human"
    JSON = "json"


SourceArgument = Annotated[
    str,
    typer.Argument(help="JSON tree file or import path of a click/typer app (module:attr)"),
]
ProgNameOption = Annotated[
    str | None,
    typer.Option("--prog-name", "-n", help="Invocation name of the tool (defaults to the root name)"),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format: human, json"),
]


# =============================================================================
# Helper Functions
# =============================================================================


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{PROG_NAME} version {__version__}")
        raise typer.Exit()


def _shutdown_telemetry() -> None:
    """Shutdown telemetry on exit."""
    TelemetryService.get_instance().shutdown()


def _load_tree_or_exit(source: str, prog_name: str | None) -> CommandNode:
    """Load a command tree or exit with error."""
    try:
        return load_command_tree(source, name=prog_name)
    except TreeSourceError as e:
        logger.error("Failed to load command tree from %s", source)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def describe_hint(hint: CompletionHint | None) -> str:
    """Describe a completion hint in one short line.

    Example:
        >>> describe_hint(CompletionHint.enumerated(["a", "b"]))
        'enum (a, b)'
    """
    if hint is None:
        return "flag"
    if hint.kind == HintKind.ENUM:
        return f"enum ({', '.join(hint.values)})"
    if hint.kind == HintKind.VALUE:
        return hint.label
    return hint.kind.value


def _flag_display_names(flag: FlagSpec) -> str:
    """Render flag names as typed on the command line."""
    return ", ".join(f"-{name}" if len(name) == 1 else f"--{name}" for name in flag.names)


# =============================================================================
# Main Callback
# =============================================================================


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Verbosity level: -v=INFO, -vv=DEBUG, -vvv=TRACE (includes library internals)",
        ),
    ] = 0,
    _version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
    telemetry: Annotated[
        bool,
        typer.Option(
            "--telemetry",
            envvar="OTEL_ENABLED",
            help="Enable OpenTelemetry tracing (or set OTEL_ENABLED=true)",
        ),
    ] = False,
) -> None:
    """Generate zsh completion scripts from click/typer apps and JSON command trees.

    \b
    SUBCOMMANDS:
        generate    Generate a zsh completion script
        tree        Print a command tree as JSON
        hints       Show the completion hint inferred for every flag
        classify    Classify a single flag from its name and description
        config      Inspect and initialise generator settings

    \b
    QUICK START:
        zsh-completion-tool generate mypackage.cli:app --prog-name my-tool
        zsh-completion-tool generate tree.json --install
        zsh-completion-tool hints mypackage.cli:app

    \b
    DATA STORAGE:
        ~/.config/zsh-completion-tool/settings.json   - Generator settings
        ~/.zsh/completions/_<prog>                    - Installed scripts (--install)
    """
    setup_logging(verbose)

    config = TelemetryConfig.from_env()
    config.enabled = telemetry or config.enabled
    TelemetryService.get_instance().initialize(config)
    atexit.register(_shutdown_telemetry)

    if ctx.invoked_subcommand is None:
        typer.echo(f"{PROG_NAME} - zsh completion script generator")
        typer.echo("Use --help for available commands")


# =============================================================================
# Generation Commands
# =============================================================================


@app.command(name="generate")
def generate_command(
    source: SourceArgument,
    prog_name: ProgNameOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the script to this file instead of stdout"),
    ] = None,
    install: Annotated[
        bool,
        typer.Option("--install", help="Write the script to ~/.zsh/completions/_<prog>"),
    ] = False,
) -> None:
    """Generate a zsh completion script.

    \b
    SOURCES:
        tree.json           Command tree in the format printed by 'tree'
        package.module:app  A click command or typer app to import

    \b
    EXAMPLES:
        zsh-completion-tool generate mypackage.cli:app -n my-tool > _my-tool
        zsh-completion-tool generate tree.json -o ~/.zsh/completions/_tool
        zsh-completion-tool generate mypackage.cli:app -n my-tool --install
    """
    settings = load_settings()
    tree = _load_tree_or_exit(source, prog_name)

    if install:
        output = get_default_completion_path(tree.name)

    if output is None:
        write_zsh(sys.stdout, tree, settings)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(generate_zsh(tree, settings), encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: Failed to write completion script to {output}: {e}", err=True)
        raise typer.Exit(1)

    logger.info("Wrote completion script for '%s' to %s", tree.name, output)
    typer.echo(f"Completion script written to {output}", err=True)
    if install:
        typer.echo(
            f"Ensure {output.parent} is in your fpath. Add to ~/.zshrc:\n"
            f"  fpath=({output.parent} $fpath)\n"
            "  autoload -Uz compinit && compinit\n"
            "Then reload your shell: exec zsh",
            err=True,
        )


@app.command(name="tree")
def tree_command(
    source: SourceArgument,
    prog_name: ProgNameOption = None,
) -> None:
    """Print a command tree as JSON.

    The output can be edited and passed back to 'generate'.

    \b
    EXAMPLES:
        zsh-completion-tool tree mypackage.cli:app -n my-tool > tree.json
    """
    tree = _load_tree_or_exit(source, prog_name)
    typer.echo(tree.model_dump_json(indent=2))


@app.command(name="hints")
def hints_command(
    source: SourceArgument,
    prog_name: ProgNameOption = None,
    output_format: FormatOption = OutputFormat.HUMAN,
) -> None:
    """Show the completion hint inferred for every flag.

    Hidden commands and excluded commands (help, completion) are skipped,
    exactly as in the generated script.

    \b
    EXAMPLES:
        zsh-completion-tool hints mypackage.cli:app
        zsh-completion-tool hints tree.json --format json
    """
    settings = load_settings()
    tree = _load_tree_or_exit(source, prog_name)

    rows: list[dict[str, Any]] = []
    for path, node in iter_command_paths(tree, frozenset(settings.excluded_commands)):
        for flag in node.flags:
            hint = hint_for_flag(flag)
            rows.append(
                {
                    "command": " ".join(path),
                    "flag": _flag_display_names(flag),
                    "kind": flag.kind.value,
                    "hint": hint.model_dump(mode="json") if hint else None,
                    "summary": describe_hint(hint),
                }
            )

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(rows, indent=2))
        return

    if not rows:
        typer.echo("No flags found.")
        return

    current = None
    for row in rows:
        if row["command"] != current:
            current = row["command"]
            typer.echo(current)
        typer.echo(f"  {row['flag']:<30} {row['summary']}")


@app.command(name="classify")
def classify_command(
    name: Annotated[str, typer.Argument(help="Flag name, e.g. output-format")],
    usage: Annotated[str, typer.Argument(help="Flag description")] = "",
    output_format: FormatOption = OutputFormat.HUMAN,
) -> None:
    """Classify a single flag from its name and description.

    \b
    EXAMPLES:
        zsh-completion-tool classify format "output format (text/json)"
        zsh-completion-tool classify endpoint-url "target address" -f json
    """
    hint = classify(name, usage)
    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(hint.model_dump(mode="json"), indent=2))
    else:
        typer.echo(describe_hint(hint))


# =============================================================================
# Config Commands
# =============================================================================


@config_app.command(name="show")
def config_show() -> None:
    """Show the effective generator settings as JSON."""
    typer.echo(load_settings().model_dump_json(indent=2))


@config_app.command(name="init")
def config_init(
    force: Annotated[bool, typer.Option("--force", help="Overwrite existing settings")] = False,
) -> None:
    """Write the default settings file for editing."""
    path = get_settings_path()
    if path.exists() and not force:
        typer.echo(f"Error: Settings already exist at {path}. Use --force to overwrite.", err=True)
        raise typer.Exit(1)

    save_settings(GeneratorSettings())
    typer.echo(f"Settings written to {path}")


@config_app.command(name="path")
def config_path() -> None:
    """Print the settings file location."""
    typer.echo(str(get_settings_path()))


# =============================================================================
# Register Sub-Apps
# =============================================================================


app.add_typer(config_app, name="config")
add_completion_command(app, PROG_NAME, settings_factory=load_settings)


if __name__ == "__main__":
    app()
