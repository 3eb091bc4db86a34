"""Hidden ``completion`` command for typer applications.

``add_completion_command`` wires a hidden ``completion`` sub-command into
any typer app. When invoked, it prints the zsh completion script for that
same app to stdout. The command is hidden, so it shows up neither in
``--help`` nor in the generated completions.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

import sys
from collections.abc import Callable

import typer

from zsh_completion_tool.adapters import command_from_typer
from zsh_completion_tool.emitter import write_zsh
from zsh_completion_tool.logging_config import get_logger
from zsh_completion_tool.models import GeneratorSettings

logger = get_logger(__name__)

COMPLETION_COMMAND_NAME = "completion"

INSTALL_INSTRUCTIONS = """Generate the zsh completion script.

\b
Enable completion:

\b
    # Make sure the completions directory is in fpath
    echo 'fpath=(~/.zsh/completions $fpath)' >> ~/.zshrc
    echo 'autoload -Uz compinit && compinit' >> ~/.zshrc

\b
    # Generate the completion script
    mkdir -p ~/.zsh/completions
    {prog} completion > ~/.zsh/completions/_{prog}

\b
    # Reload zsh
    exec zsh
"""


def add_completion_command(
    app: typer.Typer,
    prog_name: str,
    settings_factory: Callable[[], GeneratorSettings] = GeneratorSettings,
) -> None:
    """Register a hidden ``completion`` command on a typer app.

    Args:
        app: The application to complete; also receives the command.
        prog_name: The tool's invocation name, used as the root command name.
        settings_factory: Called on each invocation to get generation settings.

    Example:
        >>> app = typer.Typer()
        >>> add_completion_command(app, "my-tool")
    """

    @app.command(
        name=COMPLETION_COMMAND_NAME,
        hidden=True,
        help=INSTALL_INSTRUCTIONS.format(prog=prog_name),
        short_help="Generate the zsh completion script",
    )
    def completion_command() -> None:
        tree = command_from_typer(app, name=prog_name)
        logger.info("Writing zsh completion script for '%s'", prog_name)
        # Write errors propagate unchanged
        write_zsh(sys.stdout, tree, settings_factory())
