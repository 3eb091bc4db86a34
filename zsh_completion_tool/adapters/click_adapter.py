"""Command tree adapter for click and typer applications.

Converts a live ``click.Command`` (or the click command typer builds from a
``typer.Typer`` app) into a CommandNode tree. Only static metadata is read:
names, help texts, option declarations and visibility. Parameter types
decide a flag's declared kind, never its completion values.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

import click
import typer

from zsh_completion_tool.logging_config import get_logger
from zsh_completion_tool.models import CommandNode, FlagKind, FlagSpec

logger = get_logger(__name__)

# Generous limit: zsh shows the whole description next to each sub-command
SHORT_HELP_LIMIT = 120
DEFAULT_ROOT_NAME = "cli"


def _option_kind(option: click.Option) -> FlagKind:
    """Map a click option to the declared kind of its flag."""
    if option.is_flag or option.count:
        return FlagKind.BOOLEAN
    if option.multiple:
        return FlagKind.REPEATED_TEXT
    if isinstance(option.type, click.types.IntParamType):
        return FlagKind.INTEGER
    if isinstance(option.type, click.types.StringParamType):
        return FlagKind.TEXT
    return FlagKind.OTHER


def flag_from_option(option: click.Option) -> FlagSpec | None:
    """Convert a click option to a FlagSpec.

    Only the first short and the first long name are kept; secondary
    names such as ``--no-color`` are ignored.

    Args:
        option: The click option.

    Returns:
        FlagSpec, or None for hidden options.
    """
    if option.hidden:
        return None

    short: str | None = None
    long: str | None = None
    for opt in option.opts:
        name = opt.lstrip("-")
        if not name:
            continue
        if len(name) == 1 and short is None:
            short = name
        elif len(name) > 1 and long is None:
            long = name

    names = tuple(name for name in (short, long) if name is not None)
    if not names:
        logger.debug("Skipping option without usable names: %s", option.opts)
        return None

    return FlagSpec(names=names, usage=option.help or "", kind=_option_kind(option))


def command_from_click(command: click.Command, name: str | None = None) -> CommandNode:
    """Build a CommandNode tree from a click command.

    Args:
        command: Root click command or group.
        name: Name to use instead of the command's own name. Groups are
            walked with the names their sub-commands are registered under.

    Returns:
        The command tree rooted at ``command``.
    """
    flags: list[FlagSpec] = []
    for param in command.params:
        if not isinstance(param, click.Option):
            continue
        flag = flag_from_option(param)
        if flag is not None:
            flags.append(flag)

    children: list[CommandNode] = []
    if isinstance(command, click.Group):
        for child_name, child in command.commands.items():
            children.append(command_from_click(child, name=child_name))

    node_name = name or command.name or DEFAULT_ROOT_NAME
    logger.debug(
        "Adapted click command '%s' (%d flags, %d sub-commands)",
        node_name,
        len(flags),
        len(children),
    )
    return CommandNode(
        name=node_name,
        usage=command.get_short_help_str(limit=SHORT_HELP_LIMIT),
        aliases=tuple(getattr(command, "aliases", None) or ()),
        hidden=command.hidden,
        commands=tuple(children),
        flags=tuple(flags),
    )


def command_from_typer(app: typer.Typer, name: str | None = None) -> CommandNode:
    """Build a CommandNode tree from a typer application.

    Args:
        app: The typer application.
        name: The tool's invocation name.

    Returns:
        The command tree of the click command typer builds for ``app``.
    """
    return command_from_click(typer.main.get_command(app), name=name)
