"""Command tree loading.

Resolves a user-supplied source string to a CommandNode tree. A source is
either a JSON file (the format printed by ``zsh-completion-tool tree``) or
an import path ``module:attribute`` naming a click command or a typer app.

Functions:
    load_command_tree: Resolve any source string.
    load_tree_from_json: Load a tree from a JSON file.
    load_tree_from_import: Load a tree from a click/typer object.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

import importlib
from pathlib import Path

import click
import typer
from pydantic import ValidationError

from zsh_completion_tool.adapters import command_from_click, command_from_typer
from zsh_completion_tool.errors import InvalidTreeSourceError, TreeSourceNotFoundError
from zsh_completion_tool.logging_config import get_logger
from zsh_completion_tool.models import CommandNode
from zsh_completion_tool.telemetry import traced

logger = get_logger(__name__)


def is_import_path(source: str) -> bool:
    """Whether ``source`` looks like ``module:attribute`` rather than a file.

    Example:
        >>> is_import_path("mypackage.cli:app")
        True
        >>> is_import_path("trees/tool.json")
        False
    """
    module, sep, attribute = source.partition(":")
    if not sep or not module or not attribute:
        return False
    return all(part.isidentifier() for part in module.split(".")) and all(
        part.isidentifier() for part in attribute.split(".")
    )


def load_tree_from_json(path: Path) -> CommandNode:
    """Load a command tree from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The validated command tree.

    Raises:
        TreeSourceNotFoundError: If the file does not exist.
        InvalidTreeSourceError: If the file is not a valid tree.
    """
    if not path.is_file():
        raise TreeSourceNotFoundError(str(path), "file does not exist")

    try:
        tree = CommandNode.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise InvalidTreeSourceError(str(path), f"{e.error_count()} validation error(s): {e}") from e

    logger.info("Loaded command tree '%s' from %s", tree.name, path)
    return tree


def load_tree_from_import(source: str, name: str | None = None) -> CommandNode:
    """Load a command tree from a click command or typer app.

    Args:
        source: Import path ``module:attribute`` (attribute may be dotted).
        name: Invocation name for the root command.

    Returns:
        The adapted command tree.

    Raises:
        TreeSourceNotFoundError: If the module or attribute does not exist.
        InvalidTreeSourceError: If the attribute is not a click/typer object.
    """
    module_name, _, attribute = source.partition(":")
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as e:
        raise TreeSourceNotFoundError(source, f"cannot import module '{module_name}' ({e})") from e

    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise TreeSourceNotFoundError(
                source, f"module '{module_name}' has no attribute '{attribute}'"
            ) from e

    if isinstance(target, typer.Typer):
        tree = command_from_typer(target, name=name)
    elif isinstance(target, click.Command):
        tree = command_from_click(target, name=name)
    else:
        raise InvalidTreeSourceError(
            source, f"expected a click command or typer app, got {type(target).__name__}"
        )

    logger.info("Loaded command tree '%s' from %s", tree.name, source)
    return tree


@traced("load_command_tree")
def load_command_tree(source: str, name: str | None = None) -> CommandNode:
    """Resolve a source string to a command tree.

    Existing files are always read as JSON; otherwise ``module:attribute``
    sources are imported.

    Args:
        source: JSON file path or import path.
        name: Invocation name overriding the root command's name.

    Returns:
        The command tree.

    Raises:
        TreeSourceError: If the source cannot be resolved.
    """
    path = Path(source).expanduser()
    if path.is_file() or not is_import_path(source):
        tree = load_tree_from_json(path)
        if name and name != tree.name:
            tree = tree.model_copy(update={"name": name})
        return tree
    return load_tree_from_import(source, name=name)
