"""zsh function naming and command tree filtering.

Function identifiers are built along the command path: the root ``my-tool``
becomes ``_my_tool`` and its child ``build-all`` becomes
``_my_tool__build_all``. Two commands sharing a local name under different
parents therefore never collide. Sibling names that still map to the same
identifier (``run-all`` and ``run_all``) are rejected by ``CommandNode``.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

from collections.abc import Collection, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zsh_completion_tool.models import CommandNode

DEFAULT_EXCLUDED_COMMANDS = frozenset({"help", "completion"})
DEFAULT_TERMINAL_COMMANDS = frozenset({"version"})


def to_function_name(name: str) -> str:
    """Convert a command name to a zsh function name.

    Example:
        >>> to_function_name("my-tool")
        '_my_tool'
    """
    return "_" + name.replace("-", "_")


def child_function_name(parent_function: str, child_name: str) -> str:
    """Build the function name of a child command from its parent's.

    Example:
        >>> child_function_name("_my_tool", "build-all")
        '_my_tool__build_all'
    """
    return parent_function + "_" + to_function_name(child_name)


def commands_function_name(function_name: str) -> str:
    """Name of the function listing a command's sub-commands."""
    return function_name + "_commands"


def visible_children(
    node: CommandNode,
    excluded: Collection[str] = DEFAULT_EXCLUDED_COMMANDS,
) -> list[CommandNode]:
    """Children offered as completions, in declared order.

    Hidden commands and commands whose name is in ``excluded`` are skipped.
    """
    return [child for child in node.commands if not child.hidden and child.name not in excluded]


def should_expand(
    node: CommandNode,
    terminal: Collection[str] = DEFAULT_TERMINAL_COMMANDS,
) -> bool:
    """Whether a command's sub-commands are offered as completions.

    Terminal commands such as ``version`` only carry leaf variants
    (``version short``, ``version json``) that are not completed.
    """
    return node.name not in terminal


def iter_command_paths(
    node: CommandNode,
    excluded: Collection[str] = DEFAULT_EXCLUDED_COMMANDS,
    path: tuple[str, ...] = (),
) -> Iterator[tuple[tuple[str, ...], CommandNode]]:
    """Yield ``(path, node)`` for a command and its visible descendants, pre-order."""
    path = (*path, node.name)
    yield path, node
    for child in visible_children(node, excluded):
        yield from iter_command_paths(child, excluded, path)
