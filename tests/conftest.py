"""Pytest configuration and fixtures.

Redirects settings and installed completion scripts to a temporary
directory, so tests never touch ~/.config/zsh-completion-tool/ or
~/.zsh/completions/.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from zsh_completion_tool.models import CommandNode, FlagKind, FlagSpec


@pytest.fixture(autouse=True)
def isolate_config(tmp_path: Path) -> Generator[Path, None, None]:
    """Automatically isolate all tests from the user's home directory.

    Patches:
    - zsh_completion_tool.storage.paths.get_config_dir: settings.json location
    - zsh_completion_tool.storage.paths.get_zsh_completions_dir: --install target
    """
    config_dir = tmp_path / "config"
    completions_dir = tmp_path / "completions"
    with patch(
        "zsh_completion_tool.storage.paths.get_config_dir",
        return_value=config_dir,
    ):
        with patch(
            "zsh_completion_tool.storage.paths.get_zsh_completions_dir",
            return_value=completions_dir,
        ):
            yield tmp_path


@pytest.fixture
def tool_tree() -> CommandNode:
    """Root 'tool' with -v/--verbose, --output and a 'build' sub-command."""
    return CommandNode(
        name="tool",
        usage="Example tool",
        flags=(
            FlagSpec(names=("v", "verbose"), usage="Verbose output"),
            FlagSpec(names=("output",), usage="output file path", kind=FlagKind.TEXT),
        ),
        commands=(CommandNode(name="build", usage="Build the project"),),
    )


@pytest.fixture
def nested_tree() -> CommandNode:
    """Multi-level tree with hidden, excluded and terminal commands."""
    return CommandNode(
        name="my-tool",
        usage="A tool with nested commands",
        commands=(
            CommandNode(
                name="remote",
                usage="Manage remotes",
                aliases=("rmt",),
                commands=(
                    CommandNode(
                        name="add",
                        usage="Add a remote",
                        flags=(
                            FlagSpec(names=("url",), usage="Remote address", kind=FlagKind.TEXT),
                        ),
                    ),
                    CommandNode(name="remove", usage="Remove a remote"),
                    CommandNode(name="prune", usage="Internal cleanup", hidden=True),
                ),
            ),
            CommandNode(
                name="version",
                usage="Show version",
                commands=(
                    CommandNode(name="short", usage="Version number only"),
                    CommandNode(name="json", usage="Version as JSON"),
                ),
            ),
            CommandNode(name="dump-state", usage="Debugging aid", hidden=True),
            CommandNode(name="help", usage="Show help"),
            CommandNode(name="completion", usage="Generate completion"),
            CommandNode(
                name="run-all",
                usage="Run every task",
                flags=(
                    FlagSpec(names=("j", "jobs"), usage="Parallel jobs", kind=FlagKind.INTEGER),
                    FlagSpec(names=("timeout",), usage="Time limit", kind=FlagKind.DURATION),
                ),
            ),
        ),
    )
