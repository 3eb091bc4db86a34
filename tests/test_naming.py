"""Tests for zsh function naming and command tree filtering.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from zsh_completion_tool.models import CommandNode
from zsh_completion_tool.naming import (
    child_function_name,
    commands_function_name,
    iter_command_paths,
    should_expand,
    to_function_name,
    visible_children,
)


class TestFunctionNames:
    """Tests for function identifier construction."""

    def test_root_name_hyphens_become_underscores(self) -> None:
        """Hyphens in the root name are replaced."""
        assert to_function_name("my-tool") == "_my_tool"
        assert to_function_name("tool") == "_tool"

    def test_child_name_joins_with_double_underscore(self) -> None:
        """Child functions extend their parent's name."""
        assert child_function_name("_tool", "build") == "_tool__build"
        assert child_function_name("_my_tool__remote", "add-url") == "_my_tool__remote__add_url"

    def test_same_local_name_under_different_parents(self) -> None:
        """Equal local names under different parents stay distinct."""
        first = child_function_name(child_function_name("_tool", "remote"), "list")
        second = child_function_name(child_function_name("_tool", "branch"), "list")
        assert first != second

    def test_commands_function_name(self) -> None:
        """The listing function appends _commands."""
        assert commands_function_name("_tool__remote") == "_tool__remote_commands"


class TestVisibleChildren:
    """Tests for child filtering."""

    def test_hidden_and_excluded_are_skipped(self, nested_tree: CommandNode) -> None:
        """Hidden, help and completion commands are not visible."""
        names = [child.name for child in visible_children(nested_tree)]
        assert names == ["remote", "version", "run-all"]

    def test_custom_exclusions(self, nested_tree: CommandNode) -> None:
        """Only the given names are excluded."""
        names = [child.name for child in visible_children(nested_tree, excluded={"remote"})]
        assert names == ["version", "help", "completion", "run-all"]

    def test_leaf_has_no_children(self) -> None:
        """A command without sub-commands has nothing visible."""
        assert visible_children(CommandNode(name="leaf")) == []


class TestShouldExpand:
    """Tests for terminal command handling."""

    def test_version_is_terminal(self) -> None:
        """The version command is never expanded by default."""
        assert should_expand(CommandNode(name="version")) is False

    def test_other_commands_expand(self) -> None:
        """Any other command expands."""
        assert should_expand(CommandNode(name="remote")) is True

    def test_custom_terminal_set(self) -> None:
        """The terminal set can be replaced."""
        assert should_expand(CommandNode(name="version"), terminal=()) is True
        assert should_expand(CommandNode(name="remote"), terminal={"remote"}) is False


class TestIterCommandPaths:
    """Tests for pre-order tree traversal."""

    def test_pre_order_visible_paths(self, nested_tree: CommandNode) -> None:
        """Paths are yielded parent first, skipping invisible commands."""
        paths = [" ".join(path) for path, _ in iter_command_paths(nested_tree)]
        assert paths == [
            "my-tool",
            "my-tool remote",
            "my-tool remote add",
            "my-tool remote remove",
            "my-tool version",
            "my-tool version short",
            "my-tool version json",
            "my-tool run-all",
        ]
