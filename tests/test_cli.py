"""Tests for the zsh-completion-tool command line.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from zsh_completion_tool import __version__
from zsh_completion_tool.cli import app, describe_hint
from zsh_completion_tool.models import CommandNode, CompletionHint
from zsh_completion_tool.storage import get_settings_path

runner = CliRunner()


@pytest.fixture
def tree_file(tmp_path: Path, tool_tree: CommandNode) -> Path:
    """The small example tree written as a JSON source."""
    path = tmp_path / "tree.json"
    path.write_text(tool_tree.model_dump_json(indent=2), encoding="utf-8")
    return path


class TestMain:
    """Tests for the root command."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"zsh-completion-tool version {__version__}" in result.output

    def test_no_subcommand(self) -> None:
        """Running without a command prints a short banner."""
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "zsh completion script generator" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_stdout_from_json(self, tree_file: Path) -> None:
        """Scripts are written to stdout by default."""
        result = runner.invoke(app, ["generate", str(tree_file)])
        assert result.exit_code == 0
        assert result.output.startswith("#compdef tool\n")
        assert "compdef _tool tool" in result.output

    def test_prog_name_override(self, tree_file: Path) -> None:
        """--prog-name renames the root."""
        result = runner.invoke(app, ["generate", str(tree_file), "-n", "other"])
        assert result.exit_code == 0
        assert "compdef _other other" in result.output

    def test_import_path(self) -> None:
        """Typer apps are generated from their import path."""
        result = runner.invoke(app, ["generate", "sample_cli:app", "--prog-name", "sample"])
        assert result.exit_code == 0
        assert "'--format[Output format (text/json)]:value:(text json)'" in result.output
        assert "'--endpoint-url[Remote address]:url:'" in result.output
        assert "_sample__debug" not in result.output

    def test_output_file(self, tmp_path: Path, tree_file: Path) -> None:
        """--output writes the script to a file."""
        output = tmp_path / "out" / "_tool"
        result = runner.invoke(app, ["generate", str(tree_file), "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("#compdef tool")
        assert "Completion script written to" in result.output

    def test_install(self, isolate_config: Path, tree_file: Path) -> None:
        """--install writes to the completions directory."""
        result = runner.invoke(app, ["generate", str(tree_file), "--install"])
        assert result.exit_code == 0
        installed = isolate_config / "completions" / "_tool"
        assert installed.is_file()
        assert "fpath=" in result.output

    def test_missing_source(self, tmp_path: Path) -> None:
        """Unknown sources exit with an error."""
        result = runner.invoke(app, ["generate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_import(self) -> None:
        """Attributes that are not commands exit with an error."""
        result = runner.invoke(app, ["generate", "sample_cli:NOT_A_COMMAND"])
        assert result.exit_code == 1
        assert "Invalid command tree source" in result.output

    def test_respects_saved_settings(self, tree_file: Path) -> None:
        """Saved settings change what is generated."""
        path = get_settings_path()
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"excluded_commands": ["build"]}), encoding="utf-8")
        result = runner.invoke(app, ["generate", str(tree_file)])
        assert result.exit_code == 0
        assert "_tool__build" not in result.output


class TestTreeCommand:
    """Tests for the tree command."""

    def test_prints_loadable_json(self) -> None:
        """The printed tree validates back into a CommandNode."""
        result = runner.invoke(app, ["tree", "sample_cli:app", "-n", "sample"])
        assert result.exit_code == 0
        tree = CommandNode.model_validate_json(result.output)
        assert tree.name == "sample"


class TestHintsCommand:
    """Tests for the hints command."""

    def test_human_output(self, tree_file: Path) -> None:
        """Flags are grouped by command path."""
        result = runner.invoke(app, ["hints", str(tree_file)])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "tool"
        assert lines[1].split() == ["-v,", "--verbose", "flag"]
        assert lines[2].split() == ["--output", "file"]

    def test_json_output(self, tree_file: Path) -> None:
        """JSON output lists one row per flag."""
        result = runner.invoke(app, ["hints", str(tree_file), "--format", "json"])
        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert [row["flag"] for row in rows] == ["-v, --verbose", "--output"]
        assert rows[0]["hint"] is None
        assert rows[1]["hint"]["kind"] == "file"

    def test_no_flags(self, tmp_path: Path) -> None:
        """Trees without flags say so."""
        path = tmp_path / "bare.json"
        path.write_text('{"name": "bare"}', encoding="utf-8")
        result = runner.invoke(app, ["hints", str(path)])
        assert result.exit_code == 0
        assert "No flags found." in result.output


class TestClassifyCommand:
    """Tests for the classify command."""

    def test_enumeration(self) -> None:
        """Enumerations list their values."""
        result = runner.invoke(app, ["classify", "format", "output format (text/json)"])
        assert result.exit_code == 0
        assert result.output.strip() == "enum (text, json)"

    def test_name_only(self) -> None:
        """The description is optional."""
        result = runner.invoke(app, ["classify", "endpoint-url"])
        assert result.output.strip() == "url"

    def test_json(self) -> None:
        """JSON output is the serialized hint."""
        result = runner.invoke(app, ["classify", "retries", "Number of retries", "-f", "json"])
        assert json.loads(result.output) == {"kind": "number", "values": [], "label": "value"}

    def test_describe_hint(self) -> None:
        """Hints are summarised in one word or a value list."""
        assert describe_hint(None) == "flag"
        assert describe_hint(CompletionHint.generic("duration")) == "duration"
        assert describe_hint(CompletionHint.file_path()) == "file"


class TestConfigCommands:
    """Tests for the config sub-commands."""

    def test_path(self) -> None:
        """The settings location is printed."""
        result = runner.invoke(app, ["config", "path"])
        assert result.output.strip() == str(get_settings_path())

    def test_show_defaults(self) -> None:
        """Defaults are shown when nothing is saved."""
        result = runner.invoke(app, ["config", "show"])
        assert json.loads(result.output)["terminal_commands"] == ["version"]

    def test_init_and_force(self) -> None:
        """init refuses to overwrite unless forced."""
        first = runner.invoke(app, ["config", "init"])
        assert first.exit_code == 0
        assert get_settings_path().is_file()

        second = runner.invoke(app, ["config", "init"])
        assert second.exit_code == 1
        assert "--force" in second.output

        forced = runner.invoke(app, ["config", "init", "--force"])
        assert forced.exit_code == 0


class TestCompletionCommand:
    """Tests for the tool's own hidden completion command."""

    def test_prints_own_script(self) -> None:
        """The tool completes its own commands."""
        result = runner.invoke(app, ["completion"])
        assert result.exit_code == 0
        assert result.output.startswith("#compdef zsh-completion-tool\n")
        assert "_zsh_completion_tool__generate() {" in result.output
        assert "_zsh_completion_tool__config__init() {" in result.output
        assert "_zsh_completion_tool__completion" not in result.output

    def test_hidden_from_help(self) -> None:
        """The completion command is not listed in --help."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        listed = [line.strip("│ ") for line in result.output.splitlines()]
        assert not any(line.startswith("completion") for line in listed)
