"""Tests for settings persistence.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
from pathlib import Path

from zsh_completion_tool.models import GeneratorSettings
from zsh_completion_tool.settings import load_settings, save_settings
from zsh_completion_tool.storage import get_default_completion_path, get_settings_path


class TestSettingsPaths:
    """Tests for storage locations under the isolated home."""

    def test_settings_path(self, isolate_config: Path) -> None:
        """Settings live in the config directory."""
        assert get_settings_path() == isolate_config / "config" / "settings.json"

    def test_default_completion_path(self, isolate_config: Path) -> None:
        """Installed scripts are named after the program."""
        assert get_default_completion_path("my-tool") == isolate_config / "completions" / "_my-tool"


class TestLoadSettings:
    """Tests for loading settings."""

    def test_defaults_when_missing(self) -> None:
        """A missing file yields defaults."""
        assert load_settings() == GeneratorSettings()

    def test_save_and_load(self) -> None:
        """Saved settings load back."""
        settings = GeneratorSettings(excluded_commands=["help"], terminal_commands=[])
        save_settings(settings)
        assert load_settings() == settings

    def test_saved_file_is_json(self) -> None:
        """The settings file is indented JSON."""
        save_settings(GeneratorSettings())
        data = json.loads(get_settings_path().read_text(encoding="utf-8"))
        assert data["terminal_commands"] == ["version"]

    def test_corrupt_file_falls_back(self) -> None:
        """Unreadable JSON yields defaults."""
        path = get_settings_path()
        path.parent.mkdir(parents=True)
        path.write_text("{broken", encoding="utf-8")
        assert load_settings() == GeneratorSettings()

    def test_wrong_types_fall_back(self) -> None:
        """Values of the wrong type yield defaults."""
        path = get_settings_path()
        path.parent.mkdir(parents=True)
        path.write_text('{"excluded_commands": 5}', encoding="utf-8")
        assert load_settings() == GeneratorSettings()
