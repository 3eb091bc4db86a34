"""Settings management for zsh-completion-tool.

Generator settings persist as JSON in ~/.config/zsh-completion-tool/.

Functions:
    load_settings: Load settings from disk.
    save_settings: Save settings to disk.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

import json

from pydantic import ValidationError

from zsh_completion_tool.logging_config import get_logger
from zsh_completion_tool.models import GeneratorSettings
from zsh_completion_tool.storage.paths import get_settings_path

logger = get_logger(__name__)


def load_settings() -> GeneratorSettings:
    """Load settings from disk.

    Returns:
        GeneratorSettings. Defaults if the file is missing or unreadable.

    Example:
        >>> settings = load_settings()
        >>> settings.terminal_commands
        ['version']
    """
    settings_path = get_settings_path()

    if not settings_path.exists():
        logger.debug("Settings file not found, using defaults")
        return GeneratorSettings()

    try:
        with open(settings_path, encoding="utf-8") as f:
            data = json.load(f)
        settings = GeneratorSettings(**data)
        logger.debug("Loaded settings from %s", settings_path)
        return settings
    except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.warning("Failed to load settings from %s: %s. Using defaults.", settings_path, e)
        return GeneratorSettings()


def save_settings(settings: GeneratorSettings) -> None:
    """Save settings to disk.

    Args:
        settings: Settings to save.
    """
    settings_path = get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    with open(settings_path, "w", encoding="utf-8") as f:
        json.dump(settings.model_dump(), f, indent=2)

    logger.debug("Saved settings to %s", settings_path)
