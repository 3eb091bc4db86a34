"""Storage paths for zsh-completion-tool.

Functions:
    get_config_dir: Get the configuration directory.
    get_settings_path: Get the path to settings.json.
    get_zsh_completions_dir: Get the user-level zsh completions directory.
    get_default_completion_path: Get the install path for a tool's script.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from zsh_completion_tool.storage.paths import (
    get_config_dir,
    get_default_completion_path,
    get_settings_path,
    get_zsh_completions_dir,
)

__all__ = [
    "get_config_dir",
    "get_default_completion_path",
    "get_settings_path",
    "get_zsh_completions_dir",
]
