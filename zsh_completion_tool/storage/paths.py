"""Path management for zsh-completion-tool.

Settings live under ~/.config/zsh-completion-tool/. Installed completion
scripts go to ~/.zsh/completions/, which users add to their fpath.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from pathlib import Path


def get_config_dir() -> Path:
    """Get the configuration directory for zsh-completion-tool.

    Returns:
        Path to ~/.config/zsh-completion-tool/
    """
    return Path.home() / ".config" / "zsh-completion-tool"


def get_settings_path() -> Path:
    """Get the path to the generator settings file.

    Returns:
        Path to ~/.config/zsh-completion-tool/settings.json
    """
    return get_config_dir() / "settings.json"


def get_zsh_completions_dir() -> Path:
    """Get the user-level zsh completions directory.

    Returns:
        Path to ~/.zsh/completions/
    """
    return Path.home() / ".zsh" / "completions"


def get_default_completion_path(prog_name: str) -> Path:
    """Get the install path of a tool's completion script.

    zsh autoloads a completion function from a file named after it, so
    the script for ``my-tool`` is stored as ``_my-tool``.

    Args:
        prog_name: The tool's invocation name.

    Returns:
        Path to ~/.zsh/completions/_<prog_name>

    Example:
        >>> get_default_completion_path("my-tool").name
        '_my-tool'
    """
    return get_zsh_completions_dir() / f"_{prog_name}"
