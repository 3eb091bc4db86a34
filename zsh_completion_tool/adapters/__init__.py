"""Adapters building command trees from host CLI frameworks.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from zsh_completion_tool.adapters.click_adapter import (
    command_from_click,
    command_from_typer,
    flag_from_option,
)

__all__ = ["command_from_click", "command_from_typer", "flag_from_option"]
