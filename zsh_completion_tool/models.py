"""Data models for zsh-completion-tool.

This module provides the Pydantic v2 models that describe a command-line
tool's command hierarchy, the completion hints derived from its flags, and
the settings that tune script generation.

Models:
    FlagSpec: A flag (option) declared on a command.
    CommandNode: A command or sub-command with its flags and children.
    CompletionHint: Inferred shape of the values a flag accepts.
    GeneratorSettings: User-tunable generation settings.

Enums:
    FlagKind: Declared kind of a flag (boolean or one of the valued kinds).
    HintKind: Kind of completion hint.

The command tree models are frozen: once built by an adapter or loader,
generation only ever reads them.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from zsh_completion_tool.naming import (
    child_function_name,
    commands_function_name,
    to_function_name,
)

# =============================================================================
# Enums
# =============================================================================


class FlagKind(str, Enum):
    """Declared kind of a flag.

    Values:
        BOOLEAN: Takes no value (``--verbose``).
        TEXT: Free-form string value.
        INTEGER: Integer value.
        DURATION: Time span such as ``30s``.
        REPEATED_TEXT: String value that may be given several times.
        OTHER: Any other valued flag whose type is unknown.
    """

    BOOLEAN = "boolean"
    TEXT = "text"
    INTEGER = "integer"
    DURATION = "duration"
    REPEATED_TEXT = "repeated_text"
    OTHER = "other"


class HintKind(str, Enum):
    """Kind of completion hint inferred for a valued flag."""

    ENUM = "enum"
    URL = "url"
    FILE = "file"
    NUMBER = "number"
    VALUE = "value"


# =============================================================================
# Command Tree
# =============================================================================


class FlagSpec(BaseModel):
    """A flag declared on a command.

    Names are stored without leading dashes: ``v`` is rendered as ``-v`` and
    ``verbose`` as ``--verbose``.

    Attributes:
        names: One or more names, at most one short and at most one long.
        usage: Human-readable description.
        kind: Declared kind; every kind except BOOLEAN takes a value.

    Example:
        >>> flag = FlagSpec(names=("v", "verbose"), usage="Verbose output")
        >>> flag.short_name, flag.long_name
        ('v', 'verbose')
    """

    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...] = Field(min_length=1)
    usage: str = ""
    kind: FlagKind = FlagKind.BOOLEAN

    @field_validator("names")
    @classmethod
    def validate_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Strip dashes and enforce one short and one long name at most."""
        names = tuple(name.lstrip("-") for name in value)
        if any(not name for name in names):
            raise ValueError(
                f"Invalid flag names: {list(value)}. "
                f"Every flag name needs at least one character after its dashes."
            )
        shorts = [name for name in names if len(name) == 1]
        longs = [name for name in names if len(name) > 1]
        if len(shorts) > 1 or len(longs) > 1:
            raise ValueError(
                f"Invalid flag names: {list(value)}. "
                f"A flag may declare at most one short name (e.g. 'v') "
                f"and at most one long name (e.g. 'verbose')."
            )
        return names

    @property
    def takes_value(self) -> bool:
        """Whether the flag consumes a value."""
        return self.kind != FlagKind.BOOLEAN

    @property
    def short_name(self) -> str | None:
        """The single-character name, if any."""
        return next((name for name in self.names if len(name) == 1), None)

    @property
    def long_name(self) -> str | None:
        """The multi-character name, if any."""
        return next((name for name in self.names if len(name) > 1), None)


class CommandNode(BaseModel):
    """A command or sub-command in the tool's hierarchy.

    Attributes:
        name: Command name, unique among its siblings.
        usage: Short human-readable description.
        aliases: Alternative names accepted for the command.
        hidden: Hidden commands are never offered as completions.
        commands: Child commands in declared order.
        flags: Flags in declared order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    usage: str = ""
    aliases: tuple[str, ...] = ()
    hidden: bool = False
    commands: tuple[CommandNode, ...] = ()
    flags: tuple[FlagSpec, ...] = ()

    @model_validator(mode="after")
    def validate_unique_siblings(self) -> CommandNode:
        """Reject duplicate child names, flag name sets and zsh function names."""
        seen_commands: set[str] = set()
        for child in self.commands:
            if child.name in seen_commands:
                raise ValueError(
                    f"Duplicate sub-command '{child.name}' under '{self.name}'. "
                    f"Sibling command names must be unique."
                )
            seen_commands.add(child.name)

        seen_flags: set[frozenset[str]] = set()
        for flag in self.flags:
            key = frozenset(flag.names)
            if key in seen_flags:
                raise ValueError(
                    f"Duplicate flag {sorted(key)} on '{self.name}'. "
                    f"Each flag must declare a distinct set of names."
                )
            seen_flags.add(key)

        seen_functions: dict[str, str] = {}
        for function_name, path in _iter_function_names(self, to_function_name(self.name), self.name):
            if function_name in seen_functions:
                raise ValueError(
                    f"Commands '{seen_functions[function_name]}' and '{path}' both map to "
                    f"the zsh function '{function_name}'. Rename one of them; '-' and '_' "
                    f"are equivalent in function names and '<name>_commands' is reserved "
                    f"for the sub-command list of '<name>'."
                )
            seen_functions[function_name] = path
        return self


def _iter_function_names(
    node: CommandNode, function_name: str, path: str
) -> Iterator[tuple[str, str]]:
    """Yield ``(function name, command path)`` for every function below ``node``.

    Covers hidden and excluded commands too, so a tree is valid under any
    generator settings.
    """
    for child in node.commands:
        child_function = child_function_name(function_name, child.name)
        child_path = f"{path} {child.name}"
        yield child_function, child_path
        if child.commands:
            yield commands_function_name(child_function), f"{child_path} (sub-command list)"
        yield from _iter_function_names(child, child_function, child_path)


# =============================================================================
# Completion Hints
# =============================================================================


class CompletionHint(BaseModel):
    """Inferred shape of the values a flag accepts.

    Attributes:
        kind: Hint kind.
        values: Candidate values, only for ENUM hints.
        label: Message shown by zsh for VALUE hints (e.g. "duration").

    Example:
        >>> CompletionHint.enumerated(["json", "text"]).values
        ('json', 'text')
    """

    model_config = ConfigDict(frozen=True)

    kind: HintKind
    values: tuple[str, ...] = ()
    label: str = "value"

    @classmethod
    def enumerated(cls, values: list[str] | tuple[str, ...]) -> CompletionHint:
        """Hint offering a fixed set of values."""
        return cls(kind=HintKind.ENUM, values=tuple(values))

    @classmethod
    def url(cls) -> CompletionHint:
        """Hint for a URL value."""
        return cls(kind=HintKind.URL)

    @classmethod
    def file_path(cls) -> CompletionHint:
        """Hint for a file system path."""
        return cls(kind=HintKind.FILE)

    @classmethod
    def number(cls) -> CompletionHint:
        """Hint for a numeric value."""
        return cls(kind=HintKind.NUMBER)

    @classmethod
    def generic(cls, label: str = "value") -> CompletionHint:
        """Hint for an opaque value."""
        return cls(kind=HintKind.VALUE, label=label)


# =============================================================================
# Settings
# =============================================================================


class GeneratorSettings(BaseModel):
    """Settings that tune script generation.

    Attributes:
        excluded_commands: Command names never listed or traversed.
        terminal_commands: Command names whose children are never expanded.
        help_description: Description of the root ``-h/--help`` option.
    """

    excluded_commands: list[str] = Field(default_factory=lambda: ["help", "completion"])
    terminal_commands: list[str] = Field(default_factory=lambda: ["version"])
    help_description: str = "Show help information"
