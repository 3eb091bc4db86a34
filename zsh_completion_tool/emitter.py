"""zsh completion script generation.

Walks a CommandNode tree depth-first and renders one zsh function per
command, built on ``_arguments`` for flags and on ``_describe`` for the
list of sub-commands:

    #compdef my-tool

    # my-tool zsh completion script (auto-generated)

    _my_tool() { ... }              # flags + dispatch on the first word
    _my_tool_commands() { ... }     # sub-commands with descriptions
    _my_tool__build() { ... }       # one function per sub-command
    ...
    compdef _my_tool my-tool

Every render function returns a list of lines; only ``generate`` joins
them, so a generation run shares no mutable state with any other.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

from typing import TextIO

from zsh_completion_tool.classifier import hint_for_flag
from zsh_completion_tool.logging_config import get_logger
from zsh_completion_tool.models import (
    CommandNode,
    CompletionHint,
    FlagSpec,
    GeneratorSettings,
    HintKind,
)
from zsh_completion_tool.naming import (
    child_function_name,
    commands_function_name,
    should_expand,
    to_function_name,
    visible_children,
)
from zsh_completion_tool.telemetry import trace_span

logger = get_logger(__name__)

INDENT = "    "


def escape_single_quotes(text: str) -> str:
    """Escape text for use inside a single-quoted zsh word."""
    return text.replace("'", "'\\''")


def sanitize_usage(text: str) -> str:
    """Make a flag description safe inside an ``_arguments`` entry.

    Square brackets delimit the description in ``_arguments`` specs, so
    they are turned into parentheses.
    """
    return escape_single_quotes(text).replace("[", "(").replace("]", ")")


def render_hint(hint: CompletionHint) -> str:
    """Render the value part of an ``_arguments`` entry.

    Example:
        >>> render_hint(CompletionHint.enumerated(["json", "text"]))
        ':value:(json text)'
    """
    if hint.kind == HintKind.ENUM:
        return f":value:({' '.join(hint.values)})"
    if hint.kind == HintKind.URL:
        return ":url:"
    if hint.kind == HintKind.FILE:
        return ":file:_files"
    if hint.kind == HintKind.NUMBER:
        return ":number:"
    return f":{hint.label}:"


def render_flag(flag: FlagSpec) -> str:
    """Render one flag as an ``_arguments`` entry.

    Example:
        >>> render_flag(FlagSpec(names=("v", "verbose"), usage="Verbose"))
        "'(-v --verbose)'{-v,--verbose}'[Verbose]'"
    """
    usage = sanitize_usage(flag.usage)
    hint = hint_for_flag(flag)
    suffix = render_hint(hint) if hint is not None else ""

    short, long = flag.short_name, flag.long_name
    if short is not None and long is not None:
        group = f"-{short} --{long}"
        return f"'({group})'{{-{short},--{long}}}'[{usage}]{suffix}'"

    name = flag.names[0]
    prefix = "-" if len(name) == 1 else "--"
    return f"'{prefix}{name}[{usage}]{suffix}'"


class ZshCompletionGenerator:
    """Generates zsh completion scripts from command trees.

    Example:
        >>> generator = ZshCompletionGenerator()
        >>> script = generator.generate(CommandNode(name="tool"))
        >>> script.splitlines()[0]
        '#compdef tool'
    """

    def __init__(self, settings: GeneratorSettings | None = None) -> None:
        """Initialize the generator.

        Args:
            settings: Generation settings. Defaults to GeneratorSettings().
        """
        self.settings = settings or GeneratorSettings()
        self._excluded = frozenset(self.settings.excluded_commands)
        self._terminal = frozenset(self.settings.terminal_commands)

    def generate(self, root: CommandNode) -> str:
        """Generate the completion script for a command tree.

        Args:
            root: Root command; its name is the tool's invocation name.

        Returns:
            The complete script text.
        """
        function_name = to_function_name(root.name)

        with trace_span("generate_zsh", {"command.name": root.name}) as span:
            lines = [
                f"#compdef {root.name}",
                "",
                f"# {root.name} zsh completion script (auto-generated)",
                "",
            ]
            lines.extend(self._function_lines(root, function_name, is_root=True))
            lines.extend(self._descendant_lines(root, function_name))
            lines.append(f"compdef {function_name} {root.name}")

            script = "\n".join(lines) + "\n"
            if span is not None:
                span.set_attribute("script.lines", len(lines))

        logger.debug("Generated %d lines of zsh completion for '%s'", len(lines), root.name)
        return script

    def visible_children(self, node: CommandNode) -> list[CommandNode]:
        """Children of ``node`` offered as completions."""
        return visible_children(node, self._excluded)

    def expands(self, node: CommandNode) -> bool:
        """Whether ``node`` offers its children as completions."""
        return bool(self.visible_children(node)) and should_expand(node, self._terminal)

    def flag_specs(self, node: CommandNode, is_root: bool = False) -> list[str]:
        """Render the ``_arguments`` entries of a command's flags."""
        specs: list[str] = []
        for flag in node.flags:
            spec = render_flag(flag)
            if spec not in specs:
                specs.append(spec)

        if is_root:
            help_text = sanitize_usage(self.settings.help_description)
            specs.append(f"'(- *)'{{-h,--help}}'[{help_text}]'")
        return specs

    def _function_lines(self, node: CommandNode, function_name: str, is_root: bool = False) -> list[str]:
        """Render the completion function of one command."""
        specs = self.flag_specs(node, is_root)
        children = self.visible_children(node)
        expands = self.expands(node)

        lines = [
            f"{function_name}() {{",
            f'{INDENT}local curcontext="$curcontext" state line',
            f"{INDENT}typeset -A opt_args",
            "",
        ]

        if specs:
            lines.append(f"{INDENT}local -a flags")
            lines.append(f"{INDENT}flags=(")
            lines.extend(f"{INDENT * 2}{spec}" for spec in specs)
            lines.append(f"{INDENT})")
            lines.append("")

        lines.append(f"{INDENT}_arguments -C \\")
        if specs:
            lines.append(f"{INDENT * 2}$flags \\")
        if expands:
            lines.append(f"{INDENT * 2}'1: :{commands_function_name(function_name)}' \\")
            lines.append(f"{INDENT * 2}'*::arg:->args'")
            lines.extend(self._dispatch_lines(children, function_name))
        else:
            lines.append(f"{INDENT * 2}'*:file:_files'")

        lines.append("}")
        lines.append("")
        return lines

    def _dispatch_lines(self, children: list[CommandNode], function_name: str) -> list[str]:
        """Render the ``case`` block routing the first word to a child function."""
        lines = [
            "",
            f"{INDENT}case $state in",
            f"{INDENT * 2}args)",
            f"{INDENT * 3}case $line[1] in",
        ]
        for child in children:
            patterns = "|".join((child.name, *child.aliases))
            lines.append(f"{INDENT * 4}{patterns})")
            lines.append(f"{INDENT * 5}{child_function_name(function_name, child.name)}")
            lines.append(f"{INDENT * 5};;")
        lines.extend(
            [
                f"{INDENT * 3}esac",
                f"{INDENT * 3};;",
                f"{INDENT}esac",
            ]
        )
        return lines

    def _commands_lines(self, children: list[CommandNode], function_name: str) -> list[str]:
        """Render the function listing sub-commands for ``_describe``."""
        lines = [
            f"{commands_function_name(function_name)}() {{",
            f"{INDENT}local -a commands",
            f"{INDENT}commands=(",
        ]
        for child in children:
            lines.append(f"{INDENT * 2}'{child.name}:{escape_single_quotes(child.usage)}'")
        lines.extend(
            [
                f"{INDENT})",
                f"{INDENT}_describe -t commands 'commands' commands",
                "}",
                "",
            ]
        )
        return lines

    def _descendant_lines(self, node: CommandNode, function_name: str) -> list[str]:
        """Render the sub-command list of ``node`` and the functions below it.

        Each visible child gets a function. Only children that expand are
        descended into, so a terminal command such as ``version`` gets its
        own function but nothing for its children.
        """
        children = self.visible_children(node)
        if not children:
            return []

        lines = self._commands_lines(children, function_name)
        for child in children:
            child_function = child_function_name(function_name, child.name)
            lines.extend(self._function_lines(child, child_function))
            if should_expand(child, self._terminal):
                lines.extend(self._descendant_lines(child, child_function))
        return lines


def generate_zsh(root: CommandNode, settings: GeneratorSettings | None = None) -> str:
    """Generate a zsh completion script for a command tree.

    Args:
        root: Root command of the tree.
        settings: Optional generation settings.

    Returns:
        The complete script text.
    """
    return ZshCompletionGenerator(settings).generate(root)


def write_zsh(stream: TextIO, root: CommandNode, settings: GeneratorSettings | None = None) -> None:
    """Generate a zsh completion script and write it to ``stream``.

    The script is fully built before anything is written. Errors raised by
    the stream (closed pipe, full disk) propagate unchanged; bytes already
    flushed stay written, so callers must treat the output as incomplete.

    Args:
        stream: Destination text stream.
        root: Root command of the tree.
        settings: Optional generation settings.

    Raises:
        OSError: If writing to the stream fails.
    """
    script = generate_zsh(root, settings)
    stream.write(script)
    stream.flush()
