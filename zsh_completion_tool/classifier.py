"""Completion hint inference for flags.

Infers the kind of value a flag accepts from nothing but its name and its
human-readable description, so new commands get sensible completions
without changes to the generator.

Rules are applied in a fixed priority order, first match wins:

    1. Enumeration, colon form     "format: json, csv, xml"
    2. Enumeration, bracket form   "mode (fast/slow)" or "type (a|b|c)"
    3. URL                         name contains "url"
    4. File path                   name or description mentions files/paths
    5. Number                      description mentions a number/count
    6. Generic value

Colons, commas and parentheses are recognised in both their ASCII and
full-width forms, and the keyword lists carry Chinese equivalents, so
descriptions written in either language classify the same way.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from __future__ import annotations

import re

from zsh_completion_tool.models import CompletionHint, FlagKind, FlagSpec

COLONS = ":："
OPEN_PARENS = "(（"
CLOSE_PARENS = ")）"
COMMAS = ",，"

# Enumerated values longer than this are treated as prose, not choices
MAX_ENUM_TOKEN_LENGTH = 20
MIN_ENUM_TOKENS = 2

FILE_NAME_PATTERNS = ("file", "path", "config", "input", "output", "cert", "key", "ca")
FILE_NAME_EXCLUSIONS = ("prefix", "format")
FILE_USAGE_PATTERNS = ("file", "path", "certificate", "文件", "路径", "证书")
NUMBER_USAGE_PATTERNS = ("number", "count", "quantity", "数量", "个数")

_COLON_SPLIT = re.compile(r"[,， ]+")
_BRACKET_SPLIT = re.compile(r"[/|]+")


def _find_any(text: str, chars: str, start: int = 0) -> int:
    """Return the index of the first of ``chars`` in ``text``, or -1."""
    positions = [pos for pos in (text.find(char, start) for char in chars) if pos != -1]
    return min(positions) if positions else -1


def parse_colon_enum(usage: str) -> list[str]:
    """Parse choices written after a colon.

    Example:
        >>> parse_colon_enum("format: json, csv (default json)")
        ['json', 'csv']
        >>> parse_colon_enum("output directory: where files go")
        []
    """
    idx = _find_any(usage, COLONS)
    if idx == -1:
        return []

    rest = usage[idx + 1 :].strip()
    paren_idx = _find_any(rest, OPEN_PARENS)
    if paren_idx != -1:
        rest = rest[:paren_idx].strip()

    if not any(comma in rest for comma in COMMAS):
        return []

    values = [
        token
        for token in _COLON_SPLIT.split(rest)
        if token and " " not in token and len(token) < MAX_ENUM_TOKEN_LENGTH
    ]
    return values if len(values) >= MIN_ENUM_TOKENS else []


def parse_bracket_enum(usage: str) -> list[str]:
    """Parse choices written as a slash or pipe list inside parentheses.

    Example:
        >>> parse_bracket_enum("output format (text/json)")
        ['text', 'json']
        >>> parse_bracket_enum("see docs (and/or the wiki)")
        []
    """
    start = _find_any(usage, OPEN_PARENS)
    if start == -1:
        return []
    end = _find_any(usage, CLOSE_PARENS, start)
    if end == -1:
        return []

    inner = usage[start + 1 : end]
    if not any(sep in inner for sep in "/|") or " " in inner:
        return []

    values = [
        token.strip()
        for token in _BRACKET_SPLIT.split(inner)
        if token.strip() and len(token.strip()) < MAX_ENUM_TOKEN_LENGTH
    ]
    return values if len(values) >= MIN_ENUM_TOKENS else []


def parse_enum_from_usage(usage: str) -> list[str]:
    """Parse enumerated choices from a description, colon form first."""
    return parse_colon_enum(usage) or parse_bracket_enum(usage)


def is_url(name: str) -> bool:
    """Whether the flag name denotes a URL."""
    return "url" in name.lower()


def is_file_path(name: str, usage: str) -> bool:
    """Whether the flag name or description denotes a file system path.

    Name patterns win over the description, but a name mentioning
    "prefix" or "format" is never a path, whatever the description says.

    Example:
        >>> is_file_path("config-path", "")
        True
        >>> is_file_path("key-prefix", "prefix for every key path")
        False
        >>> is_file_path("target", "destination file")
        True
    """
    name_lower = name.lower()
    if any(pattern in name_lower for pattern in FILE_NAME_PATTERNS):
        return not any(excluded in name_lower for excluded in FILE_NAME_EXCLUSIONS)

    usage_lower = usage.lower()
    return any(pattern in usage_lower for pattern in FILE_USAGE_PATTERNS)


def is_number(usage: str) -> bool:
    """Whether the description mentions a number or a count."""
    usage_lower = usage.lower()
    return any(pattern in usage_lower for pattern in NUMBER_USAGE_PATTERNS)


def classify(name: str, usage: str | None) -> CompletionHint:
    """Infer the completion hint for a valued flag.

    Never raises: absent or unparseable text yields a generic value hint.

    Args:
        name: Flag name (long name preferred), with or without dashes.
        usage: Flag description.

    Returns:
        The first matching CompletionHint in priority order.

    Example:
        >>> classify("type", "type: a, b, c").values
        ('a', 'b', 'c')
        >>> classify("endpoint-url", "target address").kind.value
        'url'
    """
    usage = usage or ""
    name = name or ""

    values = parse_enum_from_usage(usage)
    if values:
        return CompletionHint.enumerated(values)

    if is_url(name):
        return CompletionHint.url()

    if is_file_path(name, usage):
        return CompletionHint.file_path()

    if is_number(usage):
        return CompletionHint.number()

    return CompletionHint.generic()


def hint_for_flag(flag: FlagSpec) -> CompletionHint | None:
    """Resolve the completion hint of a flag, honouring its declared kind.

    Args:
        flag: The flag to inspect.

    Returns:
        None for boolean flags, otherwise the hint to render.
    """
    if flag.kind == FlagKind.BOOLEAN:
        return None
    if flag.kind == FlagKind.INTEGER:
        return CompletionHint.number()
    if flag.kind == FlagKind.DURATION:
        return CompletionHint.generic("duration")
    if flag.kind == FlagKind.REPEATED_TEXT:
        return CompletionHint.generic()
    return classify(flag.long_name or flag.names[0], flag.usage)
