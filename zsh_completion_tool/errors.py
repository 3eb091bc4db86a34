"""Error classes for zsh-completion-tool.

Script generation itself cannot fail; these exceptions cover resolving a
command tree from a user-supplied source. Messages carry the corrective
action so they can be shown to the user as-is.

Exceptions:
    CompletionToolError: Base exception for the tool.
    TreeSourceError: Base exception for command tree sources.
    TreeSourceNotFoundError: The source file or module does not exist.
    InvalidTreeSourceError: The source exists but holds no usable tree.
"""


class CompletionToolError(Exception):
    """Base exception for zsh-completion-tool.

    Example:
        >>> try:
        ...     load_command_tree("missing.json")
        ... except CompletionToolError as e:
        ...     print(f"Error: {e}")
    """

    pass


class TreeSourceError(CompletionToolError):
    """Base exception for command tree sources.

    Attributes:
        source: The source string given by the user.
    """

    def __init__(self, source: str, message: str) -> None:
        """Initialize with the offending source.

        Args:
            source: File path or import path given by the user.
            message: Error description with guidance.
        """
        self.source = source
        super().__init__(message)


class TreeSourceNotFoundError(TreeSourceError):
    """The command tree source could not be found.

    Example:
        >>> raise TreeSourceNotFoundError("tree.json", "file does not exist")
    """

    def __init__(self, source: str, reason: str) -> None:
        """Initialize with the reason the source was not found.

        Args:
            source: File path or import path given by the user.
            reason: What was missing.
        """
        super().__init__(
            source,
            f"Command tree source '{source}' not found: {reason}. "
            f"Pass a JSON file path (e.g. tree.json) or an import path "
            f"to a click command or typer app (e.g. mypackage.cli:app).",
        )


class InvalidTreeSourceError(TreeSourceError):
    """The command tree source exists but does not describe a command tree.

    Example:
        >>> raise InvalidTreeSourceError("mypackage.cli:VERSION", "not a click command")
    """

    def __init__(self, source: str, reason: str) -> None:
        """Initialize with the validation failure.

        Args:
            source: File path or import path given by the user.
            reason: Why the source was rejected.
        """
        super().__init__(
            source,
            f"Invalid command tree source '{source}': {reason}. "
            f"JSON files must match the format printed by 'zsh-completion-tool tree'; "
            f"import paths must point to a click.Command or typer.Typer object.",
        )
