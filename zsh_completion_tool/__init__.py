"""zsh-completion-tool: generate zsh completion scripts from command trees.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

__version__ = "0.1.0"

from zsh_completion_tool.classifier import classify  # noqa: E402
from zsh_completion_tool.emitter import (  # noqa: E402
    ZshCompletionGenerator,
    generate_zsh,
    write_zsh,
)
from zsh_completion_tool.models import (  # noqa: E402
    CommandNode,
    CompletionHint,
    FlagKind,
    FlagSpec,
    GeneratorSettings,
    HintKind,
)

__all__ = [
    "CommandNode",
    "CompletionHint",
    "FlagKind",
    "FlagSpec",
    "GeneratorSettings",
    "HintKind",
    "ZshCompletionGenerator",
    "__version__",
    "classify",
    "generate_zsh",
    "write_zsh",
]
