"""
Language server integration: settings payloads and code labels.
"""

from playdatekit.lsp.settings import (
    LuaSettings,
    Severity,
    BuiltinState,
    CallSnippet,
    initialization_options,
    workspace_configuration,
    library_paths,
)
from playdatekit.lsp.labels import (
    CodeLabel,
    CodeLabelSpan,
    Completion,
    CompletionKind,
    Symbol,
    SymbolKind,
    label_for_completion,
    label_for_symbol,
)

__all__ = [
    "LuaSettings",
    "Severity",
    "BuiltinState",
    "CallSnippet",
    "initialization_options",
    "workspace_configuration",
    "library_paths",
    "CodeLabel",
    "CodeLabelSpan",
    "Completion",
    "CompletionKind",
    "Symbol",
    "SymbolKind",
    "label_for_completion",
    "label_for_symbol",
]
