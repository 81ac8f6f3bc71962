"""
Code labels for completions and symbols.

Tells the editor how to render lua-language-server completion items and
workspace symbols with syntax highlighting.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Range = Tuple[int, int]


class CompletionKind(enum.IntEnum):
    """LSP completion item kinds (subset)."""

    TEXT = 1
    METHOD = 2
    FUNCTION = 3
    CONSTRUCTOR = 4
    FIELD = 5
    VARIABLE = 6
    CLASS = 7
    MODULE = 9
    PROPERTY = 10
    KEYWORD = 14


class SymbolKind(enum.IntEnum):
    """LSP symbol kinds (subset)."""

    FILE = 1
    MODULE = 2
    CLASS = 5
    METHOD = 6
    PROPERTY = 7
    FIELD = 8
    FUNCTION = 12
    VARIABLE = 13


@dataclass
class Completion:
    label: str
    kind: Optional[CompletionKind] = None
    detail: Optional[str] = None


@dataclass
class Symbol:
    name: str
    kind: SymbolKind


@dataclass
class CodeLabelSpan:
    """
    A span of a label: either a range of `code` or a literal string.

    Exactly one of `code_range` and `text` is set.
    """

    code_range: Optional[Range] = None
    text: Optional[str] = None
    highlight_name: Optional[str] = None

    @classmethod
    def from_code_range(cls, start: int, end: int) -> "CodeLabelSpan":
        return cls(code_range=(start, end))

    @classmethod
    def literal(cls, text: str, highlight_name: Optional[str] = None) -> "CodeLabelSpan":
        return cls(text=text, highlight_name=highlight_name)


@dataclass
class CodeLabel:
    code: str
    spans: List[CodeLabelSpan] = field(default_factory=list)
    filter_range: Range = (0, 0)


def label_for_completion(completion: Completion) -> Optional[CodeLabel]:
    """
    Build the label for a completion item.

    Functions and methods are highlighted as code and filtered on their name
    (up to the opening parenthesis). Fields are shown as a property literal.
    Other kinds get the editor's default rendering.
    """
    label = completion.label

    if completion.kind in (CompletionKind.METHOD, CompletionKind.FUNCTION):
        paren = label.find("(")
        name_len = paren if paren >= 0 else len(label)
        return CodeLabel(
            code=label,
            spans=[CodeLabelSpan.from_code_range(0, len(label))],
            filter_range=(0, name_len),
        )

    if completion.kind == CompletionKind.FIELD:
        return CodeLabel(
            code="",
            spans=[CodeLabelSpan.literal(label, "property")],
            filter_range=(0, len(label)),
        )

    return None


def label_for_symbol(symbol: Symbol) -> CodeLabel:
    """Build the label for a workspace symbol, highlighted as a Lua assignment."""
    prefix = "let a = "
    suffix = "()" if symbol.kind == SymbolKind.METHOD else ""
    code = f"{prefix}{symbol.name}{suffix}"
    return CodeLabel(
        code=code,
        spans=[CodeLabelSpan.from_code_range(len(prefix), len(code) - len(suffix))],
        filter_range=(0, len(symbol.name)),
    )
