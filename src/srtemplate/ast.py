"""
Abstract Syntax Tree (AST) node definitions for templates.

A parsed template is a flat, ordered list of nodes. Only `Function` nodes
nest: their arguments are themselves nodes, kept in source order.

Nodes never copy text out of the template. Each one holds a `SourceSpan`
into the original input that is resolved with `node.text(source)` when the
renderer needs it.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class SourceSpan:
    """A half-open range [start, end) of offsets into the template."""
    start: int
    end: int

    def text(self, source: str) -> str:
        return source[self.start:self.end]

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


# =============================================================================
# Base Class
# =============================================================================

@dataclass
class AstNode:
    """Base class for all template nodes."""
    span: SourceSpan  # Source range of the node's own text

    def text(self, source: str) -> str:
        """The source text this node covers."""
        return self.span.text(source)


# =============================================================================
# Nodes
# =============================================================================

@dataclass
class RawText(AstNode):
    """Text outside the delimiters, copied to the output verbatim."""
    pass


@dataclass
class Variable(AstNode):
    """A variable reference, e.g. `{{ name }}`."""
    pass


@dataclass
class Function(AstNode):
    """A function call, e.g. `{{ toUpper(trim(name)) }}`.

    `span` covers the function name only.
    """
    arguments: List[AstNode] = field(default_factory=list)

    def name(self, source: str) -> str:
        return self.span.text(source)


@dataclass
class StringLiteral(AstNode):
    """A double-quoted string argument; `span` excludes the quotes.

    Escape sequences are kept as written (`"a\\"b"` spans `a\\"b`).
    """
    pass


@dataclass
class NumberLiteral(AstNode):
    """An integer argument such as `42`."""
    pass


@dataclass
class FloatLiteral(AstNode):
    """A decimal argument such as `3.14`."""
    pass
