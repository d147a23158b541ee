"""
Cursor primitives for the template scanner.

The cursor walks a template one character at a time and keeps the
bookkeeping needed for diagnostics:
- absolute offset into the source
- 0-indexed line and column
- offset of the current line start (for the context snippet)

Identifiers, whitespace and digits are matched as ASCII only. Raw text and
string literal bodies may contain any character.
"""

from dataclasses import dataclass
from typing import Optional


IDENTIFIER_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
)
DIGITS = frozenset("0123456789")
WHITESPACE = frozenset(" \t\n\r\x0c")


@dataclass(frozen=True)
class SourceLocation:
    """Represents a position in a template."""
    offset: int         # 0-indexed character offset from start
    line: int           # 0-indexed line number
    column: int         # 0-indexed column (characters since last newline)
    line_start: int     # Offset of the first character of this line

    def __str__(self) -> str:
        return f"{self.line + 1}:{self.column + 1}"


class Cursor:
    """
    Forward-only position over a template string.

    Usage:
        cursor = Cursor("Hello {{ name }}")
        while not cursor.is_eof():
            if cursor.advance_delimiter("{{"):
                ...
            cursor.advance()
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0            # Current position in source
        self.line = 0           # Current line (0-indexed)
        self.column = 0         # Current column (0-indexed)
        self.line_start = 0     # Position of current line start

    def location(self) -> SourceLocation:
        """Snapshot the current position."""
        return SourceLocation(self.pos, self.line, self.column, self.line_start)

    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """Look at character at current position + offset without consuming.

        Returns an empty string past the end of input.
        """
        idx = self.pos + offset
        if idx >= len(self.source):
            return ''
        return self.source[idx]

    def advance(self) -> str:
        """Consume and return current character (no-op at EOF)."""
        if self.pos >= len(self.source):
            return ''
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 0
            self.line_start = self.pos
        else:
            self.column += 1
        return ch

    def check_delimiter(self, delim: str) -> bool:
        """Check whether `delim` starts at the current position."""
        return self.source.startswith(delim, self.pos)

    def advance_delimiter(self, delim: str) -> bool:
        """Consume `delim` if it starts at the current position."""
        if not self.check_delimiter(delim):
            return False
        for _ in range(len(delim)):
            self.advance()
        return True

    def skip_whitespace(self) -> None:
        """Skip ASCII whitespace, newlines included."""
        while not self.is_eof() and self.peek() in WHITESPACE:
            self.advance()

    def at_identifier_char(self) -> bool:
        return not self.is_eof() and self.peek() in IDENTIFIER_CHARS

    def at_digit(self) -> bool:
        return not self.is_eof() and self.peek() in DIGITS

    def source_line(self, location: Optional[SourceLocation] = None) -> str:
        """Text of the line containing `location` (default: current line)."""
        start = self.line_start if location is None else location.line_start
        end = self.source.find('\n', start)
        if end == -1:
            end = len(self.source)
        return self.source[start:end]
