"""
Recursive descent parser for templates.

Splits a template into raw text and delimited expressions. An expression is
either a variable name or a function call whose arguments are string
literals, number literals, variables or further calls:

    Hello {{ name }}, you owe {{ add_f64(total, "ignored", 1.5) }}

The parser never backtracks across the text/expression alternation and
stops at the first error: callers get either the full node list or a
BadSyntax exception.
"""

import logging
from typing import List, Tuple

from .ast import SourceSpan, AstNode, RawText, Variable, Function
from .scanner import Cursor
from .literals import scan_string_literal, scan_number_literal
from .errors import (
    error_unterminated_argument,
    error_expected_close_delimiter,
    error_expected_identifier,
    error_nesting_too_deep,
)


logger = logging.getLogger(__name__)

DEFAULT_OPEN = "{{"
DEFAULT_CLOSE = "}}"

# Deepest allowed function call nesting
MAX_NESTING_DEPTH = 128


def check_delimiters(open_delim: str, close_delim: str) -> Tuple[str, str]:
    """Validate a delimiter pair, raising ValueError if unusable."""
    for label, delim in (("open", open_delim), ("close", close_delim)):
        if not isinstance(delim, str) or not delim:
            raise ValueError(f"{label} delimiter must be a non-empty string")
        if not delim.isascii():
            raise ValueError(f"{label} delimiter must be ASCII: {delim!r}")
    return open_delim, close_delim


class Parser:
    """
    Template parser over a single input string.

    Usage:
        parser = Parser("Hello {{ name }}")
        nodes = parser.parse_template()

    Grammar (whitespace allowed between tokens inside delimiters):
        template   := (raw_text | OPEN expression CLOSE)*
        expression := IDENT [ '(' arguments ')' ]
        arguments  := [ argument (',' argument)* [','] ]
        argument   := STRING | NUMBER | expression
    """

    def __init__(self, source: str, open_delim: str = DEFAULT_OPEN,
                 close_delim: str = DEFAULT_CLOSE,
                 max_depth: int = MAX_NESTING_DEPTH):
        self.source = source
        self.open_delim, self.close_delim = check_delimiters(open_delim, close_delim)
        self.cursor = Cursor(source)
        self.max_depth = max_depth
        self._depth = 0

    # =========================================================================
    # Top level
    # =========================================================================

    def parse_template(self) -> List[AstNode]:
        """Parse the whole input into an ordered list of nodes."""
        logger.debug("Start parser with delimiters %r - %r: %r",
                     self.open_delim, self.close_delim, self.source)
        nodes: List[AstNode] = []
        cursor = self.cursor

        while not cursor.is_eof():
            if cursor.advance_delimiter(self.open_delim):
                node = self._parse_expression()
                cursor.skip_whitespace()
                if not cursor.advance_delimiter(self.close_delim):
                    location = cursor.location()
                    raise error_expected_close_delimiter(
                        self.close_delim, cursor.peek(), location,
                        cursor.source_line(location),
                    )
                nodes.append(node)
                continue

            nodes.append(self._parse_raw_text())

        logger.debug("Parsed %d node(s)", len(nodes))
        return nodes

    def _parse_raw_text(self) -> RawText:
        """Consume text up to (not including) the next open delimiter."""
        cursor = self.cursor
        start = cursor.pos
        while not cursor.is_eof() and not cursor.check_delimiter(self.open_delim):
            cursor.advance()
        return RawText(SourceSpan(start, cursor.pos))

    # =========================================================================
    # Expressions
    # =========================================================================

    def _parse_identifier(self) -> SourceSpan:
        """Consume a run of ASCII alphanumerics and underscores."""
        cursor = self.cursor
        start = cursor.pos
        while cursor.at_identifier_char():
            cursor.advance()
        return SourceSpan(start, cursor.pos)

    def _parse_expression(self) -> AstNode:
        """Parse a variable or a (possibly nested) function call."""
        cursor = self.cursor
        cursor.skip_whitespace()

        name_start = cursor.location()
        name = self._parse_identifier()
        if name.is_empty:
            raise error_expected_identifier(
                cursor.peek(), name_start, cursor.source_line(name_start)
            )
        cursor.skip_whitespace()

        if cursor.peek() != '(':
            return Variable(name)

        self._depth += 1
        if self._depth > self.max_depth:
            raise error_nesting_too_deep(
                self.max_depth, name_start, cursor.source_line(name_start)
            )

        cursor.advance()  # consume '('
        cursor.skip_whitespace()
        arguments = self._parse_arguments()
        self._depth -= 1
        cursor.skip_whitespace()

        if not cursor.advance_delimiter(')'):
            raise error_unterminated_argument(name_start, cursor.source_line(name_start))
        cursor.skip_whitespace()

        return Function(name, arguments)

    def _parse_arguments(self) -> List[AstNode]:
        """Parse a comma separated argument list, stopping before ')'."""
        cursor = self.cursor
        arguments: List[AstNode] = []

        while not cursor.is_eof() and cursor.peek() != ')':
            cursor.skip_whitespace()
            if cursor.is_eof() or cursor.peek() == ')':
                break  # trailing comma

            if cursor.peek() == '"':
                arguments.append(scan_string_literal(cursor))
            elif cursor.at_digit():
                arguments.append(scan_number_literal(cursor))
            else:
                arguments.append(self._parse_expression())

            cursor.skip_whitespace()
            if not cursor.advance_delimiter(','):
                break

        return arguments


def parse(source: str, open_delim: str = DEFAULT_OPEN,
          close_delim: str = DEFAULT_CLOSE) -> List[AstNode]:
    """
    Convenience function to parse a template into nodes.

    Args:
        source: The template text
        open_delim: Token that opens an expression
        close_delim: Token that closes an expression

    Returns:
        Ordered list of nodes

    Raises:
        BadSyntax: If the template is malformed
    """
    return Parser(source, open_delim, close_delim).parse_template()
