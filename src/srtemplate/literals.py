"""
Literal lexers for function arguments.

Both lexers start with the cursor on the first character of the literal and
leave it on the first character after it.
"""

from .ast import SourceSpan, StringLiteral, NumberLiteral, FloatLiteral
from .scanner import Cursor, DIGITS
from .errors import (
    error_unterminated_string,
    error_float_dotted,
    error_invalid_number,
)


# Characters allowed directly after a number literal
NUMBER_TERMINATORS = frozenset(",)")


def scan_string_literal(cursor: Cursor) -> StringLiteral:
    """Scan a double-quoted string literal.

    A backslash escapes the character after it, so `\\"` does not end the
    literal. Escapes are not interpreted: the node spans the body exactly
    as written, backslashes included.
    """
    start = cursor.location()
    cursor.advance()  # consume opening quote
    body_start = cursor.pos
    escaped = False

    while not cursor.is_eof():
        ch = cursor.peek()
        if escaped:
            escaped = False
        elif ch == '\\':
            escaped = True
        elif ch == '"':
            body_end = cursor.pos
            cursor.advance()  # consume closing quote
            return StringLiteral(SourceSpan(body_start, body_end))
        cursor.advance()

    raise error_unterminated_string(start, cursor.source_line(start))


def scan_number_literal(cursor: Cursor):
    """Scan an integer or decimal literal.

    Returns a FloatLiteral if the literal holds a '.', else a NumberLiteral.
    """
    start = cursor.pos
    is_float = False

    while not cursor.is_eof() and (cursor.peek() in DIGITS or cursor.peek() == '.'):
        if cursor.peek() == '.':
            if is_float:
                location = cursor.location()
                raise error_float_dotted(location, cursor.source_line(location))
            is_float = True
        cursor.advance()

    if not cursor.is_eof() and cursor.peek() not in NUMBER_TERMINATORS:
        location = cursor.location()
        raise error_invalid_number(cursor.peek(), location, cursor.source_line(location))

    span = SourceSpan(start, cursor.pos)
    if is_float:
        return FloatLiteral(span)
    return NumberLiteral(span)
