"""
Template exceptions and error handling.

Error code ranges:
- E0xx: Syntax errors (raised while parsing, always carry a Diagnostic)

Render errors (unknown variable, unknown function, failing function) carry
the offending name instead of a source position.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .scanner import SourceLocation
from .functions import FunctionError


class SyntaxErrorKind(Enum):
    """Kinds of syntax errors, valued by their stable error code."""
    UNTERMINATED_STRING = "E001"
    FLOAT_DOTTED = "E002"
    INVALID_NUMBER = "E003"
    UNTERMINATED_ARGUMENT = "E004"
    EXPECTED_CLOSE_DELIMITER = "E005"
    EXPECTED_IDENTIFIER = "E006"
    NESTING_TOO_DEEP = "E007"

    @property
    def code(self) -> str:
        return self.value


@dataclass
class Diagnostic:
    """A single syntax diagnostic anchored at one position of the template.

    Offsets and columns count characters (code points) of the template
    string, not UTF-8 bytes.
    """
    kind: SyntaxErrorKind
    message: str                    # Human-readable description
    offset: int                     # Absolute character offset into the template
    line: int                       # 0-indexed
    column: int                     # 0-indexed
    context: str                    # The full source line holding the error
    help: Optional[str] = None

    @classmethod
    def at(cls, kind: SyntaxErrorKind, message: str, location: SourceLocation,
           context: str, help: Optional[str] = None) -> "Diagnostic":
        return cls(
            kind=kind,
            message=message,
            offset=location.offset,
            line=location.line,
            column=location.column,
            context=context,
            help=help,
        )

    @property
    def code(self) -> str:
        return self.kind.code

    def format(self, show_source: bool = True) -> str:
        """Format the diagnostic for display (1-indexed line:column)."""
        line_num = str(self.line + 1)
        gutter = " " * len(line_num)
        parts = [f"{line_num}:{self.column + 1}: error[{self.code}]: {self.message}"]

        # Source line with caret
        if show_source:
            parts.append(f" {gutter} |")
            parts.append(f" {line_num} | {self.context}")
            parts.append(f" {gutter} | {' ' * self.column}^")

        if self.help:
            parts.append(f" {gutter} = help: {self.help}")

        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        return {
            "code": self.code,
            "kind": self.kind.name,
            "message": self.message,
            "offset": self.offset,
            "line": self.line,
            "column": self.column,
            "context": self.context,
            "help": self.help,
        }


class TemplateError(Exception):
    """Base exception for every failure of `SrTemplate.render`."""
    pass


class BadSyntax(TemplateError):
    """The template could not be parsed (E0xx)."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def kind(self) -> SyntaxErrorKind:
        return self.diagnostic.kind

    def __str__(self) -> str:
        return self.diagnostic.format()


class VariableNotFound(TemplateError):
    """A `{{ name }}` reference has no binding."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable not found: {name}")


class FunctionNotImplemented(TemplateError):
    """A called function has no registration."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Function not implemented: {name}")


class FunctionCallError(TemplateError):
    """A registered function raised a FunctionError."""

    def __init__(self, name: str, inner: FunctionError):
        self.name = name
        self.inner = inner
        super().__init__(f"Error processing function '{name}': {inner}")


# --- Syntax error factories ---

def error_unterminated_string(location: SourceLocation, context: str) -> BadSyntax:
    """E001: String literal without closing quote."""
    return BadSyntax(Diagnostic.at(
        SyntaxErrorKind.UNTERMINATED_STRING,
        "unterminated string literal",
        location,
        context,
        help='string literals must be closed with a matching `"`',
    ))


def error_float_dotted(location: SourceLocation, context: str) -> BadSyntax:
    """E002: Number literal with more than one decimal point."""
    return BadSyntax(Diagnostic.at(
        SyntaxErrorKind.FLOAT_DOTTED,
        "float must have exactly one decimal point",
        location,
        context,
    ))


def error_invalid_number(char: str, location: SourceLocation, context: str) -> BadSyntax:
    """E003: Unexpected character right after a number literal."""
    return BadSyntax(Diagnostic.at(
        SyntaxErrorKind.INVALID_NUMBER,
        f"invalid character in number literal: '{char}'",
        location,
        context,
        help="a number argument must be followed directly by ',' or ')'",
    ))


def error_unterminated_argument(location: SourceLocation, context: str) -> BadSyntax:
    """E004: Function call without closing parenthesis."""
    return BadSyntax(Diagnostic.at(
        SyntaxErrorKind.UNTERMINATED_ARGUMENT,
        "unterminated function arguments",
        location,
        context,
        help="expected ')' to close the argument list of this function",
    ))


def error_expected_close_delimiter(delim: str, found: str, location: SourceLocation,
                                   context: str) -> BadSyntax:
    """E005: Expression not followed by the close delimiter."""
    found_text = f"'{found}'" if found else "end of input"
    return BadSyntax(Diagnostic.at(
        SyntaxErrorKind.EXPECTED_CLOSE_DELIMITER,
        f"expected close delimiter '{delim}', found {found_text}",
        location,
        context,
    ))


def error_expected_identifier(found: str, location: SourceLocation,
                              context: str) -> BadSyntax:
    """E006: Expression does not start with a name."""
    found_text = f"'{found}'" if found else "end of input"
    return BadSyntax(Diagnostic.at(
        SyntaxErrorKind.EXPECTED_IDENTIFIER,
        f"expected identifier, found {found_text}",
        location,
        context,
        help="names may contain only ASCII letters, digits and '_'",
    ))


def error_nesting_too_deep(limit: int, location: SourceLocation,
                           context: str) -> BadSyntax:
    """E007: Function calls nested deeper than the parser allows."""
    return BadSyntax(Diagnostic.at(
        SyntaxErrorKind.NESTING_TOO_DEEP,
        f"function calls nested deeper than {limit} levels",
        location,
        context,
    ))
