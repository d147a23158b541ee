"""
Tests for diagnostics and error messages.
"""

import json

import pytest
from srtemplate import (
    parse, BadSyntax, Diagnostic, SyntaxErrorKind, SourceLocation,
    VariableNotFound, FunctionNotImplemented, FunctionCallError,
    InvalidArgument, TemplateError,
)


class TestDiagnostic:
    """Diagnostic formatting."""

    def test_codes(self):
        assert SyntaxErrorKind.UNTERMINATED_STRING.code == "E001"
        assert SyntaxErrorKind.EXPECTED_IDENTIFIER.code == "E006"

    def test_format_with_source(self):
        diag = Diagnostic.at(
            SyntaxErrorKind.EXPECTED_CLOSE_DELIMITER,
            "expected close delimiter '}}', found '}'",
            SourceLocation(offset=11, line=0, column=11, line_start=0),
            "Hi {{ name }",
        )
        assert diag.format() == (
            "1:12: error[E005]: expected close delimiter '}}', found '}'\n"
            "   |\n"
            " 1 | Hi {{ name }\n"
            "   |            ^"
        )

    def test_format_without_source(self):
        diag = Diagnostic.at(
            SyntaxErrorKind.UNTERMINATED_STRING, "unterminated string literal",
            SourceLocation(3, 1, 2, 1), "  \"x", help="close it",
        )
        assert diag.format(show_source=False) == (
            "2:3: error[E001]: unterminated string literal\n"
            "   = help: close it"
        )

    def test_to_json(self):
        with pytest.raises(BadSyntax) as exc_info:
            parse("{{ f(1.2.3) }}")
        data = exc_info.value.diagnostic.to_json()
        assert data["code"] == "E002"
        assert data["kind"] == "FLOAT_DOTTED"
        assert data["line"] == 0
        assert data["context"] == "{{ f(1.2.3) }}"
        json.dumps(data)

    def test_bad_syntax_str_is_formatted(self):
        with pytest.raises(BadSyntax) as exc_info:
            parse("{{ x")
        text = str(exc_info.value)
        assert text.startswith("1:5: error[E005]")
        assert "{{ x" in text


class TestRenderErrors:
    """Render error messages and hierarchy."""

    def test_messages(self):
        assert str(VariableNotFound("v")) == "Variable not found: v"
        assert str(FunctionNotImplemented("f")) == "Function not implemented: f"
        err = FunctionCallError("f", InvalidArgument("x"))
        assert str(err) == "Error processing function 'f': Invalid function argument: x"

    @pytest.mark.parametrize("error", [
        VariableNotFound("v"),
        FunctionNotImplemented("f"),
        FunctionCallError("f", InvalidArgument("x")),
    ])
    def test_all_are_template_errors(self, error):
        assert isinstance(error, TemplateError)

    def test_bad_syntax_is_template_error(self):
        with pytest.raises(TemplateError):
            parse('{{ f("x }}')
