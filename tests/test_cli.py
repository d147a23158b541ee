"""
Tests for the srtemplate command line interface.
"""

import pytest
from srtemplate.__main__ import main, parse_var


class TestParseVar:
    """Parsing of NAME=VALUE arguments."""

    def test_simple(self):
        assert parse_var("name=World") == ("name", "World")

    def test_value_may_contain_equals(self):
        assert parse_var("expr=a=b") == ("expr", "a=b")

    @pytest.mark.parametrize("bad", ["novalue", "=x"])
    def test_invalid(self, bad):
        with pytest.raises(ValueError):
            parse_var(bad)


class TestRenderCommand:
    """`render` subcommand."""

    def test_render_to_stdout(self, tmp_path, capsys):
        template = tmp_path / "hello.txt"
        template.write_text("Hello {{ toUpper(name) }}!")
        assert main(["render", str(template), "-v", "name=world"]) == 0
        assert capsys.readouterr().out == "Hello WORLD!"

    def test_render_to_file(self, tmp_path):
        template = tmp_path / "page.tpl"
        template.write_text("<% a %>-<% b %>")
        output = tmp_path / "out.txt"
        code = main(["render", str(template), "--open", "<%", "--close", "%>",
                     "--var", "a=1", "--var", "b=2", "-o", str(output)])
        assert code == 0
        assert output.read_text() == "1-2"

    def test_missing_variable(self, tmp_path, capsys):
        template = tmp_path / "t.txt"
        template.write_text("{{ nope }}")
        assert main(["render", str(template)]) == 1
        assert "Variable not found: nope" in capsys.readouterr().err

    def test_no_builtins(self, tmp_path, capsys):
        template = tmp_path / "t.txt"
        template.write_text("{{ trim(x) }}")
        assert main(["render", str(template), "-v", "x=1", "--no-builtins"]) == 1
        assert "Function not implemented: trim" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["render", str(tmp_path / "absent.txt")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_bad_var(self, tmp_path, capsys):
        template = tmp_path / "t.txt"
        template.write_text("x")
        assert main(["render", str(template), "-v", "broken"]) == 1
        assert "Invalid variable format" in capsys.readouterr().err

    def test_bad_delimiter(self, tmp_path, capsys):
        template = tmp_path / "t.txt"
        template.write_text("x")
        assert main(["render", str(template), "--open", ""]) == 1
        assert "Error:" in capsys.readouterr().err


class TestCheckCommand:
    """`check` subcommand."""

    def test_valid(self, tmp_path, capsys):
        template = tmp_path / "ok.txt"
        template.write_text("a {{ b }} c")
        assert main(["check", str(template)]) == 0
        assert "OK: ok.txt - 3 node(s)" in capsys.readouterr().out

    def test_syntax_error(self, tmp_path, capsys):
        template = tmp_path / "bad.txt"
        template.write_text("Hi {{ name }")
        assert main(["check", str(template)]) == 1
        err = capsys.readouterr().err
        assert "error[E005]" in err
        assert "bad.txt:1:12" in err

    def test_debug_logging(self, tmp_path, capsys):
        template = tmp_path / "ok.txt"
        template.write_text("{{ a }}")
        assert main(["--debug", "check", str(template)]) == 0
        assert "Parsed 1 node(s)" in capsys.readouterr().err
