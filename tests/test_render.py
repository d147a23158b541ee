"""
Tests for the renderer (evaluation of parsed nodes).
"""

import pytest
from srtemplate import (
    parse, render_nodes, Renderer, ShardedMap,
    VariableNotFound, FunctionNotImplemented, FunctionCallError,
    InvalidArgument, RawText, SourceSpan,
)
from srtemplate.builtin import text


def make_maps(variables=None, functions=None):
    vars_map = ShardedMap()
    vars_map.update((variables or {}).items())
    funcs_map = ShardedMap()
    funcs_map.update((functions or {}).items())
    return vars_map, funcs_map


def render(source, variables=None, functions=None):
    vars_map, funcs_map = make_maps(variables, functions)
    return render_nodes(source, parse(source), vars_map, funcs_map)


class TestBasicRender:
    """Test variables and raw text."""

    def test_basic_render(self):
        assert render("Hello {{ var }}", {"var": "World"}) == "Hello World"

    def test_raw_text_preserved(self):
        source = "  spaced\n\ttext  {{ v }}  tail\n"
        assert render(source, {"v": "X"}) == "  spaced\n\ttext  X  tail\n"

    def test_no_delimiters_unchanged(self):
        source = "Nothing { to } see ✓"
        assert render(source) == source

    def test_missing_variable(self):
        with pytest.raises(VariableNotFound) as exc_info:
            render("Hello {{ nobody }}")
        assert exc_info.value.name == "nobody"

    def test_variable_lookup_is_exact(self):
        with pytest.raises(VariableNotFound):
            render("{{ Var }}", {"var": "x"})

    def test_empty_value_is_not_missing(self):
        assert render("[{{ v }}]", {"v": ""}) == "[]"


class TestFunctionRender:
    """Test function evaluation."""

    def test_basic_function_render(self):
        result = render("Hello {{ toLowerCase(var) }}", {"var": "WoRld"},
                        {"toLowerCase": text.to_lower})
        assert result == "Hello world"

    def test_recursive_function_render(self):
        result = render("Hello {{ toLowerCase(trim(var)) }}", {"var": "    WoRlD "},
                        {"toLowerCase": text.to_lower, "trim": text.trim})
        assert result == "Hello world"

    def test_multiline_template(self):
        result = render("Hello\n{{ toLowerCase(trim(var)) }}", {"var": "    WoRlD "},
                        {"toLowerCase": text.to_lower, "trim": text.trim})
        assert result == "Hello\nworld"

    def test_literals_passed_verbatim(self):
        """Literal arguments reach the function as written."""
        received = []

        def capture(args):
            received.extend(args)
            return ""

        render(r'{{ f("a\"b", 007, 1.50) }}', functions={"f": capture})
        assert received == [r'a\"b', "007", "1.50"]

    def test_arguments_evaluate_left_to_right_before_call(self):
        """Arguments are evaluated in source order, innermost calls first."""
        order = []

        def record(label):
            def func(args):
                order.append((label, list(args)))
                return label
            return func

        functions = {"outer": record("outer"), "a": record("a"), "b": record("b")}
        result = render("{{ outer(a(), b(), x) }}", {"x": "X"}, functions)
        assert result == "outer"
        assert order == [("a", []), ("b", []), ("outer", ["a", "b", "X"])]

    def test_missing_function_not_called_for_zero_args(self):
        with pytest.raises(FunctionNotImplemented) as exc_info:
            render("{{ nothing() }}")
        assert exc_info.value.name == "nothing"

    def test_missing_variable_in_argument(self):
        with pytest.raises(VariableNotFound):
            render("{{ f(missing) }}", functions={"f": lambda args: "x"})

    def test_function_error_is_wrapped(self):
        def fail(args):
            raise InvalidArgument(args[0])

        with pytest.raises(FunctionCallError) as exc_info:
            render("{{ fail(v) }}", {"v": "bad"}, {"fail": fail})
        assert exc_info.value.name == "fail"
        assert isinstance(exc_info.value.inner, InvalidArgument)
        assert exc_info.value.inner.value == "bad"

    def test_failure_stops_later_calls(self):
        """The first failure aborts the render; later nodes are not evaluated."""
        calls = []

        def fail(args):
            raise InvalidArgument("x")

        def later(args):
            calls.append(args)
            return ""

        with pytest.raises(FunctionCallError):
            render("{{ fail() }} {{ later() }}", functions={"fail": fail, "later": later})
        assert calls == []

    def test_other_exceptions_propagate(self):
        def boom(args):
            raise ZeroDivisionError("boom")

        with pytest.raises(ZeroDivisionError):
            render("{{ boom() }}", functions={"boom": boom})

    def test_non_string_result_is_coerced(self):
        assert render("{{ n() }}", functions={"n": lambda args: 42}) == "42"


class TestRendererClass:
    """Test the Renderer object directly."""

    def test_render_node_list(self):
        source = "abc"
        vars_map, funcs_map = make_maps()
        renderer = Renderer(source, vars_map, funcs_map)
        assert renderer.render([RawText(SourceSpan(1, 3))]) == "bc"

    def test_unknown_node_type(self):
        vars_map, funcs_map = make_maps()
        with pytest.raises(TypeError):
            Renderer("", vars_map, funcs_map).render([object()])
