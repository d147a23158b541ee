"""
Argument checks for template functions.

Each check returns None on success and raises a FunctionError otherwise,
so a function body can simply call them first:

    def repeat(args):
        args_min_len(args, 2)
        arg_type(args[1], int)
        return args[0] * int(args[1])
"""

from typing import Callable, List, Any

from .functions import ArgumentsIncomplete, InvalidType


def args_min_len(args: List[str], expected: int) -> None:
    """Require at least `expected` arguments."""
    if len(args) < expected:
        raise ArgumentsIncomplete(expected, len(args))


def args_max_len(args: List[str], expected: int) -> None:
    """Allow at most `expected` arguments."""
    if len(args) > expected:
        raise ArgumentsIncomplete(expected, len(args))


def args_len(args: List[str], expected: int) -> None:
    """Require exactly `expected` arguments."""
    args_min_len(args, expected)
    args_max_len(args, expected)


def arg_type(arg: str, parse: Callable[[str], Any]) -> None:
    """Require that `parse(arg)` succeeds.

    `parse` is any callable that raises ValueError on bad input, such as
    `int`, `float` or one of the width parsers in `srtemplate.builtin.math`.
    """
    try:
        parse(arg)
    except ValueError:
        raise InvalidType(arg) from None
