"""
Calling convention for template functions.

A template function receives the already-evaluated arguments of a call as a
list of strings, in source order, and returns the replacement text. It
reports failure by raising one of the `FunctionError` subclasses below; the
renderer wraps those in `FunctionCallError` and aborts the render.

    def greet(args: List[str]) -> str:
        validations.args_min_len(args, 1)
        return "Hello " + " ".join(args)

    ctx.add_function("greet", greet)
"""

from typing import Callable, List


TemplateFunction = Callable[[List[str]], str]


class FunctionError(Exception):
    """Base class for errors raised by template functions."""
    pass


class InvalidArgument(FunctionError):
    """An argument has an unacceptable value."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid function argument: {value}")


class InvalidType(FunctionError):
    """An argument does not parse as the type the function needs."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid function argument type for {value}")


class ArgumentsIncomplete(FunctionError):
    """The call has the wrong number of arguments."""

    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(
            f"This function requires {expected} arguments, but found {found}"
        )


class RuntimeFailure(FunctionError):
    """The function could not compute a result."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error calling the function: {message}")


class ConvertArgsFailed(FunctionError):
    """Typed argument conversion failed (see `srtemplate.helper`)."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Convert type from arguments failed: {cause}")
