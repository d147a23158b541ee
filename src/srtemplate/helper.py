"""
Typed argument conversion for template functions.

Template functions always receive strings. `to_typed_args` turns the leading
arguments into Python values in one step:

    def merge(args):
        name, count = to_typed_args(args, (str, int))
        return f"{name}_{count}"

Extra arguments beyond the requested types are ignored.
"""

from typing import Any, Callable, List, Sequence, Tuple

from .functions import ConvertArgsFailed


class FromArgsError(Exception):
    """Base class for conversion failures."""
    pass


class BadType(FromArgsError):
    """The requested type has no known conversion from text."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Invalid Type: {type_name}")


class ArgumentNotExists(FromArgsError):
    """Fewer arguments than requested types."""

    def __init__(self, type_name: str, index: int):
        self.type_name = type_name
        self.index = index
        super().__init__(
            f'Argument of type "{type_name}" not exists, argument index: {index}'
        )


class ParseFailed(FromArgsError):
    """The argument text does not parse as the requested type."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Parse Variable Failed in position: {index}")


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"invalid bool: {text!r}")


def _converter(target: Any) -> Callable[[str], Any]:
    if target is bool:
        return _parse_bool
    if target in (str, int, float):
        return target
    if callable(target):
        return target
    raise BadType(getattr(target, "__name__", repr(target)))


def from_args(args: List[str], types: Sequence[Any]) -> Tuple[Any, ...]:
    """Convert `args` according to `types`, raising FromArgsError."""
    values = []
    for index, target in enumerate(types):
        convert = _converter(target)
        if index >= len(args):
            raise ArgumentNotExists(getattr(target, "__name__", repr(target)), index)
        try:
            values.append(convert(args[index]))
        except ValueError:
            raise ParseFailed(index) from None
    return tuple(values)


def to_typed_args(args: List[str], types: Sequence[Any]) -> Tuple[Any, ...]:
    """Like `from_args`, but raises ConvertArgsFailed for use inside functions."""
    try:
        return from_args(args, types)
    except FromArgsError as e:
        raise ConvertArgsFailed(e) from e
