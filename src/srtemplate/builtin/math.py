"""
Arithmetic builtins, one function per operation and numeric width.

Registered names are `<op>_<width>`, for example `add_u8` or `div_f64`:
- ops: add, sub, mul, div
- widths: u8 u16 u32 u64 u128, i8 i16 i32 i64 i128, f32 f64

Every argument must parse as exactly that width (no sign on unsigned
widths, no fraction on integers, in range), otherwise InvalidType is raised.
The result folds left seeded with the first argument, not with zero:
`sub_i32(10, 3, 2)` is 5 and `mul_u8(3, 4)` is 12. With no arguments the
result is "0".

Integer results that leave the width's range and integer division by zero
raise RuntimeFailure; integer division truncates toward zero. Float widths
compute in IEEE single/double precision via numpy and print the shortest
text that round-trips at that width ("0.3", "3", "inf", "NaN").
"""

import operator
import re
from typing import Callable, Dict, List, Tuple, Union

import numpy as np

from .base import BuiltinFunction, BuiltinRegistry
from ..functions import RuntimeFailure
from ..validations import arg_type


GROUP = "math"

OPERATIONS = ("add", "sub", "mul", "div")
INT_BITS = (8, 16, 32, 64, 128)

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _int_ranges() -> Dict[str, Tuple[int, int]]:
    ranges = {}
    for bits in INT_BITS:
        ranges[f"u{bits}"] = (0, 2 ** bits - 1)
    for bits in INT_BITS:
        ranges[f"i{bits}"] = (-(2 ** (bits - 1)), 2 ** (bits - 1) - 1)
    return ranges


INT_RANGES = _int_ranges()
FLOAT_TYPES = {"f32": np.float32, "f64": np.float64}
WIDTHS = tuple(INT_RANGES) + tuple(FLOAT_TYPES)

Number = Union[int, np.floating]


# --- Parsing ---

def int_parser(width: str) -> Callable[[str], int]:
    """Parser for an integer width; raises ValueError when out of type."""
    low, high = INT_RANGES[width]
    pattern = _UNSIGNED_RE if width.startswith("u") else _SIGNED_RE

    def parse(text: str) -> int:
        if not pattern.fullmatch(text):
            raise ValueError(f"invalid {width}: {text!r}")
        value = int(text)
        if not low <= value <= high:
            raise ValueError(f"{width} out of range: {text!r}")
        return value

    return parse


def float_parser(width: str) -> Callable[[str], np.floating]:
    """Parser for a float width; raises ValueError when not a float."""
    ftype = FLOAT_TYPES[width]

    def parse(text: str) -> np.floating:
        if not _FLOAT_RE.fullmatch(text):
            raise ValueError(f"invalid {width}: {text!r}")
        with np.errstate(over="ignore"):
            return ftype(float(text))

    return parse


def parser_for(width: str) -> Callable[[str], Number]:
    if width in FLOAT_TYPES:
        return float_parser(width)
    return int_parser(width)


# --- Arithmetic ---

def _int_div(a: int, b: int) -> int:
    if b == 0:
        raise RuntimeFailure("attempt to divide by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


_INT_OPS = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "div": _int_div,
}

_FLOAT_OPS = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "div": operator.truediv,
}


def format_float(value: np.floating) -> str:
    """Shortest round-trip text for `value` at its own precision."""
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, unique=True, trim="-")


def _fold_int(op: str, width: str, values: List[int]) -> str:
    low, high = INT_RANGES[width]
    func = _INT_OPS[op]
    result = values[0]
    for value in values[1:]:
        result = func(result, value)
        if not low <= result <= high:
            raise RuntimeFailure(f"attempt to {op} with overflow ({width})")
    return str(result)


def _fold_float(op: str, values: List[np.floating]) -> str:
    func = _FLOAT_OPS[op]
    result = values[0]
    with np.errstate(all="ignore"):
        for value in values[1:]:
            result = func(result, value)
    return format_float(result)


def make_math_function(op: str, width: str) -> Callable[[List[str]], str]:
    """Build the template function for `op` at `width`."""
    parse = parser_for(width)
    is_float = width in FLOAT_TYPES

    def math_function(args: List[str]) -> str:
        if not args:
            return "0"
        for arg in args:
            arg_type(arg, parse)
        values = [parse(arg) for arg in args]
        if is_float:
            return _fold_float(op, values)
        return _fold_int(op, width, values)

    math_function.__name__ = f"{op}_{width}"
    math_function.__qualname__ = f"{op}_{width}"
    return math_function


def register(registry: BuiltinRegistry) -> None:
    """Register every op/width combination."""
    for op in OPERATIONS:
        for width in WIDTHS:
            registry.register(BuiltinFunction(
                f"{op}_{width}", GROUP, make_math_function(op, width),
                f"{op} over {width} arguments",
            ))
