"""
Text case and whitespace builtins.

Each function transforms every argument and joins the results with a
single space, so `toUpper(a, b)` renders as "A B" and `toUpper()` as "".
"""

from typing import List

from .base import BuiltinFunction, BuiltinRegistry


GROUP = "text"


def to_lower(args: List[str]) -> str:
    return " ".join(a.lower() for a in args)


def to_upper(args: List[str]) -> str:
    return " ".join(a.upper() for a in args)


def trim(args: List[str]) -> str:
    return " ".join(a.strip() for a in args)


def register(registry: BuiltinRegistry) -> None:
    """Register the text builtins."""
    registry.register(BuiltinFunction(
        "toLower", GROUP, to_lower, "Lowercase each argument"))
    registry.register(BuiltinFunction(
        "toUpper", GROUP, to_upper, "Uppercase each argument"))
    registry.register(BuiltinFunction(
        "trim", GROUP, trim, "Strip surrounding whitespace from each argument"))
