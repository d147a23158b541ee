"""
Builtin template functions.

Groups:
- text: toLower, toUpper, trim
- math: add/sub/mul/div for each numeric width (add_u8 ... div_f64)
- os: env

`SrTemplate` pre-registers the groups named in its `builtins` argument
(all of them by default).
"""

from typing import Optional

from .base import BuiltinFunction, BuiltinRegistry
from . import text, math, os


DEFAULT_BUILTINS = ("text", "math", "os")


def _create_registry() -> BuiltinRegistry:
    registry = BuiltinRegistry()
    text.register(registry)
    math.register(registry)
    os.register(registry)
    return registry


# Global singleton registry
_registry: Optional[BuiltinRegistry] = None


def get_builtin_registry() -> BuiltinRegistry:
    """Get the global builtin function registry."""
    global _registry
    if _registry is None:
        _registry = _create_registry()
    return _registry


__all__ = [
    'BuiltinFunction',
    'BuiltinRegistry',
    'DEFAULT_BUILTINS',
    'get_builtin_registry',
]
