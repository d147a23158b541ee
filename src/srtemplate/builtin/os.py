"""
Operating system builtins.
"""

import os
from typing import List

from .base import BuiltinFunction, BuiltinRegistry
from ..functions import InvalidArgument
from ..validations import args_min_len


GROUP = "os"


def env(args: List[str]) -> str:
    """Values of the named environment variables, space separated.

    Fails on the first name that is not set.
    """
    args_min_len(args, 1)
    values = []
    for name in args:
        value = os.environ.get(name)
        if value is None:
            raise InvalidArgument(name)
        values.append(value)
    return " ".join(values)


def register(registry: BuiltinRegistry) -> None:
    """Register the os builtins."""
    registry.register(BuiltinFunction(
        "env", GROUP, env, "Look up environment variables"))
