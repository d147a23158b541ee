"""
Builtin function records and their registry.

Builtins are grouped ("text", "math", "os") so an engine can pre-register
any subset of them. Once registered they are ordinary functions: a user
registration under the same name replaces them.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..functions import TemplateFunction


@dataclass
class BuiltinFunction:
    """A builtin function with its implementation and group."""
    name: str
    group: str
    implementation: TemplateFunction
    doc: str = ""


class BuiltinRegistry:
    """
    Registry of builtin functions, organised by group.

    Usage:
        registry = BuiltinRegistry()
        registry.register(BuiltinFunction("shout", "text", shout))
        registry.functions(["text"])
    """

    def __init__(self):
        self._groups: Dict[str, Dict[str, BuiltinFunction]] = {}

    def register(self, func: BuiltinFunction) -> None:
        """Register a function under its group."""
        self._groups.setdefault(func.group, {})[func.name] = func

    @property
    def groups(self) -> List[str]:
        return sorted(self._groups)

    def get_function(self, name: str) -> Optional[BuiltinFunction]:
        """Look up a function by name in any group."""
        for group in self._groups.values():
            if name in group:
                return group[name]
        return None

    def functions(self, groups: Iterable[str]) -> List[BuiltinFunction]:
        """All functions of the given groups.

        Raises KeyError for an unknown group name.
        """
        result: List[BuiltinFunction] = []
        for group in groups:
            if group not in self._groups:
                raise KeyError(f"Unknown builtin group: {group}")
            result.extend(self._groups[group].values())
        return result
