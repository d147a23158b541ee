"""
The template engine front end.

`SrTemplate` owns the delimiter pair and a handle on the shared variable
and function maps. Copies made with `clone()` share those maps, so a
variable added through one handle is visible to every other handle, even
from another thread. Delimiters stay per handle.
"""

import copy
import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from .ast import AstNode
from .builtin import DEFAULT_BUILTINS, get_builtin_registry
from .functions import TemplateFunction
from .parser import DEFAULT_OPEN, DEFAULT_CLOSE, Parser, check_delimiters
from .registry import ShardedMap
from .render import Renderer


logger = logging.getLogger(__name__)


class SrTemplate:
    """
    Variables, functions and delimiters used to render templates.

    Usage:
        ctx = SrTemplate()
        ctx.add_variable("var", "World")
        ctx.render("Hello {{ var }}")       # "Hello World"

        ctx.add_function("shout", lambda args: args[0].upper() + "!")
        ctx.render("{{ shout(var) }}")      # "WORLD!"

    Args:
        open_delim: Token that opens an expression (default "{{")
        close_delim: Token that closes an expression (default "}}")
        builtins: Builtin groups to pre-register ("text", "math", "os")
    """

    def __init__(self, open_delim: str = DEFAULT_OPEN, close_delim: str = DEFAULT_CLOSE,
                 builtins: Iterable[str] = DEFAULT_BUILTINS):
        self._open, self._close = check_delimiters(open_delim, close_delim)
        self._variables: ShardedMap[str] = ShardedMap()
        self._functions: ShardedMap[TemplateFunction] = ShardedMap()

        groups = list(builtins)
        for func in get_builtin_registry().functions(groups):
            self._functions.set(func.name, func.implementation)
        logger.debug("Registered builtin groups: %s", ", ".join(groups) or "none")

    @classmethod
    def with_delimiter(cls, open_delim: str, close_delim: str, **kwargs) -> "SrTemplate":
        """Create an engine with custom delimiters."""
        return cls(open_delim, close_delim, **kwargs)

    # =========================================================================
    # Delimiters
    # =========================================================================

    @property
    def delimiters(self) -> Tuple[str, str]:
        return self._open, self._close

    def set_delimiter(self, open_delim: str, close_delim: str) -> None:
        """Change the delimiters used by subsequent renders of this handle."""
        self._open, self._close = check_delimiters(open_delim, close_delim)

    # =========================================================================
    # Variables
    # =========================================================================

    def add_variable(self, name: str, value: Any) -> None:
        """Bind `name` to `str(value)`, replacing any previous binding."""
        self._variables.set(name, str(value))

    def add_variables(self, values: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]) -> None:
        """Bind several variables at once."""
        pairs = values.items() if isinstance(values, Mapping) else values
        for name, value in pairs:
            self.add_variable(name, value)

    def get_variable(self, name: str) -> Optional[str]:
        return self._variables.get(name)

    def contains_variable(self, name: str) -> bool:
        return self._variables.contains(name)

    def remove_variable(self, name: str) -> None:
        self._variables.remove(name)

    def clear_variables(self) -> None:
        self._variables.clear()

    # =========================================================================
    # Functions
    # =========================================================================

    def add_function(self, name: str, func: TemplateFunction) -> None:
        """Register `func` under `name`, replacing builtins of that name."""
        if not callable(func):
            raise TypeError(f"function '{name}' is not callable")
        self._functions.set(name, func)

    def add_functions(self, funcs: Union[Mapping[str, TemplateFunction],
                                         Iterable[Tuple[str, TemplateFunction]]]) -> None:
        """Register several functions at once."""
        pairs = funcs.items() if isinstance(funcs, Mapping) else funcs
        for name, func in pairs:
            self.add_function(name, func)

    def contains_function(self, name: str) -> bool:
        return self._functions.contains(name)

    def remove_function(self, name: str) -> None:
        self._functions.remove(name)

    def clear_functions(self) -> None:
        self._functions.clear()

    # =========================================================================
    # Sharing
    # =========================================================================

    def clone(self) -> "SrTemplate":
        """A new handle over the same variable and function maps."""
        return copy.copy(self)

    def shares_storage_with(self, other: "SrTemplate") -> bool:
        return self._variables is other._variables and self._functions is other._functions

    # =========================================================================
    # Rendering
    # =========================================================================

    def parse(self, text: str) -> List[AstNode]:
        """Parse `text` with this handle's delimiters without rendering."""
        return Parser(text, self._open, self._close).parse_template()

    def render(self, text: str) -> str:
        """
        Render a template.

        Args:
            text: The template string

        Returns:
            The rendered text

        Raises:
            BadSyntax: The template is malformed (nothing is evaluated)
            VariableNotFound: A referenced variable is not bound
            FunctionNotImplemented: A called function is not registered
            FunctionCallError: A function raised a FunctionError
        """
        nodes = self.parse(text)
        return Renderer(text, self._variables, self._functions).render(nodes)

    def __repr__(self) -> str:
        return (f"SrTemplate(delimiters={self._open!r}/{self._close!r}, "
                f"variables={len(self._variables)}, functions={len(self._functions)})")
