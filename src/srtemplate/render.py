"""
Tree-walking renderer for parsed templates.

Evaluates nodes in order against a variable map and a function map and
concatenates the results. Function calls are evaluated post-order: every
argument, left to right, before the call itself.
"""

import logging
from typing import List

from .ast import (
    AstNode, RawText, Variable, Function,
    StringLiteral, NumberLiteral, FloatLiteral,
)
from .errors import VariableNotFound, FunctionNotImplemented, FunctionCallError
from .functions import FunctionError, TemplateFunction
from .registry import ShardedMap


logger = logging.getLogger(__name__)


class Renderer:
    """
    Evaluates the nodes of one template.

    Usage:
        renderer = Renderer(source, variables, functions)
        text = renderer.render(nodes)
    """

    def __init__(self, source: str, variables: ShardedMap[str],
                 functions: ShardedMap[TemplateFunction]):
        self.source = source
        self.variables = variables
        self.functions = functions

    def render(self, nodes: List[AstNode]) -> str:
        """Render a node list to text, raising on the first failure."""
        return "".join(self._evaluate(node) for node in nodes)

    def _evaluate(self, node: AstNode) -> str:
        """Evaluate a single node to its output text."""
        if isinstance(node, Function):
            return self._eval_function(node)
        elif isinstance(node, Variable):
            return self._eval_variable(node)
        elif isinstance(node, (RawText, StringLiteral, NumberLiteral, FloatLiteral)):
            # Literals are handed over as written; callees convert them
            return node.text(self.source)
        else:
            raise TypeError(f"Unknown node type: {type(node).__name__}")

    def _eval_variable(self, node: Variable) -> str:
        name = node.text(self.source)
        value = self.variables.get(name)
        if value is None:
            raise VariableNotFound(name)
        return value

    def _eval_function(self, node: Function) -> str:
        arguments = [self._evaluate(arg) for arg in node.arguments]
        name = node.name(self.source)

        func = self.functions.get(name)
        if func is None:
            raise FunctionNotImplemented(name)

        logger.debug("Evaluated args for %s: %r", name, arguments)
        try:
            result = func(arguments)
        except FunctionError as e:
            raise FunctionCallError(name, e) from e
        logger.debug("Result of %s: %r", name, result)

        if not isinstance(result, str):
            result = str(result)
        return result


def render_nodes(source: str, nodes: List[AstNode], variables: ShardedMap[str],
                 functions: ShardedMap[TemplateFunction]) -> str:
    """
    Convenience function to render parsed nodes.

    Args:
        source: The template text the nodes were parsed from
        nodes: Output of `srtemplate.parser.parse`
        variables: Name to text map
        functions: Name to callable map

    Raises:
        VariableNotFound, FunctionNotImplemented, FunctionCallError
    """
    return Renderer(source, variables, functions).render(nodes)
