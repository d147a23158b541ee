"""
srtemplate - a small embeddable templating engine.

This package provides:
- Parser: Splits a template into raw text and delimited expressions
- Renderer: Resolves variables and calls functions, innermost first
- SrTemplate: Thread-shared variables/functions plus a delimiter pair
- Builtins: text, math and os function groups

Usage:
    from srtemplate import SrTemplate

    ctx = SrTemplate()
    ctx.add_variable("var", "World")
    ctx.add_variable("number", 85)

    ctx.render("Hello {{ var }}! Number: {{ number }}")
    ctx.render("{{ toUpper(trim(var)) }}")

    # Custom delimiters
    ctx.set_delimiter("<%", "%>")
    ctx.render("Hello <% var %>")

Errors:
    try:
        ctx.render(template)
    except BadSyntax as e:
        print(e.diagnostic.format())
    except VariableNotFound as e:
        print(f"missing {e.name}")
"""

from .ast import (
    SourceSpan,
    AstNode,
    RawText,
    Variable,
    Function,
    StringLiteral,
    NumberLiteral,
    FloatLiteral,
)

from .scanner import (
    Cursor,
    SourceLocation,
)

from .errors import (
    SyntaxErrorKind,
    Diagnostic,
    TemplateError,
    BadSyntax,
    VariableNotFound,
    FunctionNotImplemented,
    FunctionCallError,
)

from .functions import (
    TemplateFunction,
    FunctionError,
    InvalidArgument,
    InvalidType,
    ArgumentsIncomplete,
    RuntimeFailure,
    ConvertArgsFailed,
)

from .parser import (
    Parser,
    parse,
)

from .render import (
    Renderer,
    render_nodes,
)

from .registry import ShardedMap

from .template import SrTemplate

from .builtin import (
    BuiltinFunction,
    BuiltinRegistry,
    DEFAULT_BUILTINS,
    get_builtin_registry,
)

from . import validations
from .helper import to_typed_args, from_args, FromArgsError

__version__ = "0.4.0"

__all__ = [
    # AST
    'SourceSpan',
    'AstNode',
    'RawText',
    'Variable',
    'Function',
    'StringLiteral',
    'NumberLiteral',
    'FloatLiteral',

    # Scanner
    'Cursor',
    'SourceLocation',

    # Errors
    'SyntaxErrorKind',
    'Diagnostic',
    'TemplateError',
    'BadSyntax',
    'VariableNotFound',
    'FunctionNotImplemented',
    'FunctionCallError',

    # Functions
    'TemplateFunction',
    'FunctionError',
    'InvalidArgument',
    'InvalidType',
    'ArgumentsIncomplete',
    'RuntimeFailure',
    'ConvertArgsFailed',
    'validations',
    'to_typed_args',
    'from_args',
    'FromArgsError',

    # Parser / renderer
    'Parser',
    'parse',
    'Renderer',
    'render_nodes',

    # Engine
    'ShardedMap',
    'SrTemplate',

    # Builtins
    'BuiltinFunction',
    'BuiltinRegistry',
    'DEFAULT_BUILTINS',
    'get_builtin_registry',
]
