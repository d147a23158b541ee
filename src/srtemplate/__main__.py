#!/usr/bin/env python3
"""
CLI for rendering template files.

Usage:
    python -m srtemplate render FILE [--var NAME=VALUE ...] [--output FILE]
    python -m srtemplate check FILE

Examples:
    # Render with two variables
    python -m srtemplate render greeting.txt --var name=World --var count=3

    # Use custom delimiters and write the result to a file
    python -m srtemplate render page.tpl --open "<%" --close "%>" -o page.txt

    # Only check the syntax
    python -m srtemplate check page.tpl
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from . import SrTemplate, TemplateError, BadSyntax, DEFAULT_BUILTINS
from .parser import DEFAULT_OPEN, DEFAULT_CLOSE


def setup_logging(debug: bool = False) -> None:
    """Send srtemplate log records to stderr; DEBUG with --debug, else WARNING."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("srtemplate")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.handlers = [handler]
    logger.propagate = False


def parse_var(var_str: str) -> tuple:
    """Parse a variable string like 'name=value' into (name, value)."""
    if '=' not in var_str:
        raise ValueError(f"Invalid variable format: {var_str} (expected name=value)")

    name, value = var_str.split('=', 1)
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid variable format: {var_str} (empty name)")
    return (name, value)


def _read_source(path_str: str) -> Optional[str]:
    source_path = Path(path_str)
    if not source_path.exists():
        print(f"Error: File not found: {source_path}", file=sys.stderr)
        return None
    return source_path.read_text()


def _make_template(args) -> SrTemplate:
    builtins = () if args.no_builtins else DEFAULT_BUILTINS
    return SrTemplate(args.open, args.close, builtins=builtins)


def cmd_render(args) -> int:
    """Render a template file."""
    source = _read_source(args.file)
    if source is None:
        return 1

    variables: Dict[str, str] = {}
    for var_str in args.var or []:
        try:
            name, value = parse_var(var_str)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        variables[name] = value

    try:
        ctx = _make_template(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    ctx.add_variables(variables)

    try:
        result = ctx.render(source)
    except TemplateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(result)
        print(f"Rendered to: {args.output}")
    else:
        sys.stdout.write(result)
    return 0


def cmd_check(args) -> int:
    """Check a template file for syntax errors."""
    source = _read_source(args.file)
    if source is None:
        return 1

    try:
        nodes = _make_template(args).parse(source)
    except BadSyntax as e:
        print(f"{args.file}:{e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"OK: {Path(args.file).name} - {len(nodes)} node(s), no errors")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python -m srtemplate',
        description='Render srtemplate templates',
    )
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='action', required=True)

    def add_common(sub):
        sub.add_argument('file', help='Template file')
        sub.add_argument('--open', default=DEFAULT_OPEN, metavar='DELIM',
                         help=f'Open delimiter (default {DEFAULT_OPEN})')
        sub.add_argument('--close', default=DEFAULT_CLOSE, metavar='DELIM',
                         help=f'Close delimiter (default {DEFAULT_CLOSE})')
        sub.add_argument('--no-builtins', action='store_true',
                         help='Do not register builtin functions')

    # render command
    render_parser = subparsers.add_parser('render', help='Render a template file')
    add_common(render_parser)
    render_parser.add_argument('-v', '--var', action='append', metavar='NAME=VALUE',
                               help='Variable value (can be repeated)')
    render_parser.add_argument('-o', '--output', metavar='FILE',
                               help='Write the result to FILE instead of stdout')

    # check command
    check_parser = subparsers.add_parser('check', help='Check template syntax')
    add_common(check_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    if args.action == 'render':
        return cmd_render(args)
    elif args.action == 'check':
        return cmd_check(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
