"""
samlisp front end.

Coordinates lexing and parsing, and provides the command-line interface.
"""

import sys
from typing import List, Optional, TextIO

from .errors import ParseError
from .lexer import Lexer
from .parser import Parser
from .parser.ast_nodes import Expr, Script
from .printer import dump, to_source


def parse(source: str, filename: str = "<input>") -> Script:
    """Parse source text into a Script of one or more expressions.

    Raises ParseError (GrammarError or NumericOverflowError) when the text
    is not a valid script.
    """
    tokens = Lexer(source, filename).tokenize()
    return Parser(tokens, filename).parse()


def parse_expr(source: str, filename: str = "<input>") -> Expr:
    """Parse source text that must hold exactly one expression."""
    tokens = Lexer(source, filename).tokenize()
    return Parser(tokens, filename).parse_single()


FORMATS = ('tree', 'source', 'repr')


def render(node, fmt: str) -> str:
    if fmt == 'tree':
        return dump(node)
    elif fmt == 'source':
        return to_source(node)
    elif fmt == 'repr':
        return repr(node)
    raise ValueError(f"unknown output format: {fmt}")


class LispFrontend:
    """Parses samlisp sources from strings, files and interactive input."""

    def __init__(self, verbose: bool = False, output_format: str = 'tree'):
        if output_format not in FORMATS:
            raise ValueError(f"unknown output format: {output_format}")
        self.verbose = verbose
        self.output_format = output_format

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[samlisp] {message}", file=sys.stderr)

    def parse_string(self, source: str, filename: str = "<input>") -> Script:
        self.log(f"Parsing {filename} ({len(source)} characters)...")
        script = parse(source, filename)
        self.log(f"Parsed {len(script)} top-level expression(s)")
        return script

    def parse_string_expr(self, source: str, filename: str = "<input>") -> Expr:
        self.log(f"Parsing {filename} ({len(source)} characters) as one expression...")
        expr = parse_expr(source, filename)
        self.log(f"Parsed one {expr.node_type.name.lower()} expression")
        return expr

    def read_source(self, input_path: str):
        """Read a source file, or standard input for '-'. Returns (source, filename)."""
        if input_path == '-':
            self.log("Reading standard input...")
            return sys.stdin.read(), "<stdin>"

        self.log(f"Reading {input_path}...")
        with open(input_path, 'r', encoding='utf-8') as f:
            return f.read(), input_path

    def parse_file(self, input_path: str) -> Script:
        """
        Parse a samlisp source file.

        Args:
            input_path: Path to the source file, or '-' for standard input

        Returns:
            The parsed Script
        """
        source, filename = self.read_source(input_path)
        return self.parse_string(source, filename)

    def parse_file_expr(self, input_path: str) -> Expr:
        """Parse a source file (or '-' for standard input) holding exactly one expression."""
        source, filename = self.read_source(input_path)
        return self.parse_string_expr(source, filename)

    def run_file(self, input_path: str, single: bool = False) -> bool:
        """Parse a file and print it. Returns True on success."""
        try:
            if single:
                node = self.parse_file_expr(input_path)
            else:
                node = self.parse_file(input_path)
        except ParseError as e:
            print(f"Parse error: {e}", file=sys.stderr)
            return False
        except OSError as e:
            print(f"Cannot read {input_path}: {e.strerror or e}", file=sys.stderr)
            return False

        try:
            print(render(node, self.output_format))
        except ValueError as e:
            print(f"Cannot render {input_path}: {e}", file=sys.stderr)
            return False
        return True

    def repl(self, stdin: Optional[TextIO] = None, prompt: str = "samlisp >> ") -> int:
        """Read a line, parse it as one expression, print the tree. Loops until EOF."""
        stdin = stdin or sys.stdin
        count = 0
        while True:
            print(prompt, end='', flush=True)
            line = stdin.readline()
            if not line:
                print()
                self.log(f"Parsed {count} expression(s)")
                return 0
            if not line.strip():
                continue

            try:
                tree = parse_expr(line, "<repl>")
            except ParseError as e:
                print(f"PARSER ERROR: {e}")
                continue

            count += 1
            try:
                print(render(tree, self.output_format))
            except ValueError as e:
                print(f"RENDER ERROR: {e}")


def main(argv: Optional[List[str]] = None):
    """Command-line interface for the parser."""
    import argparse

    parser = argparse.ArgumentParser(
        prog='samlisp',
        description='samlisp - parse Lisp source into an abstract syntax tree'
    )
    parser.add_argument('--verbose', action='store_true',
                        help='Verbose output')
    subparsers = parser.add_subparsers(dest='command', required=True)

    parse_cmd = subparsers.add_parser('parse', help='Parse a source file and print it')
    parse_cmd.add_argument('input', help="Input source file ('-' for standard input)")
    parse_cmd.add_argument('-f', '--format', choices=FORMATS, default='tree',
                           help='Output format (default: tree)')
    parse_cmd.add_argument('--expr', action='store_true',
                           help='Require exactly one expression')

    repl_cmd = subparsers.add_parser('repl', help='Parse expressions interactively')
    repl_cmd.add_argument('-f', '--format', choices=FORMATS, default='source',
                          help='Output format (default: source)')

    args = parser.parse_args(argv)

    frontend = LispFrontend(verbose=args.verbose, output_format=args.format)

    if args.command == 'repl':
        sys.exit(frontend.repl())

    success = frontend.run_file(args.input, single=args.expr)
    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
