"""
samlisp - Parser for a minimal Lisp-like language.

Turns source text made of parenthesized lists, symbols, floats, integers
and booleans into an abstract syntax tree.
"""

from .errors import GrammarError, InternalInvariantError, NumericOverflowError, ParseError
from .frontend import LispFrontend, parse, parse_expr
from .parser.ast_nodes import (
    BoolNode, Expr, FloatNode, IntegerNode, ListNode, NodeType, Script, SymbolNode,
)
from .printer import dump, to_source

__version__ = "0.1.0"

__all__ = [
    'parse', 'parse_expr', 'LispFrontend', 'to_source', 'dump',
    'Script', 'Expr', 'NodeType', 'ListNode', 'SymbolNode', 'FloatNode',
    'IntegerNode', 'BoolNode',
    'ParseError', 'GrammarError', 'NumericOverflowError', 'InternalInvariantError',
]
