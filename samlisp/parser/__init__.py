"""samlisp Parser - Builds Abstract Syntax Tree from tokens."""

from .parser import Parser
from .ast_nodes import *

__all__ = ['Parser', 'NodeType', 'ListNode', 'SymbolNode', 'FloatNode',
           'IntegerNode', 'BoolNode', 'Expr', 'Script']
