"""
Renders samlisp ASTs as text.

to_source() produces text that parses back to an equal tree; dump() is an
indented one-node-per-line view for debugging.
"""

import math
from decimal import Decimal
from typing import List, Union

from .parser.ast_nodes import (
    BoolNode, Expr, FloatNode, IntegerNode, ListNode, Script, SymbolNode,
)


def format_float(value: float) -> str:
    """Format a float as digits.digits, the only float form the lexer accepts."""
    if not math.isfinite(value):
        raise ValueError(f"cannot render non-finite float {value!r} as source")
    if value < 0:
        # Literals are unsigned; negative floats only come from hand-built trees
        raise ValueError(f"cannot render negative float {value!r} as source")

    # repr() gives the shortest round-tripping digits; Decimal expands exponents
    text = format(Decimal(repr(value)), 'f')
    if '.' not in text:
        text += '.0'
    return text


def atom_source(node: Expr) -> str:
    if isinstance(node, SymbolNode):
        return node.value
    if isinstance(node, FloatNode):
        return format_float(node.value)
    if isinstance(node, IntegerNode):
        if node.value < 0:
            raise ValueError(f"cannot render negative integer {node.value} as source")
        return str(node.value)
    if isinstance(node, BoolNode):
        return 'true' if node.value else 'false'
    raise TypeError(f"not a samlisp AST node: {node!r}")


def to_source(node: Union[Expr, Script]) -> str:
    """Render an expression or a whole script as samlisp source.

    Walks the tree with an explicit stack, so nesting depth is not limited
    by the recursion limit.
    """
    if isinstance(node, Script):
        return '\n'.join(to_source(expr) for expr in node)
    if isinstance(node, str):
        raise TypeError(f"not a samlisp AST node: {node!r}")

    parts: List[str] = []
    pending = [node]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, ListNode):
            parts.append('(')
            pending.append(')')
            for i in range(len(item.items) - 1, -1, -1):
                pending.append(item.items[i])
                if i:
                    pending.append(' ')
        else:
            parts.append(atom_source(item))
    return ''.join(parts)


def dump(node: Union[Expr, Script], indent: str = "  ") -> str:
    """Render an indented tree, one node per line."""
    lines: List[str] = []
    pending = [(node, 0)]

    while pending:
        n, depth = pending.pop()
        pad = indent * depth
        if isinstance(n, Script):
            lines.append(f"{pad}Script")
            pending.extend((expr, depth + 1) for expr in reversed(n.expressions))
        elif isinstance(n, ListNode):
            lines.append(f"{pad}List" if len(n) else f"{pad}List (empty)")
            pending.extend((item, depth + 1) for item in reversed(n.items))
        elif isinstance(n, (SymbolNode, FloatNode, IntegerNode, BoolNode)):
            lines.append(f"{pad}{n!r}")
        else:
            raise TypeError(f"not a samlisp AST node: {n!r}")

    return '\n'.join(lines)
