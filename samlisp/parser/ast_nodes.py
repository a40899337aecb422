"""
Abstract Syntax Tree node definitions for samlisp.

An expression is exactly one of five node classes (see Expr). Nodes are
immutable; source positions are carried for diagnostics but do not take
part in equality, so a parsed tree compares equal to one built by hand.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Tuple, Union
from enum import Enum, auto


class NodeType(Enum):
    """AST node types."""
    LIST = auto()      # ( ... )
    SYMBOL = auto()
    FLOAT = auto()
    INTEGER = auto()
    BOOL = auto()


@dataclass(frozen=True)
class ASTNode:
    """Base class for all AST nodes."""
    node_type: ClassVar[NodeType]
    line: int = field(default=0, compare=False, repr=False, kw_only=True)
    column: int = field(default=0, compare=False, repr=False, kw_only=True)


@dataclass(frozen=True)
class ListNode(ASTNode):
    """Parenthesized list node; owns its children."""
    node_type: ClassVar[NodeType] = NodeType.LIST
    items: Tuple['Expr', ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'items', tuple(self.items))

    def __iter__(self) -> Iterator['Expr']:
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return trees_equal(self.items, other.items)

    def __hash__(self):
        return hash((NodeType.LIST, tree_hash(self.items)))

    def __repr__(self):
        return tree_repr(self)


@dataclass(frozen=True)
class SymbolNode(ASTNode):
    """Symbol node."""
    node_type: ClassVar[NodeType] = NodeType.SYMBOL
    value: str = ""

    def __repr__(self):
        return f"Symbol({self.value})"


@dataclass(frozen=True)
class FloatNode(ASTNode):
    """Float literal node."""
    node_type: ClassVar[NodeType] = NodeType.FLOAT
    value: float = 0.0

    def __repr__(self):
        return f"Float({self.value!r})"


@dataclass(frozen=True)
class IntegerNode(ASTNode):
    """Integer literal node (signed 64-bit range)."""
    node_type: ClassVar[NodeType] = NodeType.INTEGER
    value: int = 0

    def __repr__(self):
        return f"Integer({self.value})"


@dataclass(frozen=True)
class BoolNode(ASTNode):
    """Boolean literal node."""
    node_type: ClassVar[NodeType] = NodeType.BOOL
    value: bool = False

    def __repr__(self):
        return f"Bool({'true' if self.value else 'false'})"


Expr = Union[ListNode, SymbolNode, FloatNode, IntegerNode, BoolNode]


@dataclass(frozen=True)
class Script:
    """Root node: the top-level expressions in source order."""
    expressions: Tuple[Expr, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'expressions', tuple(self.expressions))

    def __iter__(self) -> Iterator[Expr]:
        return iter(self.expressions)

    def __len__(self):
        return len(self.expressions)

    def __getitem__(self, index):
        return self.expressions[index]

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return trees_equal(self.expressions, other.expressions)

    def __hash__(self):
        return hash(("Script", tree_hash(self.expressions)))

    def __repr__(self):
        return "Script([" + ", ".join(tree_repr(expr) for expr in self.expressions) + "])"


# Lists may nest deeper than the recursion limit, so the helpers below walk
# trees with explicit stacks. Leaf nodes use their dataclass __eq__/__hash__.

def trees_equal(left: Tuple[Expr, ...], right: Tuple[Expr, ...]) -> bool:
    """Compare two sequences of expressions element by element."""
    if len(left) != len(right):
        return False
    pending = list(zip(left, right))
    while pending:
        a, b = pending.pop()
        if a.__class__ is not b.__class__:
            return False
        if isinstance(a, ListNode):
            if len(a.items) != len(b.items):
                return False
            pending.extend(zip(a.items, b.items))
        elif a != b:
            return False
    return True


def tree_hash(exprs: Tuple[Expr, ...]) -> int:
    """Hash a sequence of expressions consistently with trees_equal."""
    parts = []
    pending = list(reversed(exprs))
    while pending:
        node = pending.pop()
        if isinstance(node, ListNode):
            parts.append((NodeType.LIST, len(node.items)))
            pending.extend(reversed(node.items))
        else:
            parts.append(hash(node))
    return hash((len(exprs), tuple(parts)))


def tree_repr(node: Expr) -> str:
    """repr() of an expression, e.g. List([Symbol(a), Integer(1)])."""
    parts = []
    pending = [node]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, ListNode):
            parts.append("List([")
            pending.append("])")
            for i in range(len(item.items) - 1, -1, -1):
                pending.append(item.items[i])
                if i:
                    pending.append(", ")
        else:
            parts.append(repr(item))
    return "".join(parts)
