"""
Test fixtures and helpers for samlisp tests.

ParseAssertion gives the parser tests a fluent style:

    AssertParse("(+ 1 2)").yields(L(S("+"), I(1), I(2)))
    AssertParse("3.").fails()
"""

import sys
from pathlib import Path
from typing import Optional, Type

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from samlisp import (
    BoolNode, FloatNode, IntegerNode, ListNode, ParseError, Script, SymbolNode,
    parse, parse_expr,
)


# Short constructors for expected trees
def L(*items):
    return ListNode(items)


def S(name: str):
    return SymbolNode(name)


def F(value: float):
    return FloatNode(value)


def I(value: int):
    return IntegerNode(value)


def B(value: bool):
    return BoolNode(value)


class ParseAssertion:
    """Assertion builder for parsing a source string."""

    def __init__(self, source: str, single: bool = False):
        self.source = source
        self.single = single

    def as_expression(self) -> 'ParseAssertion':
        """Parse with parse_expr instead of parse."""
        self.single = True
        return self

    def _parse(self):
        if self.single:
            return parse_expr(self.source)
        return parse(self.source)

    def yields(self, *expected) -> None:
        """Assert that the source parses to exactly these top-level expressions."""
        result = self._parse()
        if self.single:
            assert len(expected) == 1, "an expression parse yields one node"
            assert result == expected[0], f"Expected {expected[0]!r}, got {result!r}"
        else:
            assert isinstance(result, Script)
            assert result == Script(expected), f"Expected {list(expected)!r}, got {result!r}"

    def fails(self, error_class: Type[ParseError] = ParseError,
              message: Optional[str] = None) -> ParseError:
        """Assert that parsing fails with the given error class."""
        with pytest.raises(error_class) as excinfo:
            self._parse()
        if message is not None:
            assert message in str(excinfo.value), \
                f"Expected {message!r} in error, got {str(excinfo.value)!r}"
        return excinfo.value


def AssertParse(source: str) -> ParseAssertion:
    """Create a parse assertion."""
    return ParseAssertion(source)


def AssertExpr(source: str) -> ParseAssertion:
    """Create a single-expression parse assertion."""
    return ParseAssertion(source, single=True)


@pytest.fixture
def source_file(tmp_path):
    """Fixture that writes source text to a file and returns its path."""
    def write(text: str, name: str = "script.lisp") -> str:
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return str(path)
    return write
