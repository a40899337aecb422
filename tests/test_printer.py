"""Tests for rendering ASTs back to text."""

import pytest

from samlisp import dump, parse, to_source
from samlisp.printer import format_float
from .conftest import B, F, I, L, S


def test_to_source_list():
    assert to_source(L(S("+"), I(1), F(2.5), B(True))) == "(+ 1 2.5 true)"


def test_to_source_script_one_expression_per_line():
    assert to_source(parse("a  (b   c)\n\n false")) == "a\n(b c)\nfalse"


def test_to_source_empty_list():
    assert to_source(L()) == "()"


@pytest.mark.parametrize("value,text", [
    (2.5, "2.5"),
    (3.0, "3.0"),
    (0.1, "0.1"),
    (1e20, "100000000000000000000.0"),
    (1e-7, "0.0000001"),
])
def test_format_float(value, text):
    assert format_float(value) == text


def test_format_float_rejects_non_finite():
    with pytest.raises(ValueError):
        format_float(float('inf'))
    with pytest.raises(ValueError):
        format_float(float('nan'))


def test_negative_numbers_cannot_be_rendered():
    with pytest.raises(ValueError):
        to_source(I(-1))
    with pytest.raises(ValueError):
        to_source(F(-1.5))


def test_to_source_rejects_foreign_objects():
    with pytest.raises(TypeError):
        to_source([1, 2])


@pytest.mark.parametrize("source", [
    "(+ 1 2.5 true)",
    "(define (fact n) (if (< n 2) 1 (* n (fact (- n 1)))))",
    "a b (c (d (e))) 0.000001 123456789.125 false",
    "(foo->bar *special* . ...)",
])
def test_rendered_source_parses_back(source):
    script = parse(source)
    assert parse(to_source(script)) == script


def test_dump():
    assert dump(parse("(a (b) () 1.5)")) == "\n".join([
        "Script",
        "  List",
        "    Symbol(a)",
        "    List",
        "      Symbol(b)",
        "    List (empty)",
        "    Float(1.5)",
    ])


def test_dump_custom_indent():
    assert dump(L(B(False), I(7)), indent="\t") == "List\n\tBool(false)\n\tInteger(7)"


def test_to_source_deep_nesting():
    depth = 5000
    source = "(" * depth + "x 1" + ")" * depth
    script = parse(source)
    assert to_source(script) == source
    assert parse(to_source(script)) == script


def test_dump_deep_nesting():
    depth = 3000
    lines = dump(parse("(" * depth + ")" * depth), indent=" ").split("\n")
    assert len(lines) == depth + 1
    assert lines[-1] == " " * depth + "List (empty)"


def test_to_source_rejects_bare_strings():
    with pytest.raises(TypeError):
        to_source("(a)")
