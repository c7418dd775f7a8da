import pytest
from lark import Token, Tree

from lispy.errors import LispyError, LispySyntaxError
from lispy.reader.grammar import parse
from lispy.reader.reader import node_tag, read, read_number
from lispy.types import Error, ErrorKind, QExpr, SExpr, Symbol


def read_source(source):
    return read(parse(source))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", SExpr()),
        ("42", SExpr([42])),
        ("-7", SExpr([-7])),
        ("-", SExpr([Symbol("-")])),
        ("foo", SExpr([Symbol("foo")])),
        ("(+ 1 2)", SExpr([SExpr([Symbol("+"), 1, 2])])),
        ("{1 2 3}", SExpr([QExpr([1, 2, 3])])),
        ("()", SExpr([SExpr()])),
        ("{}", SExpr([QExpr()])),
        ("+ 1 2", SExpr([Symbol("+"), 1, 2])),
        ("(head {1 (2 x) {}})", SExpr([SExpr([Symbol("head"), QExpr([1, SExpr([2, Symbol("x")]), QExpr()])])])),
        ("  (  * 2   3 )  ", SExpr([SExpr([Symbol("*"), 2, 3])])),
        ("(def {x} 1)\n", SExpr([SExpr([Symbol("def"), QExpr([Symbol("x")]), 1])])),
    ],
)
def test_read_source(source, expected):
    assert read_source(source) == expected


def test_numbers_take_priority_over_symbols():
    assert read_source("1abc") == SExpr([1, Symbol("abc")])
    assert read_source("a1") == SExpr([Symbol("a1")])


def test_symbol_characters():
    assert read_source("<=> a_b! &% \\") == SExpr(
        [Symbol("<=>"), Symbol("a_b!"), Symbol("&%"), Symbol("\\")]
    )


def test_out_of_range_literal_reads_as_error():
    assert read_source("99999999999999999999") == SExpr(
        [Error(ErrorKind.BAD_NUMBER, name="99999999999999999999")]
    )


@pytest.mark.parametrize(
    "text,expected",
    [
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("9223372036854775808", Error(ErrorKind.BAD_NUMBER, name="9223372036854775808")),
        ("-9223372036854775809", Error(ErrorKind.BAD_NUMBER, name="-9223372036854775809")),
        ("007", 7),
    ],
)
def test_read_number_bounds(text, expected):
    assert read_number(text) == expected


@pytest.mark.parametrize("source", ["(", "(+ 1 2", "}", "{1 2)", "#"])
def test_malformed_input_raises_syntax_error(source):
    with pytest.raises(LispySyntaxError):
        parse(source)


def test_syntax_error_reports_position():
    with pytest.raises(LispySyntaxError) as info:
        parse("(+ 1 #)")
    assert info.value.line == 1
    assert info.value.column == 6


def test_read_hand_built_tree_skips_delimiters():
    tree = Tree(
        "qexpr",
        [
            Token("LBRACE", "{"),
            Token("NUMBER", "1"),
            Token("SYMBOL", "x"),
            Token("__ANON_0", ""),
            Token("RBRACE", "}"),
        ],
    )
    assert read(tree) == QExpr([1, Symbol("x")])


def test_read_unknown_node_raises():
    with pytest.raises(LispyError):
        read(Tree("vector", []))


def test_node_tag():
    assert node_tag(Tree("sexpr", [])) == "sexpr"
    assert node_tag(Token("NUMBER", "1")) == "NUMBER"


def test_grammar_module_compiles_without_warnings():
    import warnings
    from pathlib import Path

    from lispy.reader import grammar

    source = Path(grammar.__file__).read_text()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(source, grammar.__file__, "exec")
    assert r"[a-zA-Z0-9_+\-*\/\\=<>!&%]+" in grammar.__doc__
