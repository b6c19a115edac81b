import pytest
from hypothesis import given, strategies as st

from sdn.errors import SdnError, SdnSyntaxError
from sdn.reader.grammar import lex, parse_tokens


def _rules_and_text(source):
    return [(tok.rule, tok.text) for tok in lex(source)]


def _shape(token):
    if token.children:
        return (token.rule, [_shape(child) for child in token.children])
    return token.rule


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"x\\"y"', [("string", '"x\\"y"')]),
        ('"a b" c', [("string", '"a b"'), ("symbol", "c")]),
        ("42", [("int", "42")]),
        ("-7", [("int", "-7")]),
        ("1.5", [("float", "1.5")]),
        ("-1.5", [("float", "-1.5")]),
        ("007", [("int", "007")]),
        (":key", [("keyword", ":key")]),
        (":", [("keyword", ":")]),
        ("::a", [("keyword", "::a")]),
        ("-", [("symbol", "-")]),
        ("-x", [("symbol", "-x")]),
        ("+1", [("symbol", "+1")]),
        ("a:b", [("symbol", "a:b")]),
        ("nil", [("symbol", "nil")]),
        ("(a)(b)", [("lparen", "("), ("symbol", "a"), ("rparen", ")"),
                    ("lparen", "("), ("symbol", "b"), ("rparen", ")")]),
        ("  a\n\tb  ", [("symbol", "a"), ("symbol", "b")]),
    ]
)
def test_lexer_basic(source, expected):
    assert _rules_and_text(source) == expected


def test_lexer_records_positions():
    assert [tok.pos for tok in lex(" (ab 12)")] == [1, 2, 5, 7]


@pytest.mark.parametrize("source", ["", "    ", "\n\t\r\n"])
def test_lexer_blank_input(source):
    assert list(lex(source)) == []


def test_root_token_shape():
    root = parse_tokens('(1 (2.5) :k "v") x')
    assert _shape(root) == (
        "root",
        [("list", ["int", ("list", ["float"]), "keyword", "string"]), "symbol", "eoi"],
    )


def test_list_token_covers_its_source():
    root = parse_tokens('  (a (b c))  ')
    lst = root.children[0]
    assert lst.text == "(a (b c))"
    assert lst.pos == 2
    assert lst.children[1].text == "(b c)"


def test_empty_list_has_no_children():
    root = parse_tokens("()")
    assert root.children[0].rule == "list"
    assert root.children[0].children == ()


def test_empty_input_is_only_end_of_input():
    root = parse_tokens("")
    assert [tok.rule for tok in root.children] == ["eoi"]


def test_end_of_input_marks_source_length():
    source = "a b  "
    assert parse_tokens(source).children[-1].pos == len(source)


DELIMITER = "whitespace, '(', ')' or end of input"


@pytest.mark.parametrize(
    "source,pos,expected",
    [
        ("(1 2", 4, "')'"),
        ("((1)", 4, "')'"),
        ("(:a", 3, "')'"),
        (")", 0, "expression or end of input"),
        ("a)", 1, "expression or end of input"),
        ("(a))", 3, "expression or end of input"),
        ("12abc", 2, DELIMITER),
        ("1.", 1, DELIMITER),
        ("1.5.3", 3, DELIMITER),
        ('"a"b', 3, DELIMITER),
        ('a"b"', 1, DELIMITER),
        ('"abc', 4, "closing '\"'"),
        ('"a\\qb"', 3, 'escape code (n, t, " or \\)'),
        ('"a\\', 3, 'escape code (n, t, " or \\)'),
    ]
)
def test_grammar_errors(source, pos, expected):
    with pytest.raises(SdnSyntaxError) as excinfo:
        parse_tokens(source)
    assert excinfo.value.pos == pos
    assert excinfo.value.expected == expected


def test_grammar_error_line_and_column():
    with pytest.raises(SdnSyntaxError) as excinfo:
        parse_tokens("a\n  12x")
    err = excinfo.value
    assert (err.pos, err.line, err.column) == (6, 2, 5)
    assert str(err) == f"expected {DELIMITER} at line 2, column 5 (offset 6)"


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.text(max_size=50))
def test_grammar_only_raises_syntax_errors(source):
    try:
        root = parse_tokens(source)
    except SdnSyntaxError:
        return
    assert root.children[-1].rule == "eoi"


@given(st.text(alphabet='()" \\:-.1a', max_size=30))
def test_grammar_no_crash_on_punctuation(source):
    try:
        parse_tokens(source)
    except SdnError:
        pass
