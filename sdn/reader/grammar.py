"""
  SDN Lexer and Grammar Matcher

- Recognizes token boundaries and list nesting only
- Emits a token tree; no escape decoding, number conversion or keyword pairing:

    - root    -> Token("root", children=(expr..., eoi))
    - list    -> Token("list", children=(expr...))
    - atoms   -> Token("float" | "int" | "string" | "keyword" | "symbol")
    - end     -> Token("eoi")

Alternatives are tried in order, so `1.5` is a float and never `1` followed by junk.
Atoms must be followed by whitespace, a paren or the end of input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from sdn.errors import SdnSyntaxError


KEYWORD_NAME = r'[^\s()"]*'
SYMBOL_NAME = r'(?!-?[0-9])[^\s()":][^\s()"]*'

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<float>-?[0-9]+\.[0-9]+)"  # tried before int
    r"|(?P<int>-?[0-9]+)"
    r'|(?P<string>"(?:[^"\\]|\\[nt"\\])*")'  # only \n \t \" \\ escapes
    rf"|(?P<keyword>:{KEYWORD_NAME})"  # may have an empty name
    rf"|(?P<symbol>{SYMBOL_NAME})"  # fallback: symbols
)
WHITESPACE_RE = re.compile(r"\s*")
KEYWORD_NAME_RE = re.compile(KEYWORD_NAME)
SYMBOL_NAME_RE = re.compile(SYMBOL_NAME)

ATOM_RULES = frozenset({"float", "int", "string", "keyword", "symbol"})
ESCAPE_CHARS = 'nt"\\'


@dataclass(frozen=True)
class Token:
    rule: str
    text: str
    pos: int
    children: tuple[Token, ...] = ()


def _is_delimiter(char: str) -> bool:
    return char in "()" or char.isspace()


def _string_error(source: str, pos: int) -> SdnSyntaxError:
    """Locate why the string starting at `pos` failed to match."""
    i = pos + 1
    n = len(source)
    while i < n:
        char = source[i]
        if char == "\\":
            if i + 1 < n and source[i + 1] in ESCAPE_CHARS:
                i += 2
                continue
            return SdnSyntaxError(source, i + 1, "escape code (n, t, \" or \\)")
        i += 1
    return SdnSyntaxError(source, n, "closing '\"'")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields flat tokens, parens included."""
    pos = 0
    n = len(source)

    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            break

        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise _string_error(source, pos)
            raise SdnSyntaxError(source, pos, "expression")

        rule = m.lastgroup
        end = m.end()
        if rule in ATOM_RULES and end < n and not _is_delimiter(source[end]):
            raise SdnSyntaxError(source, end, "whitespace, '(', ')' or end of input")
        yield Token(rule, m.group(), pos)
        pos = end


class TokenStream:
    def __init__(self, source: str):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Token:
        tok = self.advance()
        if tok is None:
            raise SdnSyntaxError(self.source, len(self.source), "expression")
        if tok.rule == "rparen":
            raise SdnSyntaxError(self.source, tok.pos, "expression or end of input")

        if tok.rule != "lparen":
            return tok

        # open lists, innermost last: (opening paren, children so far)
        open_lists: list[tuple[Token, list[Token]]] = [(tok, [])]
        while True:
            nxt = self.advance()
            if nxt is None:
                raise SdnSyntaxError(self.source, len(self.source), "')'")
            if nxt.rule == "lparen":
                open_lists.append((nxt, []))
            elif nxt.rule == "rparen":
                opener, items = open_lists.pop()
                lst = Token("list", self.source[opener.pos : nxt.pos + 1], opener.pos, tuple(items))
                if not open_lists:
                    return lst
                open_lists[-1][1].append(lst)
            else:
                open_lists[-1][1].append(nxt)

    def parse_root(self) -> Token:
        exprs: list[Token] = []
        while self.peek() is not None:
            exprs.append(self.parse_expr())
        exprs.append(Token("eoi", "", len(self.source)))
        return Token("root", self.source, 0, tuple(exprs))


def parse_tokens(source: str) -> Token:
    """Match the whole source against the grammar and return the root token."""
    return TokenStream(source).parse_root()
