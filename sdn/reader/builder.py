"""
  Tree builder: token tree -> values.

Each list token is built bottom-up and then reduced into an SdnList:
keywords pair with the value that follows them, everything else stays positional.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from sdn.errors import (
    DanglingKeywordError,
    DuplicateKeywordError,
    SdnInternalError,
)
from sdn.reader.escapes import decode_escapes
from sdn.reader.grammar import Token, parse_tokens
from sdn.types import Keyword, Nil, SdnList, Symbol, Value

log = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def reduce_list(children: Iterable[Value]) -> SdnList:
    """Split a list's children into positional args and a keyword map."""
    args: list[Value] = []
    kwargs: dict[str, Value] = {}
    pending: str | None = None

    for child in children:
        if isinstance(child, Keyword):
            if pending is not None:
                # a keyword cannot be the value of another keyword
                raise DanglingKeywordError(pending)
            pending = child.name
        elif pending is not None:
            if pending in kwargs:
                raise DuplicateKeywordError(pending)
            kwargs[pending] = child
            pending = None
        else:
            args.append(child)

    if pending is not None:
        raise DanglingKeywordError(pending)
    return SdnList(args, kwargs)


def _build_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as e:
        raise SdnInternalError(f"grammar accepted {text!r} as an int") from e
    if not INT64_MIN <= value <= INT64_MAX:
        raise SdnInternalError(f"integer {text} does not fit in 64 bits")
    return value


def _build_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as e:
        raise SdnInternalError(f"grammar accepted {text!r} as a float") from e
    if not math.isfinite(value):
        raise SdnInternalError(f"float {text} is out of range")
    return value


def build_value(token: Token) -> Value:
    if token.rule != "list":
        return _build_atom(token)

    # lists are built bottom-up with an explicit stack:
    # (remaining child tokens, values built so far)
    stack = [(iter(token.children), [])]
    while True:
        children, built = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            value = reduce_list(built)
            if not stack:
                return value
            stack[-1][1].append(value)
        elif child.rule == "list":
            stack.append((iter(child.children), []))
        else:
            built.append(_build_atom(child))


def _build_atom(token: Token) -> Value:
    rule = token.rule
    if rule == "int":
        return _build_int(token.text)
    if rule == "float":
        return _build_float(token.text)
    if rule == "string":
        return decode_escapes(token.text[1:-1])
    if rule == "symbol":
        return Symbol(token.text)
    if rule == "keyword":
        return Keyword(token.text[1:])
    if rule == "eoi":
        return Nil
    raise SdnInternalError(f"unexpected token {rule!r} at offset {token.pos}")


def parse(source: str) -> list[Value]:
    """Parse SDN source text into its top-level values."""
    root = parse_tokens(source)
    values = [build_value(token) for token in root.children]
    if not values or values[-1] is not Nil:
        raise SdnInternalError("token tree does not end with end-of-input")
    values.pop()  # remove the Nil produced by end-of-input
    log.debug("parsed %d top-level value(s) from %d characters", len(values), len(source))
    return values
