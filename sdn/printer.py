"""
Canonical printer: values -> SDN text that reads back as an equal tree.

Output is deterministic; with ``sort_keys`` (the default) kwargs are emitted
in key order, otherwise in insertion order.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable

from sdn.errors import SdnSerializeError
from sdn.reader.escapes import encode_escapes
from sdn.reader.grammar import KEYWORD_NAME_RE, SYMBOL_NAME_RE
from sdn.reader.builder import INT64_MAX, INT64_MIN
from sdn.types import Keyword, NilType, SdnList, Symbol, Value


def format_float(value: float) -> str:
    """Decimal text without an exponent; always has a fractional part."""
    if not math.isfinite(value):
        raise SdnSerializeError(f"{value!r} has no SDN representation")
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text


def _list_items(lst: SdnList, sort_keys: bool):
    """Yield ``(label, value)`` pairs: args unlabelled, then ``:key`` labelled kwargs."""
    keys = sorted(lst.kwargs) if sort_keys else list(lst.kwargs)
    for key in keys:
        if not KEYWORD_NAME_RE.fullmatch(key):
            raise SdnSerializeError(f"{key!r} is not a valid keyword name")
    for arg in lst.args:
        yield None, arg
    for key in keys:
        yield f":{key}", lst.kwargs[key]


def _format_atom(value: Value) -> str:
    if isinstance(value, Symbol):
        if not SYMBOL_NAME_RE.fullmatch(value.name):
            raise SdnSerializeError(f"{value.name!r} is not a valid symbol name")
        return value.name
    if isinstance(value, Keyword):
        if not KEYWORD_NAME_RE.fullmatch(value.name):
            raise SdnSerializeError(f"{value.name!r} is not a valid keyword name")
        return f":{value.name}"
    if isinstance(value, bool):
        raise SdnSerializeError("booleans have no SDN representation")
    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise SdnSerializeError(f"integer {value} does not fit in 64 bits")
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        return f'"{encode_escapes(value)}"'
    if isinstance(value, NilType):
        return "nil"
    raise SdnSerializeError(f"cannot serialize {type(value).__name__} value {value!r}")


def dumps(value: Value, sort_keys: bool = True) -> str:
    """Render one value as canonical SDN text."""
    if not isinstance(value, SdnList):
        return _format_atom(value)

    out = ["("]
    # one [items, first] frame per list still being written
    stack = [[_list_items(value, sort_keys), True]]
    while stack:
        frame = stack[-1]
        item = next(frame[0], None)
        if item is None:
            stack.pop()
            out.append(")")
            continue
        label, child = item
        if not frame[1]:
            out.append(" ")
        frame[1] = False
        if label is not None:
            out.append(label + " ")
        if isinstance(child, SdnList):
            out.append("(")
            stack.append([_list_items(child, sort_keys), True])
        else:
            out.append(_format_atom(child))
    return "".join(out)


def dumps_all(values: Iterable[Value], sort_keys: bool = True) -> str:
    """Bulk export: one canonical value per line."""
    return "\n".join(dumps(value, sort_keys) for value in values)
