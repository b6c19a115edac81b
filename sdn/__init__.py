# SDN: a small Lisp-like data notation.
#
# Reading:  parse(text) -> list of values (SdnList, int, float, str, Symbol, Keyword)
# Writing:  dumps(value) / dumps_all(values) -> canonical text that parses back
#           to an equal tree.
#
# The Value alias lives in sdn.types so reader modules can use it without
# importing the package root.

from sdn.errors import (
    DanglingKeywordError,
    DuplicateKeywordError,
    SdnConfigError,
    SdnError,
    SdnInternalError,
    SdnKeywordError,
    SdnSerializeError,
    SdnSyntaxError,
)
from sdn.types import Keyword, Nil, SdnList, Symbol, Value, same_value
from sdn.reader import parse
from sdn.printer import dumps, dumps_all
from sdn.files import dump, load

__version__ = "0.1.0"

__all__ = [
    "DanglingKeywordError",
    "DuplicateKeywordError",
    "Keyword",
    "Nil",
    "SdnConfigError",
    "SdnError",
    "SdnInternalError",
    "SdnKeywordError",
    "SdnList",
    "SdnSerializeError",
    "SdnSyntaxError",
    "Symbol",
    "Value",
    "dump",
    "dumps",
    "dumps_all",
    "load",
    "parse",
    "same_value",
]
