# Core value types for SDN's data model.
# Numbers and strings are plain Python types (int, float, str). Symbols,
# keywords and lists get their own classes so the variants stay distinct.
#
# - Value: anything the reader produces or the printer accepts.
# - Nil only ever appears as the end-of-input artifact inside the reader.

from typing import Union

from sdn.types.nil import Nil, NilType
from sdn.types.symbol import Keyword, Symbol
from sdn.types.sdn_list import SdnList, same_value

Value = Union[SdnList, int, float, str, Symbol, Keyword, NilType]

__all__ = [
    "Keyword",
    "Nil",
    "NilType",
    "SdnList",
    "Symbol",
    "Value",
    "same_value",
]
