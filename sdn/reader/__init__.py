from sdn.reader.builder import build_value, parse, reduce_list
from sdn.reader.escapes import decode_escapes, encode_escapes
from sdn.reader.grammar import Token, TokenStream, lex, parse_tokens

__all__ = [
    "Token",
    "TokenStream",
    "build_value",
    "decode_escapes",
    "encode_escapes",
    "lex",
    "parse",
    "parse_tokens",
    "reduce_list",
]
