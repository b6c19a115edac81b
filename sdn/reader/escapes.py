"""String escape codec shared by the reader and the printer.

Only four escapes exist: ``\\n``, ``\\t``, ``\\"`` and ``\\\\``.
"""

from __future__ import annotations

from sdn.errors import SdnInternalError

ESCAPE_CODES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

_ENCODE_TABLE = str.maketrans({char: "\\" + code for code, char in ESCAPE_CODES.items()})


def decode_escapes(content: str) -> str:
    """Decode the text between a string token's quotes."""
    if "\\" not in content:
        return content
    out: list[str] = []
    i = 0
    n = len(content)
    while i < n:
        j = content.find("\\", i)
        if j == -1:
            out.append(content[i:])
            break
        out.append(content[i:j])
        code = content[j + 1 : j + 2]
        if code not in ESCAPE_CODES:
            # The grammar only lets the four codes through.
            raise SdnInternalError(f"this escape code should not be here: {content[j:j + 2]!r}")
        out.append(ESCAPE_CODES[code])
        i = j + 2
    return "".join(out)


def encode_escapes(text: str) -> str:
    return text.translate(_ENCODE_TABLE)
