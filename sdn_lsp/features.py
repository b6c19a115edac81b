"""
Editor features computed from document text alone.

Kept free of pygls so they can be exercised without a running server.
Positions follow LSP: zero-based lines, columns in UTF-16 code units.
"""

from __future__ import annotations

from typing import List, Union

from lsprotocol.types import (
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    TextDocumentContentChangeEvent_Type1,
    TextDocumentContentChangeEvent_Type2,
    TextEdit,
)

from sdn.errors import SdnError, SdnInternalError, SdnKeywordError, SdnSyntaxError
from sdn.printer import dumps_all
from sdn.reader import parse

SOURCE = "sdn-ls"

ContentChange = Union[TextDocumentContentChangeEvent_Type1, TextDocumentContentChangeEvent_Type2]


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def _mk_range(line: int, col: int, width: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + width))


def _end_position(text: str) -> Position:
    lines = text.split("\n")
    return Position(line=len(lines) - 1, character=_utf16_len(lines[-1]))


def _offset_at(text: str, position: Position) -> int:
    """Code-point offset of an LSP position; positions past the end are clamped."""
    lines = text.split("\n")
    if position.line >= len(lines):
        return len(text)
    offset = sum(len(line) + 1 for line in lines[: position.line])
    units = 0
    for i, char in enumerate(lines[position.line]):
        if units >= position.character:
            return offset + i
        units += _utf16_len(char)
    return offset + len(lines[position.line])


def apply_content_change(text: str, change: ContentChange) -> str:
    """Apply one didChange event: ranged events splice, the others replace the text."""
    rng = getattr(change, "range", None)
    if rng is None:
        return change.text
    start = _offset_at(text, rng.start)
    end = max(start, _offset_at(text, rng.end))
    return text[:start] + change.text + text[end:]


def build_diagnostics(text: str) -> List[Diagnostic]:
    try:
        parse(text)
    except SdnSyntaxError as e:
        # SdnSyntaxError counts lines and code-point columns from 1
        line = text.split("\n")[e.line - 1]
        col = e.column - 1
        rng = _mk_range(e.line - 1, _utf16_len(line[:col]), _utf16_len(line[col : col + 1]) or 1)
        message = str(e)
    except SdnKeywordError as e:
        # keyword errors carry no position
        rng = _mk_range(0, 0)
        message = str(e)
    except SdnInternalError as e:
        rng = _mk_range(0, 0)
        message = f"internal reader error: {e}"
    else:
        return []
    return [Diagnostic(range=rng, message=message, severity=DiagnosticSeverity.Error, source=SOURCE)]


def build_formatting_edits(text: str, sort_keys: bool = True) -> List[TextEdit]:
    """Replace the whole document with its canonical form."""
    try:
        values = parse(text)
    except SdnError:
        return []
    formatted = dumps_all(values, sort_keys=sort_keys)
    if formatted:
        formatted += "\n"
    if formatted == text:
        return []
    return [
        TextEdit(
            range=Range(start=Position(line=0, character=0), end=_end_position(text)),
            new_text=formatted,
        )
    ]
