import pytest
from lsprotocol.types import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentFormattingParams,
    FormattingOptions,
    Position,
    Range,
    TextDocumentContentChangeEvent_Type1,
    TextDocumentContentChangeEvent_Type2,
    TextDocumentIdentifier,
    TextDocumentItem,
    VersionedTextDocumentIdentifier,
)

from sdn_lsp import server

URI = "file:///tmp/doc.sdn"


@pytest.fixture
def published(monkeypatch):
    sent = []
    monkeypatch.setattr(server.ls, "publish_diagnostics", lambda uri, diags: sent.append((uri, diags)))
    monkeypatch.setattr(server.ls, "documents", {})
    return sent


def _open(text):
    server.did_open(
        DidOpenTextDocumentParams(
            text_document=TextDocumentItem(uri=URI, language_id="sdn", version=1, text=text)
        )
    )


def _change(*changes, version=2):
    server.did_change(
        DidChangeTextDocumentParams(
            text_document=VersionedTextDocumentIdentifier(uri=URI, version=version),
            content_changes=list(changes),
        )
    )


def _insert(line, character, text):
    pos = Position(line=line, character=character)
    return TextDocumentContentChangeEvent_Type1(range=Range(start=pos, end=pos), text=text)


def test_open_stores_text_and_publishes(published):
    _open("(1 2)")
    assert server.ls.documents[URI] == "(1 2)"
    assert published == [(URI, [])]


def test_open_broken_document_publishes_error(published):
    _open("(1 2")
    (uri, diags), = published
    assert uri == URI
    assert len(diags) == 1
    assert "expected ')'" in diags[0].message


def test_incremental_change_is_spliced(published):
    _open("(1 2)")
    _change(_insert(0, 4, " 3"))
    assert server.ls.documents[URI] == "(1 2 3)"
    assert published[-1] == (URI, [])


def test_incremental_changes_apply_in_order(published):
    _open("(a)\n(b)")
    replace_b = TextDocumentContentChangeEvent_Type1(
        range=Range(start=Position(line=1, character=1), end=Position(line=1, character=2)),
        text="c d",
    )
    _change(replace_b, _insert(0, 2, " x"))
    assert server.ls.documents[URI] == "(a x)\n(c d)"


def test_incremental_change_after_astral_character(published):
    # the emoji takes two UTF-16 code units
    _open('("\U0001F600" 1)')
    _change(_insert(0, 7, " 2"))
    assert server.ls.documents[URI] == '("\U0001F600" 1 2)'


def test_full_change_replaces_text(published):
    _open("(1 2)")
    _change(TextDocumentContentChangeEvent_Type2(text="(:a)"))
    assert server.ls.documents[URI] == "(:a)"
    (uri, diags) = published[-1]
    assert len(diags) == 1
    assert ":a" in diags[0].message


def test_close_forgets_document_and_clears_diagnostics(published):
    _open("(1 2")
    server.did_close(DidCloseTextDocumentParams(text_document=TextDocumentIdentifier(uri=URI)))
    assert URI not in server.ls.documents
    assert published[-1] == (URI, [])


def _format_params(uri=URI):
    return DocumentFormattingParams(
        text_document=TextDocumentIdentifier(uri=uri),
        options=FormattingOptions(tab_size=2, insert_spaces=True),
    )


def test_formatting_open_document(published):
    _open("( :b 1  :a 2 )")
    edits = server.on_formatting(_format_params())
    assert len(edits) == 1
    assert edits[0].new_text == "(:a 2 :b 1)\n"
    assert edits[0].range.end == Position(line=0, character=14)


def test_formatting_unknown_document(published):
    assert server.on_formatting(_format_params("file:///tmp/other.sdn")) is None
