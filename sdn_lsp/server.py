from __future__ import annotations

"""
A minimal pygls-based Language Server for SDN documents.

Features:
- Text synchronization and document store
- Diagnostics: grammar errors (with position), keyword misuse, reader defects
- Formatting: rewrite the document in canonical form

Note: documents are only parsed, never interpreted.
"""

import logging
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentFormattingParams,
    TextEdit,
)

from sdn import __version__
from sdn_lsp.features import apply_content_change, build_diagnostics, build_formatting_edits

log = logging.getLogger(__name__)


class SdnLanguageServer(LanguageServer):
    CMD_NAME = "sdn-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, str] = {}


ls = SdnLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    log.info("opened %s", uri)
    ls.documents[uri] = params.text_document.text or ""
    _publish_diagnostics(uri)


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    text = ls.documents.get(uri, "")
    # events apply in order; ranged ones are incremental edits
    for change in params.content_changes:
        text = apply_content_change(text, change)
    ls.documents[uri] = text
    _publish_diagnostics(uri)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    log.info("closed %s", uri)
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _publish_diagnostics(uri: str):
    diags = build_diagnostics(ls.documents.get(uri, ""))
    log.debug("publishing %d diagnostic(s) for %s", len(diags), uri)
    ls.publish_diagnostics(uri, diags)


# --- Formatting ---
@ls.feature("textDocument/formatting")
def on_formatting(params: DocumentFormattingParams) -> Optional[List[TextEdit]]:
    text = ls.documents.get(params.text_document.uri)
    if text is None:
        return None
    return build_formatting_edits(text)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
