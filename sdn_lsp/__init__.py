"""SDN Language Server package.

This package provides:
- A pygls-based Language Server for SDN documents (diagnostics and formatting).
- The underlying editor features as plain functions over document text.

Note: logging from the server goes to stderr; stdout carries the LSP stream.
"""

__all__ = [
    "server",
    "features",
]
