"""Errors raised while building or querying the keyword index."""

from __future__ import annotations


class LittleSearchError(Exception):
    """Base class for all engine errors."""


class DocumentNotFound(LittleSearchError):
    def __init__(self, document_id: str, reason: str | None = None):
        self.document_id = document_id
        message = f"Document not found: {document_id}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NoiseListUnavailable(LittleSearchError):
    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        message = f"Noise word list unavailable: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class IndexNotBuilt(LittleSearchError):
    def __init__(self) -> None:
        super().__init__("Index has not been built; call make_index() first.")
