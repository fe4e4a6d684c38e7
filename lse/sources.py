"""Input collaborators: document lists, noise word lists, document text.

The engine only needs a sequence of document identifiers, a set of noise
words and a callable that turns a document identifier into its text.
These helpers supply them from plain files on disk or from memory.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from lse.errors import DocumentNotFound, NoiseListUnavailable

DocumentReader = Callable[[str], str]


def read_document_list(path: str | Path) -> list[str]:
    """Read whitespace-separated document identifiers, in file order."""
    try:
        return Path(path).read_text(encoding="utf-8").split()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentNotFound(str(path), reason=str(exc)) from exc


def read_noise_words(path: str | Path) -> list[str]:
    """Read whitespace-separated noise words."""
    try:
        return Path(path).read_text(encoding="utf-8").split()
    except (OSError, UnicodeDecodeError) as exc:
        raise NoiseListUnavailable(str(path), reason=str(exc)) from exc


class DirectoryDocumentSource:
    """Resolves document identifiers to files under ``root``."""

    def __init__(self, root: str | Path = "."):
        self.root = Path(root)

    def __call__(self, document_id: str) -> str:
        path = self.root / document_id
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentNotFound(document_id, reason=str(exc)) from exc


class MemoryDocumentSource:
    """Serves document text from a dict, mainly for tests and embedding."""

    def __init__(self, documents: dict[str, str]):
        self.documents = dict(documents)

    def __call__(self, document_id: str) -> str:
        try:
            return self.documents[document_id]
        except KeyError:
            raise DocumentNotFound(document_id) from None
