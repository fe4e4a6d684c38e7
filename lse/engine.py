"""LittleSearchEngine: owns the keyword index and noise words.

The engine has two phases.  ``make_index`` builds everything in one pass;
after that the index is only read.  A build that fails part way leaves
the engine exactly as it was before the call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from lse.errors import IndexNotBuilt, LittleSearchError
from lse.indexer import (
    KeywordIndex,
    build_index,
    load_keywords_from_document,
    merge_keywords,
)
from lse.occurrence import Occurrence
from lse.searcher import top5search
from lse.sources import (
    DirectoryDocumentSource,
    DocumentReader,
    read_document_list,
    read_noise_words,
)
from lse.text import get_keyword, normalize_noise_words

logger = logging.getLogger(__name__)


class LittleSearchEngine:
    def __init__(self, read_document: DocumentReader | None = None):
        self.read_document = read_document or DirectoryDocumentSource(".")
        self.keywords_index: KeywordIndex = {}
        self.noise_words: frozenset[str] = frozenset()
        self.summary: dict | None = None

    @property
    def built(self) -> bool:
        return self.summary is not None

    # ── Building ────────────────────────────────────────────────────
    #
    # set_noise_words / load_keywords_from_document / merge_keywords expose
    # the individual build steps for inspection.  They fill keywords_index
    # but do not complete a build: only make_index marks the engine built.

    def set_noise_words(self, words: Iterable[str]) -> None:
        self.noise_words = normalize_noise_words(words)

    def get_keyword(self, word: str | None) -> str | None:
        return get_keyword(word, self.noise_words)

    def load_keywords_from_document(self, document_id: str) -> dict[str, Occurrence]:
        return load_keywords_from_document(document_id, self.read_document, self.noise_words)

    def merge_keywords(self, kws: dict[str, Occurrence]) -> None:
        merge_keywords(self.keywords_index, kws)

    def make_index(self, document_ids: Iterable[str], noise_words: Iterable[str]) -> dict:
        """Index all documents, replacing any previous index.

        Returns the build summary.  Raises DocumentNotFound if a listed
        document cannot be read; the previous state is kept in that case.
        """
        noise = normalize_noise_words(noise_words)
        try:
            index, summary = build_index(document_ids, noise, self.read_document)
        except LittleSearchError as exc:
            logger.warning("Build failed, keeping previous index: %s", exc)
            raise

        self.noise_words = noise
        self.keywords_index = index
        self.summary = summary
        return summary

    def make_index_from_files(self, docs_file: str | Path, noise_words_file: str | Path) -> dict:
        """Build from a document-list file and a noise-word file.

        The noise list is read first, so NoiseListUnavailable is raised
        before any document is touched.
        """
        noise_words = read_noise_words(noise_words_file)
        document_ids = read_document_list(docs_file)
        return self.make_index(document_ids, noise_words)

    # ── Querying ────────────────────────────────────────────────────

    def _require_built(self) -> None:
        if not self.built:
            raise IndexNotBuilt()

    def occurrences(self, keyword: str) -> list[Occurrence]:
        """Ranked occurrences of ``keyword`` (lower-cased), empty if absent."""
        self._require_built()
        return list(self.keywords_index.get(keyword.lower(), []))

    def top5search(self, kw1: str, kw2: str) -> list[str]:
        self._require_built()
        return top5search(self.keywords_index, kw1, kw2)
