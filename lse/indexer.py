"""Indexer: scans documents for keywords and merges them into the index.

The index maps each keyword to its occurrences, one per document, kept in
descending order of frequency.  Documents are merged in list order, so
among equal frequencies earlier documents come first.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from lse.occurrence import Occurrence, insert_last_occurrence
from lse.sources import DocumentReader
from lse.text import get_keyword, split_tokens

logger = logging.getLogger(__name__)

KeywordIndex = dict[str, list[Occurrence]]


# ── Document loading ────────────────────────────────────────────────


def load_keywords_from_document(
    document_id: str,
    read_document: DocumentReader,
    noise_words: frozenset[str],
) -> dict[str, Occurrence]:
    """Count keyword occurrences in a single document.

    Returns {keyword: Occurrence(document_id, count)}.  Raises
    DocumentNotFound if ``read_document`` cannot supply the text.
    """
    text = read_document(document_id)

    counts: Counter[str] = Counter()
    for word in split_tokens(text):
        keyword = get_keyword(word, noise_words)
        if keyword is not None:
            counts[keyword] += 1

    logger.debug("Loaded %s: %d keywords", document_id, len(counts))
    return {kw: Occurrence(document_id, freq) for kw, freq in counts.items()}


# ── Merging ─────────────────────────────────────────────────────────


def merge_keywords(index: KeywordIndex, kws: dict[str, Occurrence]) -> None:
    """Merge one document's keywords into ``index``, keeping each list descending."""
    for keyword, occ in kws.items():
        occs = index.setdefault(keyword, [])
        occs.append(occ)
        insert_last_occurrence(occs)


# ── Main entry point ───────────────────────────────────────────────


def build_index(
    document_ids: Iterable[str],
    noise_words: frozenset[str],
    read_document: DocumentReader,
) -> tuple[KeywordIndex, dict]:
    """Index every document in order.

    Returns (index, summary) where summary holds document, keyword and
    occurrence counts.  The first DocumentNotFound aborts the build.
    """
    index: KeywordIndex = {}
    documents = 0

    for document_id in document_ids:
        kws = load_keywords_from_document(document_id, read_document, noise_words)
        merge_keywords(index, kws)
        documents += 1

    summary = {
        "documents": documents,
        "keywords": len(index),
        "occurrences": sum(len(occs) for occs in index.values()),
        "noise_words": len(noise_words),
    }
    logger.info(
        "Indexed %d documents: %d keywords, %d occurrences",
        summary["documents"],
        summary["keywords"],
        summary["occurrences"],
    )
    return index, summary
