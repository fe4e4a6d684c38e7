import pytest

from lse.errors import DocumentNotFound
from lse.indexer import build_index, load_keywords_from_document, merge_keywords
from lse.occurrence import Occurrence
from lse.sources import MemoryDocumentSource

NOISE = frozenset({"the", "on"})


def _pairs(occs: list[Occurrence]) -> list[tuple[str, int]]:
    return [(o.document, o.frequency) for o in occs]


def test_load_counts_normalized_keywords():
    source = MemoryDocumentSource({"d1": "The cat sat on the mat. The CAT ran! can't 42"})

    kws = load_keywords_from_document("d1", source, NOISE)

    assert set(kws) == {"cat", "sat", "mat", "ran"}
    assert kws["cat"] == Occurrence("d1", 2)
    assert kws["mat"] == Occurrence("d1", 1)


def test_load_empty_document():
    source = MemoryDocumentSource({"empty": "   \n the on ... "})
    assert load_keywords_from_document("empty", source, NOISE) == {}


def test_load_missing_document_raises():
    with pytest.raises(DocumentNotFound) as exc_info:
        load_keywords_from_document("nope", MemoryDocumentSource({}), NOISE)
    assert exc_info.value.document_id == "nope"


def test_merge_creates_and_orders_lists():
    index = {"cat": [Occurrence("d1", 2)]}

    merge_keywords(index, {"cat": Occurrence("d2", 5), "dog": Occurrence("d2", 1)})

    assert _pairs(index["cat"]) == [("d2", 5), ("d1", 2)]
    assert _pairs(index["dog"]) == [("d2", 1)]


def test_build_two_documents():
    source = MemoryDocumentSource({"D1": "the cat sat", "D2": "the cat ran"})

    index, summary = build_index(["D1", "D2"], frozenset({"the"}), source)

    assert _pairs(index["cat"]) == [("D1", 1), ("D2", 1)]
    assert _pairs(index["sat"]) == [("D1", 1)]
    assert _pairs(index["ran"]) == [("D2", 1)]
    assert "the" not in index
    assert summary == {"documents": 2, "keywords": 3, "occurrences": 4, "noise_words": 1}


def test_build_keeps_every_list_descending():
    docs = {
        "a": "red red green",
        "b": "red green green green blue",
        "c": "blue blue blue blue red red red red",
        "d": "green blue red red",
    }
    index, _ = build_index(list(docs), frozenset(), MemoryDocumentSource(docs))

    for occs in index.values():
        assert occs
        assert all(a.frequency >= b.frequency for a, b in zip(occs, occs[1:]))
        assert len({o.document for o in occs}) == len(occs)
    assert _pairs(index["red"]) == [("c", 4), ("a", 2), ("d", 2), ("b", 1)]


def test_build_stops_at_missing_document():
    source = MemoryDocumentSource({"d1": "cat"})
    with pytest.raises(DocumentNotFound):
        build_index(["d1", "missing", "d3"], frozenset(), source)
