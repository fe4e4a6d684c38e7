"""Two-keyword search: "kw1 OR kw2", ranked by occurrence frequency.

Both keywords' occurrence lists are already in descending frequency, so
the result is a merge of the two lists.  A document appears at most once,
at the first (highest-frequency) position it is reached.  On equal
frequencies the first keyword's document goes first.
"""

from __future__ import annotations

from lse.occurrence import Occurrence

MAX_RESULTS = 5


def merge_ranked(
    occs1: list[Occurrence],
    occs2: list[Occurrence],
    limit: int = MAX_RESULTS,
) -> list[str]:
    """Merge two descending occurrence lists into at most ``limit`` distinct documents."""
    results: list[str] = []
    seen: set[str] = set()

    def emit(occ: Occurrence) -> None:
        if len(results) < limit and occ.document not in seen:
            seen.add(occ.document)
            results.append(occ.document)

    i, j = 0, 0
    while len(results) < limit and (i < len(occs1) or j < len(occs2)):
        if j >= len(occs2):
            emit(occs1[i])
            i += 1
        elif i >= len(occs1):
            emit(occs2[j])
            j += 1
        elif occs1[i].frequency > occs2[j].frequency:
            emit(occs1[i])
            i += 1
        elif occs1[i].frequency < occs2[j].frequency:
            emit(occs2[j])
            j += 1
        else:
            # Tie: first keyword wins, second follows if it is a new document.
            emit(occs1[i])
            emit(occs2[j])
            i += 1
            j += 1

    return results


def top5search(index: dict[str, list[Occurrence]], kw1: str, kw2: str) -> list[str]:
    """Documents containing ``kw1`` or ``kw2``, highest frequency first.

    Keywords are only lower-cased, not otherwise normalized.  Returns an
    empty list when neither keyword is indexed.
    """
    occs1 = index.get(kw1.lower(), [])
    occs2 = index.get(kw2.lower(), [])

    if not occs1 and not occs2:
        return []
    if not occs2:
        return [occ.document for occ in occs1[:MAX_RESULTS]]
    if not occs1:
        return [occ.document for occ in occs2[:MAX_RESULTS]]

    return merge_ranked(occs1, occs2)
