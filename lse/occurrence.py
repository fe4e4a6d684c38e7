"""Occurrences and the frequency-ordered lists the index keeps per keyword.

Every list in the index is sorted by descending frequency.  A new
occurrence is appended and then moved into place with a binary search
over the already-sorted prefix.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Occurrence:
    document: str
    frequency: int = 1

    def to_dict(self) -> dict:
        return {"document": self.document, "frequency": self.frequency}


# ── Binary search ───────────────────────────────────────────────────


def _insertion_point(
    occs: list[Occurrence],
    frequency: int,
    probes: list[int] | None = None,
) -> int:
    """Rightmost index in ``occs`` where ``frequency`` keeps the order descending.

    Searches the inclusive range [0, n-1] and stops at the first midpoint
    with an equal frequency; the insertion point is then just past that run
    of equal values.  Midpoints are appended to ``probes`` when it is given.
    """
    lo, hi = 0, len(occs) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if probes is not None:
            probes.append(mid)
        mid_frequency = occs[mid].frequency
        if mid_frequency == frequency:
            position = mid + 1
            while position < len(occs) and occs[position].frequency == frequency:
                position += 1
            return position
        if mid_frequency > frequency:
            lo = mid + 1
        else:
            hi = mid - 1
    return lo


# ── Insertion ───────────────────────────────────────────────────────


def insert_ranked(
    occs: list[Occurrence],
    item: Occurrence,
    probes: list[int] | None = None,
) -> list[Occurrence]:
    """Insert ``item`` into the descending list ``occs`` in place and return it."""
    position = _insertion_point(occs, item.frequency, probes)
    occs.insert(position, item)
    return occs


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Move the last element of ``occs`` to its place in descending order.

    Elements 0..n-2 must already be sorted.  Returns the midpoint indexes
    probed by the binary search, or None when ``occs`` has a single element.
    The trace is only for checking the search; the index never reads it.
    """
    if len(occs) <= 1:
        return None

    item = occs.pop()
    probes: list[int] = []
    insert_ranked(occs, item, probes)
    return probes
