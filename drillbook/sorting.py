"""Quicksort and quickselect built on Lomuto partitioning."""

from collections.abc import MutableSequence, Sequence
from typing import Any


def partition(items: MutableSequence[Any], lo: int, hi: int) -> int:
    """Partition ``items[lo:hi + 1]`` around ``items[hi]`` and return the pivot's final index.

    Everything left of the returned index is smaller than the pivot; everything
    right of it is not smaller.
    """
    if not 0 <= lo <= hi < len(items):
        raise IndexError(f"invalid partition range [{lo}, {hi}] for length {len(items)}")
    pivot = items[hi]
    boundary = lo
    for j in range(lo, hi):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[hi] = items[hi], items[boundary]
    return boundary


def quicksort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place in ascending order."""
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot_index = partition(items, lo, hi)
        pending.append((lo, pivot_index - 1))
        pending.append((pivot_index + 1, hi))


def quickselect(items: Sequence[Any], k: int) -> Any:
    """Return the element that would sit at index ``k`` once ``items`` is sorted."""
    work = list(items)
    if not 0 <= k < len(work):
        raise IndexError(f"k={k} out of range for length {len(work)}")
    lo, hi = 0, len(work) - 1
    while lo < hi:
        pivot_index = partition(work, lo, hi)
        if k == pivot_index:
            return work[k]
        if k < pivot_index:
            hi = pivot_index - 1
        else:
            lo = pivot_index + 1
    return work[lo]