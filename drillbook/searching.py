"""Binary search over sorted sequences."""

from collections.abc import Sequence
from typing import Any

NOT_FOUND = -1


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return the index of some occurrence of ``target`` in sorted ``items``, or -1."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        value = items[mid]
        if value < target:
            lo = mid + 1
        elif value > target:
            hi = mid - 1
        else:
            return mid
    return NOT_FOUND


def left_bound(items: Sequence[Any], target: Any) -> int:
    """Return the index of the first occurrence of ``target``, or -1."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if items[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    if lo >= len(items):
        return NOT_FOUND
    return lo if items[lo] == target else NOT_FOUND


def right_bound(items: Sequence[Any], target: Any) -> int:
    """Return the index of the last occurrence of ``target``, or -1."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if items[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    if hi < 0:
        return NOT_FOUND
    return hi if items[hi] == target else NOT_FOUND