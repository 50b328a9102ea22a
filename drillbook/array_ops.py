"""Small in-place and whole-sequence array utilities."""

from collections.abc import Hashable, Iterable, MutableSequence
from itertools import takewhile
from typing import Any


def move_zeroes(items: MutableSequence[Any]) -> None:
    """Move every zero to the end of ``items``, keeping the order of the rest."""
    write = 0
    for read, value in enumerate(items):
        if value != 0:
            items[write], items[read] = items[read], items[write]
            write += 1


def remove_item(items: MutableSequence[Any], item: Any) -> None:
    """Remove every element equal to ``item`` from ``items`` in place."""
    items[:] = [value for value in items if value != item]


def reverse_in_place(items: MutableSequence[Any]) -> None:
    """Reverse ``items`` in place."""
    items.reverse()


def remove_duplicates(items: Iterable[Hashable]) -> list[Any]:
    """Return the elements of ``items`` with later duplicates dropped."""
    return list(dict.fromkeys(items))


def span_length(text: str, accept: str) -> int:
    """Return the length of the leading run of ``text`` made only of characters in ``accept``."""
    allowed = set(accept)
    return sum(1 for _ in takewhile(allowed.__contains__, text))


def find_max(items: Iterable[Any]) -> Any:
    """Return the largest element; raise ValueError when there is none."""
    values = list(items)
    if not values:
        raise ValueError("find_max() of an empty sequence")
    return max(values)