"""A short walk through the sorting, selection and searching helpers."""

import argparse
from collections.abc import Iterable, Sequence
from typing import Optional

from drillbook.array_ops import move_zeroes
from drillbook.containers import Buffer
from drillbook.searching import binary_search
from drillbook.sorting import quickselect, quicksort

_SAMPLE = (65, 23, 54, 0, 928, 0, 4)
_SELECT_INDEX = 3
_SEARCH_TARGET = 23


def _joined(items: Iterable[int]) -> str:
    return "".join(f"{value} " for value in items)


def _render() -> str:
    arr1 = Buffer()
    for value in _SAMPLE:
        arr1.push_back(value)

    arr2 = list(arr1.duplicate())
    quicksort(arr2)

    arr3 = list(arr1.duplicate())
    selected = quickselect(arr3, _SELECT_INDEX)

    arr4 = list(arr1.duplicate())
    move_zeroes(arr4)

    arr5 = list(arr2)
    found = binary_search(arr5, _SEARCH_TARGET)

    return "\n".join(
        [
            f"arr1 = {_joined(arr1)}",
            f"arr2 = {_joined(arr2)}",
            f"arr3 = {_joined(arr3)}, 3rd largest num in arr3 = {selected}",
            f"arr4 = {_joined(arr4)}",
            f"arr5 = {_joined(arr5)}, {_SEARCH_TARGET} index is {found}.",
        ]
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sample array after sorting, selecting, compacting and searching."""
    parser = argparse.ArgumentParser(description="Demonstrate the array helpers.")
    parser.parse_args(argv)
    print(_render())
    return 0