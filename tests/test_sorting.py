import random

import pytest

from drillbook.sorting import partition, quickselect, quicksort


def test_quicksort_source_example():
    items = [45, 23, 12, 25, 66]
    quicksort(items)
    assert items == [12, 23, 25, 45, 66]


def test_quicksort_demo_array():
    items = [65, 23, 54, 0, 928, 0, 4]
    quicksort(items)
    assert items == sorted([65, 23, 54, 0, 928, 0, 4])


def test_quicksort_random_lists_match_sorted():
    rng = random.Random(7)
    for _ in range(100):
        items = [rng.randrange(-50, 50) for _ in range(rng.randrange(30))]
        expected = sorted(items)
        quicksort(items)
        assert items == expected


def test_quicksort_handles_already_sorted_large_input():
    items = list(range(5000))
    quicksort(items)
    assert items == list(range(5000))


def test_partition_invariant():
    rng = random.Random(3)
    for _ in range(50):
        items = [rng.randrange(20) for _ in range(rng.randrange(1, 25))]
        original = sorted(items)
        pivot_value = items[-1]
        index = partition(items, 0, len(items) - 1)
        assert items[index] == pivot_value
        assert all(x < pivot_value for x in items[:index])
        assert all(x >= pivot_value for x in items[index + 1:])
        assert sorted(items) == original


def test_partition_rejects_bad_range():
    with pytest.raises(IndexError):
        partition([1, 2, 3], 2, 1)


def test_quickselect_source_example():
    assert quickselect([45, 23, 12, 25, 66], 3) == 45


def test_quickselect_does_not_modify_input():
    items = [45, 23, 12, 25, 66]
    quickselect(items, 1)
    assert items == [45, 23, 12, 25, 66]


def test_quickselect_matches_sorted_index():
    rng = random.Random(11)
    for _ in range(100):
        items = [rng.randrange(100) for _ in range(rng.randrange(1, 30))]
        k = rng.randrange(len(items))
        assert quickselect(items, k) == sorted(items)[k]


@pytest.mark.parametrize("k", [-1, 5])
def test_quickselect_out_of_range(k):
    with pytest.raises(IndexError):
        quickselect([1, 2, 3, 4, 5], k)


def test_quickselect_empty():
    with pytest.raises(IndexError):
        quickselect([], 0)