import pytest

from drillbook.array_ops import (
    find_max,
    move_zeroes,
    remove_duplicates,
    remove_item,
    reverse_in_place,
    span_length,
)


def test_move_zeroes_source_example():
    items = [0, 23, 0, 2, 123]
    move_zeroes(items)
    assert items == [23, 2, 123, 0, 0]


def test_move_zeroes_demo_array_keeps_order():
    items = [65, 23, 54, 0, 928, 0, 4]
    move_zeroes(items)
    assert items == [65, 23, 54, 928, 4, 0, 0]


def test_move_zeroes_without_zeroes_is_identity():
    items = [3, 1, 2]
    move_zeroes(items)
    assert items == [3, 1, 2]


def test_remove_item_source_example():
    items = [0, 23, 0, 2, 123]
    remove_item(items, 2)
    assert items == [0, 23, 0, 123]


def test_remove_item_removes_all_occurrences():
    items = [0, 23, 0, 2, 123]
    remove_item(items, 0)
    assert items == [23, 2, 123]


def test_reverse_in_place_source_example():
    items = [0, 23, 0, 2, 123]
    reverse_in_place(items)
    assert items == [123, 2, 0, 23, 0]


def test_reverse_twice_round_trips():
    items = [5, 4, 3, 9]
    reverse_in_place(items)
    reverse_in_place(items)
    assert items == [5, 4, 3, 9]


def test_remove_duplicates_source_example():
    assert remove_duplicates([1, 2, 3, 4, 1, 2, 5, 6, 7, 8]) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_remove_duplicates_leaves_input_alone():
    items = [3, 3, 1]
    result = remove_duplicates(items)
    assert items == [3, 3, 1]
    assert result == [3, 1]


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == []


def test_span_length_source_example():
    assert span_length("12334abcdef", "1234567890") == 5


def test_span_length_whole_and_none():
    assert span_length("1234", "1234567890") == len("1234")
    assert span_length("abc", "1234567890") == 0
    assert span_length("", "abc") == 0


def test_find_max_source_example():
    assert find_max([4, 3, 6, 5, 7, 0, 9, 8, 1, 2]) == 9


def test_find_max_empty_raises():
    with pytest.raises(ValueError):
        find_max([])