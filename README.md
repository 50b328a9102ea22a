# drillbook

A compact collection of classic algorithm and data-structure exercises,
written as small Python modules with no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `drillbook.searching` | `binary_search`, `left_bound`, `right_bound` over sorted sequences; each returns an index or `-1` |
| `drillbook.sorting` | Lomuto `partition`, in-place `quicksort`, and `quickselect` (the element at a given index of the sorted order) |
| `drillbook.array_ops` | `move_zeroes`, `remove_item`, `reverse_in_place` (all in place), `remove_duplicates`, `span_length`, `find_max` |
| `drillbook.containers` | `Buffer`, `BoundedQueue`, `BoundedStack`, `StringHashSet`, `string_hash` |
| `drillbook.graphs` | `Graph` with `add_edge`, `neighbors`, `bfs`, `dfs` |
| `drillbook.combinatorics` | `permutations`, `subsets`, `coin_change` |
| `drillbook.knight` | `knight_tour`, `format_scenario`, and the `drillbook-knight` command |
| `drillbook.maze` | `Maze` with `from_lines`, `follow_left`, `follow_right`, `shortest_path` |
| `drillbook.catch_cow` | `catch_cow`, a breadth-first search on the number line, and the `drillbook-catch-cow` command |
| `drillbook.textstats` | `count_words_and_chars`, `count_file` (both return a `TextCounts`), `third_angle` |
| `drillbook.demo` | the `drillbook-demo` walkthrough |

Errors are raised, not signalled by return values: the containers raise
`IndexError` when popping or peeking at nothing and `OverflowError` when a
bounded queue or stack is full; `find_max` of an empty sequence,
`third_angle` with invalid angles and an unreachable maze exit raise
`ValueError`. `coin_change` returns `None` when the amount cannot be made.

## Examples

```python
from drillbook.searching import left_bound, right_bound
from drillbook.sorting import quickselect, quicksort
from drillbook.combinatorics import coin_change, subsets

data = [1, 3, 5, 5, 5, 5, 5, 5, 7, 9]
left_bound(data, 5), right_bound(data, 5)   # (2, 7)

values = [45, 23, 12, 25, 66]
quicksort(values)                            # sorts in place, returns None
values                                       # [12, 23, 25, 45, 66]
quickselect([45, 23, 12, 25, 66], 3)         # 45

coin_change([1, 2, 5], 11)                   # 3
subsets([1, 2, 3])
# [[], [1], [1, 2], [1, 2, 3], [1, 3], [2], [2, 3], [3]]
```

```python
from drillbook.maze import Maze

maze = Maze.from_lines([
    "#########",
    "#.#.#.#.#",
    "S.......E",
    "#.#.#.#.#",
    "#########",
])
maze.shortest_path()                 # 9, start and exit both counted
maze.follow_left(), maze.follow_right()
```

`count_words_and_chars` counts every character, and counts a word only
when whitespace follows it, so a final word with no trailing whitespace is
not counted.

## Command-line tools

`drillbook-demo` runs the array walkthrough: a sample array is sorted,
queried with `quickselect` at index 3, has its zeroes moved to the end and
the sorted copy is searched for 23.

```
drillbook-demo
```

`drillbook-knight` reads a scenario count followed by board sizes on
standard input and prints, for each board, a knight's tour starting at
`A1`, or `impossible`:

```
printf '3\n1 1\n2 3\n4 3\n' | drillbook-knight
```

`drillbook-catch-cow` reads a start and an end position (each between 0
and 100000) and prints the number of positions on a shortest chase using
steps of +1, -1 and doubling, both ends included:

```
echo "5 17" | drillbook-catch-cow
```

## What it does not do

The maze walks, text counts and triangle helper are library functions
only; there is no command for them.