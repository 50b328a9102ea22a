"""Open knight's tours found by depth-first backtracking from the corner square."""

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import Optional

Square = tuple[int, int]

# Tried in this order at every square; the first tour found is the one returned.
_MOVES: tuple[Square, ...] = (
    (-1, -2),
    (1, -2),
    (-2, -1),
    (2, -1),
    (-2, 1),
    (2, 1),
    (-1, 2),
    (1, 2),
)


def _moves_from(square: Square, rows: int, cols: int) -> Iterator[Square]:
    x, y = square
    for dx, dy in _MOVES:
        nx, ny = x + dx, y + dy
        if 0 <= nx < rows and 0 <= ny < cols:
            yield nx, ny


def knight_tour(rows: int, cols: int) -> Optional[list[Square]]:
    """Return a tour visiting every square once, starting at (0, 0), or None.

    Squares are ``(x, y)`` pairs with ``0 <= x < rows`` (the lettered axis)
    and ``0 <= y < cols`` (the numbered axis).
    """
    if rows <= 0 or cols <= 0:
        raise ValueError("board dimensions must be positive")
    total = rows * cols
    start = (0, 0)
    path = [start]
    visited = {start}
    candidates = [_moves_from(start, rows, cols)]
    while path:
        if len(path) == total:
            return path
        nxt = next(candidates[-1], None)
        if nxt is None:
            candidates.pop()
            visited.discard(path.pop())
            continue
        if nxt in visited:
            continue
        visited.add(nxt)
        path.append(nxt)
        candidates.append(_moves_from(nxt, rows, cols))
    return None


def _square_name(square: Square) -> str:
    x, y = square
    return f"{chr(ord('A') + x)}{y + 1}"


def format_scenario(number: int, tour: Optional[Sequence[Square]]) -> str:
    """Render one scenario's heading and its tour, or ``impossible``."""
    body = "impossible" if tour is None else "".join(map(_square_name, tour))
    return f"Scenario #{number}:\n{body}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a scenario count and board sizes from standard input and print each tour."""
    parser = argparse.ArgumentParser(
        description="Find knight's tours for boards read from standard input."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if not tokens:
        raise ValueError("missing scenario count")
    total = int(tokens[0])
    sizes = [int(token) for token in tokens[1:]]
    if len(sizes) < 2 * total:
        raise ValueError("not enough board sizes for the scenario count")
    for number in range(1, total + 1):
        rows, cols = sizes[2 * (number - 1)], sizes[2 * (number - 1) + 1]
        print(format_scenario(number, knight_tour(rows, cols)))
    return 0