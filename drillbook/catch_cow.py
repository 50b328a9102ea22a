"""Shortest chase along a number line using steps of +1, -1 and doubling."""

import argparse
import sys
from collections import deque
from collections.abc import Sequence
from typing import Optional

MAX_POSITION = 100_000


def catch_cow(start: int, end: int) -> int:
    """Return the number of positions on a shortest chase from ``start`` to ``end``, both included."""
    for name, value in (("start", start), ("end", end)):
        if not 0 <= value <= MAX_POSITION:
            raise ValueError(f"{name} must lie between 0 and {MAX_POSITION}")
    positions = {start: 1}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return positions[current]
        for nxt in (current + 1, current - 1, current * 2):
            if 0 <= nxt <= MAX_POSITION and nxt not in positions:
                positions[nxt] = positions[current] + 1
                queue.append(nxt)
    raise ValueError(f"{end} cannot be reached from {start}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ``start end`` from standard input and print the chase length."""
    parser = argparse.ArgumentParser(
        description="Read a start and an end position from standard input."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        raise ValueError("expected a start and an end position")
    print(catch_cow(int(tokens[0]), int(tokens[1])))
    return 0