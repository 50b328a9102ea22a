"""Backtracking enumerations and the minimum-coin change problem."""

from collections.abc import Iterator, Sequence
from typing import Any, Optional


def permutations(nums: Sequence[Any]) -> list[list[Any]]:
    """Return every ordering of ``nums``, choosing positions left to right by index."""
    pool = list(nums)
    used = [False] * len(pool)
    track: list[Any] = []

    def backtrack() -> Iterator[list[Any]]:
        if len(track) == len(pool):
            yield list(track)
            return
        for index, value in enumerate(pool):
            if used[index]:
                continue
            used[index] = True
            track.append(value)
            yield from backtrack()
            track.pop()
            used[index] = False

    return list(backtrack())


def subsets(nums: Sequence[Any]) -> list[list[Any]]:
    """Return every subset of ``nums`` in depth-first order, starting with the empty one."""
    pool = list(nums)
    track: list[Any] = []

    def backtrack(start: int) -> Iterator[list[Any]]:
        yield list(track)
        for index in range(start, len(pool)):
            track.append(pool[index])
            yield from backtrack(index + 1)
            track.pop()

    return list(backtrack(0))


def coin_change(coins: Sequence[int], amount: int) -> Optional[int]:
    """Return the fewest coins summing to ``amount``, or None when it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    best: list[Optional[int]] = [0] + [None] * amount
    for total in range(1, amount + 1):
        candidates = [
            previous + 1
            for coin in coins
            if coin <= total and (previous := best[total - coin]) is not None
        ]
        best[total] = min(candidates, default=None)
    return best[amount]