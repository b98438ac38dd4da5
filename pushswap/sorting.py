"""Producing a sequence of moves that sorts stack a.

The small sorts compare the values themselves. The chunk sort works on the
rank of each value among all the values on both stacks.
"""

from __future__ import annotations

from collections.abc import Iterable

from .operations import Operation, Stacks
from .parsing import assign_index, has_duplicates, is_sorted


def sort_three(stacks: Stacks) -> None:
    """Sort the three top elements of a using at most two moves."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three elements on a")
    a, b, c = stacks.a[0], stacks.a[1], stacks.a[2]
    if a > b and b < c and a < c:
        stacks.sa()
    elif a > b and b > c:
        stacks.sa()
        stacks.rra()
    elif a > b and b < c and a > c:
        stacks.ra()
    elif a < b and b > c and a < c:
        stacks.sa()
        stacks.ra()
    elif a < b and b > c and a > c:
        stacks.rra()


def _push_min_to_b(stacks: Stacks) -> None:
    length = len(stacks.a)
    position = min(enumerate(stacks.a), key=lambda item: item[1])[0]
    if position <= length // 2:
        for _ in range(position):
            stacks.ra()
    else:
        for _ in range(length - position):
            stacks.rra()
    stacks.pb()


def sort_five(stacks: Stacks) -> None:
    """Park the smallest values on b until three remain, sort them, bring b back."""
    while len(stacks.a) > 3:
        _push_min_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def sort_small(stacks: Stacks) -> None:
    """Sort a stack a of at most five elements."""
    length = len(stacks.a)
    if length < 2:
        return
    if length == 2:
        if stacks.a[0] > stacks.a[1]:
            stacks.sa()
        return
    if length == 3:
        sort_three(stacks)
        return
    if length <= 5:
        sort_five(stacks)


def chunk_count(total: int) -> int:
    """Number of chunks the chunk sort splits ``total`` elements into."""
    if total <= 100:
        return 5
    if total <= 500:
        return 11
    return 22


def _push_chunks(stacks: Stacks, rank: dict[int, int], size: int, total: int) -> None:
    current_max = size
    pushed = 0
    while stacks.a and pushed < total:
        if rank[stacks.a[0]] <= current_max:
            stacks.pb()
            pushed += 1
            if rank[stacks.b[0]] < current_max - size // 2:
                stacks.rb()
            if pushed == current_max:
                current_max += size
        else:
            stacks.ra()


def _push_back(stacks: Stacks, rank: dict[int, int]) -> None:
    while stacks.b:
        position = max(enumerate(stacks.b), key=lambda item: rank[item[1]])[0]
        size = len(stacks.b)
        if position <= size // 2:
            for _ in range(position):
                stacks.rb()
        else:
            for _ in range(size - position):
                stacks.rrb()
        stacks.pa()


def sort_chunks(stacks: Stacks) -> None:
    """Sort a by moving it to b in rank chunks, then pulling back the largest first."""
    total = len(stacks.a)
    if total == 0:
        return
    rank = {value: i for i, value in enumerate(sorted([*stacks.a, *stacks.b]))}
    size = -(-total // chunk_count(total))
    _push_chunks(stacks, rank, size, total)
    _push_back(stacks, rank)


def sort_stack(values: Iterable[int]) -> list[Operation]:
    """Return the moves that sort ``values`` onto stack a; none if already sorted.

    The values must be distinct.
    """
    items = list(values)
    if has_duplicates(items):
        raise ValueError("values must be distinct")
    if is_sorted(items):
        return []
    stacks = Stacks(assign_index(items), record=True)
    if len(items) <= 5:
        sort_small(stacks)
    else:
        sort_chunks(stacks)
    return list(stacks.history)