"""Sorting of short stacks and the return of stack b onto stack a."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stacks import Stacks, has_duplicates, is_sorted


def max_with_index(values: Sequence[int]) -> tuple[int, int]:
    """Return the largest value and the index of its first occurrence.

    A single-element sequence reports a maximum of 0 at index 0, as the
    search for a maximum needs at least two elements to compare.
    """
    items = list(values)
    if not items:
        raise ValueError("empty sequence has no maximum")
    if len(items) < 2:
        return 0, 0
    largest = max(items)
    return largest, items.index(largest)


def _rotate_a_to_top(stacks: Stacks, value: int, *, reverse: bool) -> None:
    move = stacks.rra if reverse else stacks.ra
    while stacks.a[0] != value:
        move()


def _rotate_b_to_top(stacks: Stacks, value: int, *, reverse: bool) -> None:
    move = stacks.rrb if reverse else stacks.rb
    while stacks.b[0] != value:
        move()


def sort_three(stacks: Stacks) -> None:
    """Sort stack a when it holds at most three distinct values."""
    a = stacks.a
    if len(a) > 3:
        raise ValueError("sort_three handles at most three elements")
    if has_duplicates(a):
        raise ValueError("stack a holds duplicate values")
    while not is_sorted(a):
        lowest, highest = min(a), max(a)
        first, last = a[0], a[-1]
        if first != lowest and last == highest:
            stacks.sa()
        elif first == highest and last == lowest:
            stacks.sa()
            if a[-1] == lowest and a[0] != highest:
                stacks.rra()
        elif first == highest and last != lowest:
            stacks.ra()
        elif first == lowest and last != highest:
            stacks.sa()
            if a[0] == highest and a[-1] != lowest:
                stacks.ra()
        elif last == lowest and first != highest:
            stacks.rra()


def sort_small(stacks: Stacks) -> None:
    """Sort stack a of three or more distinct values through stack b.

    The largest values are moved to b until three remain, those three are
    sorted, and b is brought back before a final rotation of a.
    """
    a, b = stacks.a, stacks.b
    if len(a) < 3:
        raise ValueError("sort_small needs at least three elements")
    if has_duplicates(a):
        raise ValueError("stack a holds duplicate values")

    while len(a) != 3:
        largest, index = max_with_index(a)
        size = len(a)
        if index == size - 1:
            stacks.rra()
        elif index == 1:
            stacks.ra()
        else:
            _rotate_a_to_top(stacks, largest, reverse=index > size // 2)
        stacks.pb()

    if not is_sorted(a):
        sort_three(stacks)

    while b:
        if is_sorted(b):
            _rotate_b_to_top(stacks, max(b), reverse=False)
        stacks.pa()

    while not is_sorted(a):
        stacks.ra()


def drain_b(stacks: Stacks) -> None:
    """Move every element of b onto a, largest first, by the shorter rotation."""
    b = stacks.b
    while b:
        largest, index = max_with_index(b)
        if len(b) == 1:
            stacks.pa()
            break
        _rotate_b_to_top(stacks, largest, reverse=index > len(b) // 2)
        stacks.pa()