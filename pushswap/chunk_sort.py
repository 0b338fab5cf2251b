"""Chunked sort for larger stacks: push a by rising limits, then drain b."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.small_sort import drain_b
from pushswap.stacks import Stacks

_CHUNK = 19


def chunk_limits(values: Iterable[int]) -> list[int]:
    """Every nineteenth value of the sorted values, starting at the twentieth."""
    return sorted(values)[_CHUNK::_CHUNK]


def has_below(values: Iterable[int], limit: int) -> bool:
    """True when some value is strictly below ``limit``."""
    return any(value < limit for value in values)


def first_at_most(values: Sequence[int], limit: int) -> tuple[int, int]:
    """Return the first value not above ``limit`` and its index."""
    for index, value in enumerate(values):
        if value <= limit:
            return value, index
    raise ValueError(f"no value at most {limit}")


def last_at_most(values: Sequence[int], limit: int) -> tuple[int, int]:
    """Return the last value not above ``limit`` and its index."""
    items = list(values)
    for index in range(len(items) - 1, -1, -1):
        if items[index] <= limit:
            return items[index], index
    raise ValueError(f"no value at most {limit}")


def _push_below(stacks: Stacks, limit: int) -> None:
    a = stacks.a
    while has_below(a, limit):
        first_value, first_index = first_at_most(a, limit)
        last_value, last_index = last_at_most(a, limit)
        if first_index <= len(a) - last_index:
            if first_index == 1:
                stacks.sa()
            else:
                while a[0] != first_value:
                    stacks.ra()
        else:
            while a[0] != last_value:
                stacks.rra()
        stacks.pb()


def chunk_sort(stacks: Stacks) -> None:
    """Sort stack a by moving it to b chunk by chunk, then draining b back.

    Limits that are not positive are skipped; what remains in a after the
    last limit is moved to b as one final chunk.
    """
    for limit in chunk_limits(stacks.a):
        if limit > 0:
            _push_below(stacks, limit)
    if stacks.a:
        _push_below(stacks, max(stacks.a) + 1)
    drain_b(stacks)