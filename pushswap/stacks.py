"""The two stacks of the puzzle, the moves on them, and checks on sequences."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum

INT_MAX = 2147483647
INT_MIN = -2147483648


class Op(str, Enum):
    """A move on the stacks, valued by the name written on output."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> None:
    stack[0], stack[1] = stack[1], stack[0]


def _need(stack: deque[int], count: int, name: str) -> None:
    if len(stack) < count:
        raise IndexError(f"stack {name} holds fewer than {count} element(s)")


class Stacks:
    """Stack a, stack b and the moves applied so far.

    The top of each stack is index 0. Every move is appended to ``ops``.
    """

    __slots__ = ("a", "b", "ops")

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.ops: list[Op] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def sa(self) -> None:
        """Swap the two top elements of a."""
        _need(self.a, 2, "a")
        _swap(self.a)
        self.ops.append(Op.SA)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        _need(self.b, 2, "b")
        _swap(self.b)
        self.ops.append(Op.SB)

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        _need(self.a, 2, "a")
        _need(self.b, 2, "b")
        _swap(self.a)
        _swap(self.b)
        self.ops.append(Op.SS)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        _need(self.a, 1, "a")
        self.a.rotate(-1)
        self.ops.append(Op.RA)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        _need(self.b, 1, "b")
        self.b.rotate(-1)
        self.ops.append(Op.RB)

    def rr(self) -> None:
        """Rotate both stacks upward."""
        _need(self.a, 1, "a")
        _need(self.b, 1, "b")
        self.a.rotate(-1)
        self.b.rotate(-1)
        self.ops.append(Op.RR)

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        _need(self.a, 1, "a")
        self.a.rotate(1)
        self.ops.append(Op.RRA)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        _need(self.b, 1, "b")
        self.b.rotate(1)
        self.ops.append(Op.RRB)

    def pa(self) -> None:
        """Move the top of b onto a."""
        _need(self.b, 1, "b")
        self.a.appendleft(self.b.popleft())
        self.ops.append(Op.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        _need(self.a, 1, "a")
        self.b.appendleft(self.a.popleft())
        self.ops.append(Op.PB)


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from first to last."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def out_of_int_range(values: Iterable[int]) -> bool:
    """True when some value does not fit a signed 32-bit integer."""
    return any(value > INT_MAX or value < INT_MIN for value in values)


def min_in_first_half(values: Sequence[int]) -> int:
    """Smallest value among the first ``len(values) // 2 + 1`` elements."""
    if not values:
        raise ValueError("empty sequence has no minimum")
    return min(values[: len(values) // 2 + 1])