"""Command line entry: read the numbers, check them, print the moves that sort them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.chunk_sort import chunk_sort
from pushswap.small_sort import sort_small, sort_three
from pushswap.stacks import Op, Stacks, has_duplicates, is_sorted, out_of_int_range

_SPACES = "\t\n\r\v\f "
_ERROR_MESSAGE = "ERROR"


class InputError(ValueError):
    """The arguments do not describe a valid stack."""


def atoi(text: str) -> int:
    """Read a leading integer from ``text``.

    Leading whitespace is skipped. A single sign is accepted; two signs in a
    row give 0. Reading stops at the first character that is not a digit.
    """
    rest = text.lstrip(_SPACES)
    negative = False
    while rest[:1] in ("+", "-") and rest:
        if rest[1:2] in ("+", "-") and rest[1:2]:
            return 0
        if rest[0] == "-":
            negative = not negative
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    number = int("".join(digits)) if digits else 0
    return -number if negative else number


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def is_valid_token(text: str) -> bool:
    """True when ``text`` holds only digits, spaces and minus signs that precede a digit."""
    for index, char in enumerate(text):
        if not char.isascii() or (not char.isdigit() and char not in " -"):
            return False
        if char == "-":
            following = text[index + 1 : index + 2]
            if not (following.isascii() and following.isdigit()):
                return False
    return True


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the command line arguments into the values of stack a.

    A single argument is split on spaces. When it holds only one number there
    is nothing to sort and an empty list is returned without further checks.
    Raises InputError on bad characters, duplicates or values outside the
    signed 32-bit range.
    """
    args = list(args)
    if not args:
        return []
    if len(args) == 1:
        if not is_valid_token(args[0]):
            raise InputError(f"invalid argument: {args[0]!r}")
        words = split_words(args[0], " ")
        if len(words) == 1:
            return []
    else:
        for arg in args:
            if not is_valid_token(arg):
                raise InputError(f"invalid argument: {arg!r}")
        words = args
    values = [atoi(word) for word in words]
    if has_duplicates(values):
        raise InputError("duplicate values")
    if out_of_int_range(values):
        raise InputError("value outside the integer range")
    return values


def solve(values: Sequence[int]) -> list[Op]:
    """Return the moves that sort ``values`` in stack a, smallest on top."""
    if has_duplicates(values):
        raise InputError("duplicate values")
    if is_sorted(values):
        return []
    stacks = Stacks(values)
    size = len(stacks.a)
    if size <= 3:
        sort_three(stacks)
    elif size <= 10:
        sort_small(stacks)
    else:
        chunk_sort(stacks)
    return list(stacks.ops)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sorting moves for the given numbers, or ERROR on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        print(_ERROR_MESSAGE)
        return 0
    ops = solve(values)
    if ops:
        sys.stdout.write("".join(f"{op}\n" for op in ops))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())