# pushswap

Sorts a list of integers using only two stacks, `a` and `b`, and a fixed
set of moves, and prints the moves it made, one per line.

## Moves

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two values of `a`                  |
| `sb`  | swap the top two values of `b`                  |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | push the top of `b` onto `a`                    |
| `pb`  | push the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top value goes to the bottom |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom value goes on top   |
| `rrb` | rotate `b` down                                 |

## Command line

Pass the numbers as separate arguments. The first one is the top of the stack:

    pushswap 3 2 1

You can also pass them as one quoted, space-separated string:

    pushswap "5 1 4 2 3"

The command prints the moves that sort `a` in ascending order, with the
smallest value on top.

It prints nothing in these cases:

- the input is already sorted;
- no arguments are given;
- a single argument holds only one number.

It prints `ERROR` in these cases:

- an argument holds anything but digits, spaces and minus signs;
- a minus sign is not followed by a digit;
- a value appears twice;
- a value lies outside the 32-bit signed integer range.

The strategy depends on how many values there are:

- **Up to three values** are sorted by a fixed set of cases.
- **Four to ten values** are sorted by pushing the largest values to `b` until three remain. Those three are sorted, then `b` is brought back.
- **Larger inputs** are moved to `b` in chunks. The chunk limits are every nineteenth value of the sorted input, starting at the twentieth, and whatever is left forms a final chunk. The values are then brought back to `a` largest first, each by the shorter rotation.

## Library use

```python
from pushswap.cli import solve

moves = solve([3, 2, 1])
print("\n".join(moves))
```

`solve` returns a list of `pushswap.stacks.Op` values. They are string
enums whose values are the move names. `solve` raises
`pushswap.cli.InputError` when the values contain duplicates.
`parse_arguments` turns command line arguments into values and raises
`InputError` on bad input.

`pushswap.stacks.Stacks` holds the two stacks as deques, with the top at
index 0. It has one method per move, and each move is recorded in its
`ops` list. A move on a stack with too few elements raises `IndexError`.

The sorting strategies are in two modules:

- `pushswap.small_sort` provides `sort_three`, `sort_small` and `drain_b`.
- `pushswap.chunk_sort` provides `chunk_sort` and its helpers.

## Limits

There is no checker command that reads moves and verifies them against a
stack. Only the sorter is provided. The sorters use `sa`, `ra`, `rra`, `rb`,
`rrb`, `pa` and `pb`. The combined moves `ss` and `rr`, and `sb`, are
available on `Stacks` but are never emitted.

## Tests

    pip install -e ".[test]"
    pytest