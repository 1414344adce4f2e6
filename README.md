# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations. The program prints the operations it uses, one per line.
Read in order, they sort the numbers so the smallest ends up on top of `a`.

## Operations

| Move  | Effect                                             |
|-------|----------------------------------------------------|
| `sa`  | swap the first two elements of `a`                 |
| `sb`  | swap the first two elements of `b`                 |
| `ss`  | `sa` and `sb` together                             |
| `pa`  | move the top of `b` onto `a`                       |
| `pb`  | move the top of `a` onto `b`                       |
| `ra`  | rotate `a` up, so the first element becomes last   |
| `rb`  | rotate `b` up                                      |
| `rr`  | `ra` and `rb` together                             |
| `rra` | rotate `a` down, so the last element becomes first |
| `rrb` | rotate `b` down                                    |
| `rrr` | `rra` and `rrb` together                           |

## How it sorts

1. The elements of a longest increasing subsequence of `a` stay on `a`.
2. The other elements are split into four buckets by quartile. They are
   pushed to `b` one bucket at a time, starting with the smallest.
3. For every element on `b`, the program works out how many rotations it
   takes to bring it to the top of `b` and its place in `a` to the top of `a`.
   Rotations of both stacks are combined where they can be. The cheapest
   element is pushed back each time.
4. Finally `a` is rotated the short way round so its smallest value is on top.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

Numbers can be given as separate arguments or together in one argument
separated by spaces. An optional `+` or `-` sign is allowed.

- With no arguments it prints nothing and exits with status 0.
- If an argument is not a number, a value does not fit in a 32-bit signed
  integer, or the arguments hold no numbers at all, it prints nothing and
  exits with status 1.
- If a value appears more than once, it prints `Error` on standard output
  and exits with status 1.

## Library use

```python
from pushswap.cli import push_swap, format_stacks
from pushswap.stacks import Stacks

moves = push_swap([3, 2, 1])   # list of operation names

stacks = Stacks([2, 1, 3])
stacks.sa()
stacks.a_values                # [1, 2, 3]
stacks.moves                   # ["sa"]
print(format_stacks(stacks.a, stacks.b))
```

`push_swap` raises `pushswap.parsing.InvalidInputError` when a value is
repeated. `pushswap.cli.sort_stacks` sorts a `Stacks` in place and records the
moves on it.

Modules:

- `pushswap.parsing`: `parse_arguments`, `join_arguments`, `has_duplicates`
  and `InvalidInputError`.
- `pushswap.stacks`: `Element` and `Stacks` with the eleven moves.
- `pushswap.lis`: `quartiles`, `reset_lis`, `set_lis`, `count_non_lis`,
  `push_non_lis`, `is_between_lis`.
- `pushswap.turk`: `Cost`, `rotation_cost`, `find_min`, `index_of`,
  `find_insert_index`, `best_cost`, `calc_costs`, `find_best_cost`,
  `apply_best_move`.
- Small helpers: `pushswap.chars` (ASCII classification), `pushswap.numbers`
  (`atoi`, `atol`, `itoa`), `pushswap.strings` (NUL-terminated string
  routines), `pushswap.textops` (split, trim, join, map), `pushswap.output`
  (`format_printf` and writers) and `pushswap.linkedlist` (`LinkedList`,
  `Node`).

There is no checker command that reads moves back and verifies them, and no
byte-buffer helpers.

## Tests

```
pip install .[test]
pytest
```