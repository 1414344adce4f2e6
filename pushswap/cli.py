"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import zip_longest
from typing import Optional

from .lis import push_non_lis, set_lis
from .output import format_printf, put_error
from .parsing import InvalidInputError, has_duplicates, parse_arguments
from .stacks import Element, Stacks
from .turk import apply_best_move, calc_costs, find_best_cost, find_min, index_of


def _final_rotate(stacks: Stacks) -> None:
    """Rotate a the short way round until its smallest value is on top."""
    if not stacks.a:
        return
    index = index_of(stacks.a, find_min(stacks.a))
    size = len(stacks.a)
    if index <= size // 2:
        for _ in range(index):
            stacks.ra()
    else:
        for _ in range(size - index):
            stacks.rra()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack a in place, recording every move on the stacks."""
    set_lis(stacks.a)
    push_non_lis(stacks)
    while stacks.b:
        costs = calc_costs(stacks.a, stacks.b)
        apply_best_move(stacks, find_best_cost(costs))
    _final_rotate(stacks)


def push_swap(values: Sequence[int]) -> list[str]:
    """Return the moves that sort values, smallest on top of a.

    Raises InvalidInputError when a value appears more than once.
    """
    if has_duplicates(values):
        raise InvalidInputError("duplicate values")
    stacks = Stacks(values)
    if not stacks.a:
        return []
    sort_stacks(stacks)
    return stacks.moves


def format_stacks(a: Iterable[Element], b: Iterable[Element]) -> str:
    """Render both stacks side by side with their annotations."""
    parts = [
        "\n======== STACKS ========\n",
        "     A       |        B\n",
        "-----------------------\n",
    ]
    for ea, eb in zip_longest(a, b):
        if ea is not None:
            parts.append(format_printf(" %d (%d)[%d]   ", ea.value, int(ea.is_lis), ea.bucket))
        else:
            parts.append("        ")
        parts.append(" | ")
        if eb is not None:
            parts.append(format_printf(" %d (%d)[%d]", eb.value, int(eb.is_lis), eb.bucket))
        else:
            parts.append("       ")
        parts.append("\n")
    parts.append("-----------------------------------------\n\n")
    return "".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sorting moves for the numbers in argv; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InvalidInputError:
        return 1
    if not values:
        return 1
    if has_duplicates(values):
        put_error(sys.stdout)
        return 1
    for move in push_swap(values):
        sys.stdout.write(move + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())