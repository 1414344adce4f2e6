"""Longest increasing subsequence marking and the initial split of stack a."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from .stacks import Element, Stacks


def quartiles(values: Iterable[int]) -> tuple[int, int, int]:
    """The values at the quarter, half and three-quarter positions of the
    sorted values. Raises ValueError for no values."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("quartiles of no values")
    size = len(ordered)
    return ordered[size // 4], ordered[size * 2 // 4], ordered[size * 3 // 4]


def reset_lis(elements: Iterable[Element]) -> None:
    """Clear every LIS mark and assign each element its quartile bucket."""
    items = list(elements)
    if not items:
        return
    bounds = quartiles(e.value for e in items)
    for element in items:
        element.is_lis = False
        element.bucket = next(
            (bucket for bucket, bound in enumerate(bounds) if element.value <= bound),
            len(bounds),
        )


def _lis_lengths(values: Sequence[int]) -> list[int]:
    lengths: list[int] = []
    for i, value in enumerate(values):
        best = 1
        for earlier, length in zip(values[:i], lengths):
            if earlier < value and length + 1 > best:
                best = length + 1
        lengths.append(best)
    return lengths


def set_lis(elements: Iterable[Element]) -> None:
    """Mark one longest increasing subsequence, in list order, with is_lis.

    Buckets are reassigned as by reset_lis. The subsequence is chosen by
    walking back from the end and taking the last element of each length.
    """
    items = list(elements)
    if not items:
        return
    lengths = _lis_lengths([e.value for e in items])
    reset_lis(items)
    wanted = max(lengths)
    for element, length in zip(reversed(items), reversed(lengths)):
        if wanted == 0:
            break
        if length == wanted:
            element.is_lis = True
            wanted -= 1


def count_non_lis(elements: Iterable[Element], bucket: Optional[int] = None) -> int:
    """Number of unmarked elements, limited to one bucket when given."""
    return sum(
        1
        for e in elements
        if not e.is_lis and (bucket is None or e.bucket == bucket)
    )


def push_non_lis(stacks: Stacks) -> None:
    """Push every unmarked element of a onto b, bucket by bucket from 0 up,
    rotating a to reach them."""
    bucket = 0
    while count_non_lis(stacks.a) > 0:
        while count_non_lis(stacks.a, bucket) > 0:
            top = stacks.a[0]
            if top.bucket == bucket and not top.is_lis:
                stacks.pb()
            else:
                stacks.ra()
        bucket += 1


def is_between_lis(elements: Iterable[Element], elem: Optional[Element]) -> bool:
    """True when elem's value lies strictly between the last and the first
    marked elements.

    Returns False for an empty list or a missing element. Raises
    ValueError when fewer than two elements are marked.
    """
    items = list(elements)
    if not items or elem is None:
        return False
    marked = [e for e in items if e.is_lis]
    if len(marked) < 2:
        raise ValueError("at least two marked elements are needed")
    return marked[-1].value < elem.value < marked[0].value