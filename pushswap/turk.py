"""Cost-based insertion of the elements of b back into a."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from .stacks import Element, Stacks


@dataclass(frozen=True)
class Cost:
    """Rotations needed to bring one element of b to a slot in a.

    Positive costs are forward rotations, negative ones reverse rotations.
    """

    index_src: int
    index_dest: int
    cost_dest: int
    cost_src: int
    total: int


def rotation_cost(index: int, size: int) -> int:
    """Signed rotations bringing position index to the top of a stack of size."""
    if index <= size // 2:
        return index
    return index - size


def find_min(elements: Iterable[Element]) -> int:
    """Smallest value; raises ValueError when there are no elements."""
    return min(e.value for e in elements)


def index_of(elements: Iterable[Element], value: int) -> Optional[int]:
    """Position of the first element with value, or None."""
    return next((i for i, e in enumerate(elements) if e.value == value), None)


def find_insert_index(elements: Iterable[Element], x: int) -> int:
    """Position in a circularly sorted stack where x belongs; 0 when it
    belongs at the top."""
    values = [e.value for e in elements]
    for i, (v1, v2) in enumerate(zip(values, values[1:])):
        if v1 < x < v2 or (v1 > v2 and (x > v1 or x < v2)):
            return i + 1
    return 0


def best_cost(cost_dest: int, cost_src: int, len_dest: int, len_src: int) -> int:
    """Fewest moves to reach both positions, sharing rotations where possible."""
    if cost_dest >= 0:
        r_dest, rr_dest = cost_dest, len_dest - cost_dest
    else:
        r_dest, rr_dest = len_dest + cost_dest, -cost_dest
    if cost_src >= 0:
        r_src, rr_src = cost_src, len_src - cost_src
    else:
        r_src, rr_src = len_src + cost_src, -cost_src
    return min(
        max(r_dest, r_src),
        max(rr_dest, rr_src),
        r_dest + rr_src,
        rr_dest + r_src,
    )


def calc_costs(dest: Iterable[Element], src: Iterable[Element]) -> list[Cost]:
    """The cost of inserting each element of src into dest, in src order."""
    dest_items = list(dest)
    src_items = list(src)
    costs = []
    for i, element in enumerate(src_items):
        index_dest = find_insert_index(dest_items, element.value)
        cost_src = rotation_cost(i, len(src_items))
        cost_dest = rotation_cost(index_dest, len(dest_items))
        costs.append(
            Cost(
                index_src=i,
                index_dest=index_dest,
                cost_dest=cost_dest,
                cost_src=cost_src,
                total=best_cost(cost_dest, cost_src, len(dest_items), len(src_items)),
            )
        )
    return costs


def find_best_cost(costs: Sequence[Cost]) -> Cost:
    """The first cost with the lowest total; raises ValueError when empty."""
    if not costs:
        raise ValueError("no costs to choose from")
    return min(costs, key=lambda c: c.total)


def _rotate(count: int, forward: Callable[[], None], backward: Callable[[], None]) -> None:
    step = forward if count > 0 else backward
    for _ in range(abs(count)):
        step()


def apply_best_move(stacks: Stacks, move: Cost) -> None:
    """Rotate both stacks as move says, sharing rotations, then push b onto a."""
    cost_dest, cost_src = move.cost_dest, move.cost_src
    if cost_dest > 0 and cost_src > 0:
        shared = min(cost_dest, cost_src)
        _rotate(shared, stacks.rr, stacks.rrr)
        cost_dest -= shared
        cost_src -= shared
    elif cost_dest < 0 and cost_src < 0:
        shared = max(cost_dest, cost_src)
        _rotate(shared, stacks.rr, stacks.rrr)
        cost_dest -= shared
        cost_src -= shared
    _rotate(cost_dest, stacks.ra, stacks.rra)
    _rotate(cost_src, stacks.rb, stacks.rrb)
    stacks.pa()