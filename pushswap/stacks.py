"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union


@dataclass
class Element:
    """One number on a stack with its sorting annotations."""

    value: int
    is_lis: bool = False
    bucket: int = 0


class Stacks:
    """Stacks a and b, tops at index 0, with every move recorded by name.

    Each move is recorded in ``moves`` even when it changes nothing,
    such as a push from an empty stack.
    """

    def __init__(self, values: Iterable[Union[int, Element]]) -> None:
        self.a: deque[Element] = deque(
            v if isinstance(v, Element) else Element(v) for v in values
        )
        self.b: deque[Element] = deque()
        self.moves: list[str] = []

    @property
    def a_values(self) -> list[int]:
        """Values of stack a, top first."""
        return [e.value for e in self.a]

    @property
    def b_values(self) -> list[int]:
        """Values of stack b, top first."""
        return [e.value for e in self.b]

    @staticmethod
    def _push(src: deque, dst: deque) -> None:
        if src:
            dst.appendleft(src.popleft())

    @staticmethod
    def _swap(stack: deque) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: deque) -> None:
        if len(stack) >= 2:
            stack.rotate(-1)

    @staticmethod
    def _rrotate(stack: deque) -> None:
        if len(stack) >= 2:
            stack.rotate(1)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._push(self.b, self.a)
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._push(self.a, self.b)
        self.moves.append("pb")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self._swap(self.a)
        self.moves.append("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self._swap(self.b)
        self.moves.append("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self.moves.append("ss")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a)
        self.moves.append("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b)
        self.moves.append("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self.moves.append("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._rrotate(self.a)
        self.moves.append("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._rrotate(self.b)
        self.moves.append("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._rrotate(self.a)
        self._rrotate(self.b)
        self.moves.append("rrr")