"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Element:
    """One number on a stack, with the bookkeeping the sorter attaches to it."""

    value: int
    index: int = 0
    pos: int = -1
    target_pos: int = -1
    cost_a: int = -1
    cost_b: int = -1


def is_sorted(elements: Iterable[Element]) -> bool:
    """Return True when the values never decrease from top to bottom."""
    previous = None
    for element in elements:
        if previous is not None and previous > element.value:
            return False
        previous = element.value
    return True


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each deque is the top.

    Every operation performed is appended by name to ``operations``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Element] = deque(Element(value) for value in values)
        self.b: deque[Element] = deque()
        self.operations: list[str] = []

    def values_a(self) -> list[int]:
        """Values of stack a, top first."""
        return [element.value for element in self.a]

    def values_b(self) -> list[int]:
        """Values of stack b, top first."""
        return [element.value for element in self.b]

    @staticmethod
    def _swap(stack: deque[Element]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: deque[Element]) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[Element]) -> None:
        stack.rotate(1)

    def _record(self, name: str) -> None:
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self._swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self._swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of b onto a; nothing happens when b is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of a onto b; nothing happens when a is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._record("rrr")